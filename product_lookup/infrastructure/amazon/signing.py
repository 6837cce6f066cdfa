"""
Request signing for the Product Advertising API REST endpoint.

Requests are authenticated with an HMAC-SHA256 signature over the
canonicalized query string (AWS signature version 2).
"""
import base64
import hashlib
import hmac
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional
from urllib.parse import quote

API_VERSION = "2013-08-01"
SERVICE_NAME = "AWSECommerceService"
REQUEST_PATH = "/onca/xml"

# Regional endpoint hosts by marketplace code
ENDPOINTS: Dict[str, str] = {
    "BR": "webservices.amazon.com.br",
    "CA": "webservices.amazon.ca",
    "CN": "webservices.amazon.cn",
    "DE": "webservices.amazon.de",
    "ES": "webservices.amazon.es",
    "FR": "webservices.amazon.fr",
    "IN": "webservices.amazon.in",
    "IT": "webservices.amazon.it",
    "JP": "webservices.amazon.co.jp",
    "MX": "webservices.amazon.com.mx",
    "UK": "webservices.amazon.co.uk",
    "US": "webservices.amazon.com",
}


def _encode(value: str) -> str:
    # RFC 3986: only unreserved characters stay literal
    return quote(value, safe="-_.~")


def canonical_query(params: Mapping[str, str]) -> str:
    """Sorts parameters by name and joins them percent-encoded."""
    return "&".join(
        f"{_encode(key)}={_encode(params[key])}" for key in sorted(params)
    )


def timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%SZ")


def sign(secret_key: str, host: str, query: str, method: str = "GET", path: str = REQUEST_PATH) -> str:
    """
    Computes the request signature.

    Args:
        secret_key: AWS secret key
        host: Endpoint host the request is sent to
        query: Canonical query string
        method: HTTP method
        path: Request path

    Returns:
        str: Base64-encoded HMAC-SHA256 signature
    """
    string_to_sign = "\n".join([method, host.lower(), path, query])
    digest = hmac.new(
        secret_key.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def build_signed_url(
    host: str,
    access_key: str,
    secret_key: str,
    associate_tag: str,
    operation_params: Mapping[str, str],
    now: Optional[datetime] = None,
) -> str:
    """
    Builds a fully signed request URL.

    Args:
        host: Regional endpoint host
        access_key: AWS access key id
        secret_key: AWS secret key
        associate_tag: Partner tag credited for the request
        operation_params: Operation-specific parameters (ItemId, Operation, ...)
        now: Optional request time, defaults to the current UTC time

    Returns:
        str: HTTPS URL including the Signature parameter
    """
    params = dict(operation_params)
    params.update({
        "AWSAccessKeyId": access_key,
        "AssociateTag": associate_tag,
        "Service": SERVICE_NAME,
        "Timestamp": timestamp(now),
        "Version": API_VERSION,
    })
    query = canonical_query(params)
    signature = sign(secret_key, host, query)
    return f"https://{host}{REQUEST_PATH}?{query}&Signature={_encode(signature)}"
