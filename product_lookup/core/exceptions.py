from fastapi import status
from typing import Any, Dict, Optional


class APIException(Exception):
    """
    Base exception for errors that are reported to the client.

    The detail is written verbatim as the plain-text response body.
    """

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        code: str = "internal_error",
        context: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for structured logging."""
        return {
            "code": self.code,
            "message": self.detail,
            "status_code": self.status_code,
            "context": self.context
        }


class ValidationException(APIException):
    """Raised when the request does not carry a usable item id."""

    def __init__(
        self,
        detail: str = "Validation error",
        code: str = "validation_error",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        merged_context = {"field": field} if field else {}
        if context:
            merged_context.update(context)

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            code=code,
            context=merged_context
        )


class UpstreamError(APIException):
    """Exception raised when the product catalog lookup fails."""

    def __init__(
        self,
        detail: str = "Product catalog lookup failed",
        code: str = "upstream_error",
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            code=code,
            context=context
        )
        self.original_exception = original_exception

        if original_exception is not None:
            self.context["original_error"] = str(original_exception)


class MappingError(APIException):
    """Exception raised when an upstream response cannot be turned into a record."""

    def __init__(
        self,
        detail: str = "Failed to map upstream response",
        code: str = "mapping_error",
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            code=code,
            context=context
        )


class SerializationError(APIException):
    """Exception raised when a record cannot be encoded as JSON."""

    def __init__(
        self,
        detail: str = "Failed to serialize record",
        code: str = "serialization_error",
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            code=code,
            context=context
        )


class CacheError(Exception):
    """
    Base exception for cache backend failures.

    Cache errors are internal: they are logged and never reach the client.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class CacheLookupError(CacheError):
    """Raised when a cache read fails for a reason other than a missing key."""


class CacheWriteError(CacheError):
    """Raised when a record cannot be stored in the cache."""


class ConfigurationError(Exception):
    """Raised at startup when the settings cannot produce a working service."""
