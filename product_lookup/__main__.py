"""Command-line entry point for the Product Lookup Service.

Flags override values from the environment and ``.env``.
"""

import argparse
import sys
from typing import Dict, List, Optional

from product_lookup.core.config import Settings, load_env_file
from product_lookup.core.exceptions import ConfigurationError

# flag dest -> settings field
FLAG_SETTINGS = {
    "access": "AMAZON_ACCESS_KEY",
    "secret": "AMAZON_SECRET_KEY",
    "tag": "AMAZON_ASSOCIATE_TAG",
    "domain": "AMAZON_DOMAIN",
    "host": "HOST",
    "port": "PORT",
    "cache_dir": "CACHE_DIR",
    "redis_url": "REDIS_URL",
    "log_level": "LOG_LEVEL",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-lookup",
        description="Serve product records looked up from the Product Advertising API.",
    )
    parser.add_argument("--access", help="aws access id")
    parser.add_argument("--secret", help="aws secret key")
    parser.add_argument("--tag", help="amazon associate tag")
    parser.add_argument("--domain", help="amazon domain (default: JP)")
    parser.add_argument("--host", help="interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="port number (default: 8080)")
    parser.add_argument("--cache-dir", dest="cache_dir", help="directory for json cache")
    parser.add_argument("--redis-url", dest="redis_url", help="url of redis server")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="logging level (default: INFO)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Builds settings from the environment, overridden by any given flags."""
    overrides: Dict[str, object] = {
        field: getattr(args, dest)
        for dest, field in FLAG_SETTINGS.items()
        if getattr(args, dest) is not None
    }
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_env_file()
    settings = settings_from_args(args)

    from product_lookup.application import run

    try:
        run(settings)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
