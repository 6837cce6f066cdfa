from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from product_lookup.core.exceptions import APIException, ValidationException
from product_lookup.core.logging import get_logger

# Initialize logger
logger = get_logger(__name__)


async def handle_validation_exception(request: Request, exc: ValidationException) -> PlainTextResponse:
    """
    Handle rejected requests.

    Args:
        request: FastAPI request object
        exc: ValidationException instance

    Returns:
        PlainTextResponse: 400 response with the diagnostic message
    """
    logger.warning(
        f"Validation error: {exc.detail}",
        extra={"error_code": exc.code, "context": exc.context}
    )
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


async def handle_api_exception(request: Request, exc: APIException) -> PlainTextResponse:
    """
    Handle upstream, mapping and serialization failures.

    Args:
        request: FastAPI request object
        exc: APIException instance

    Returns:
        PlainTextResponse: Error response with the diagnostic message
    """
    logger.error(
        f"API Exception: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "error_code": exc.code,
            "context": exc.context
        }
    )
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


async def handle_unexpected_exception(request: Request, exc: Exception) -> PlainTextResponse:
    """Confine an unexpected failure to the request that raised it."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=exc)
    return PlainTextResponse(
        "internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Configure exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ValidationException, handle_validation_exception)
    app.add_exception_handler(APIException, handle_api_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
