from fastapi import APIRouter, Response, status

from product_lookup.core.logging import get_logger

# Initialize router and logger
health_router = APIRouter()
logger = get_logger(__name__)


@health_router.get(
    "/hc",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    response_class=Response,
)
async def get_health() -> Response:
    """Always answers 200 with an empty body."""
    logger.debug("Health check requested")
    return Response(status_code=status.HTTP_200_OK)
