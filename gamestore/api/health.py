"""GET /api/health: liveness plus a database probe for load balancers."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from gamestore import SERVICE_NAME, __version__
from gamestore.core.config import settings
from gamestore.core.database import check_db_connected, get_db
from gamestore.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(response: Response, db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """200 when the store can reach its database, 503 otherwise."""
    if check_db_connected(db):
        return HealthResponse(
            status="OK",
            message="API is healthy",
            service=SERVICE_NAME,
            version=__version__,
            environment=settings.APP_ENV,
            database="connected",
        )
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(
        status="DEGRADED",
        message="Database unreachable",
        service=SERVICE_NAME,
        version=__version__,
        environment=settings.APP_ENV,
        database="disconnected",
    )
