"""Storage liveness probe."""

from datetime import UTC, datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.expovote.api.dependencies import DBSession
from src.expovote.core.logging import get_logger
from src.expovote.schemas import HealthError, HealthOk

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    responses={
        200: {"model": HealthOk, "description": "Database reachable"},
        503: {"model": HealthError, "description": "Database unreachable"},
    },
)
async def health(session: DBSession) -> JSONResponse:
    """Check that the database answers a trivial query."""
    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("Health check failed", error=str(e))
        body = HealthError(error=str(e))
        return JSONResponse(
            content=body.model_dump(), status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    body = HealthOk(timestamp=datetime.now(UTC).isoformat())
    return JSONResponse(content=body.model_dump(), status_code=status.HTTP_200_OK)
