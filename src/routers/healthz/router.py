import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy import text

from src.config.database import async_session_manager
from src.config.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str
    environment: str


class ReadinessResponse(HealthCheckResponse):
    database: str


async def ping_database() -> None:
    async with async_session_manager(auto_commit=False) as session:
        await session.execute(text("SELECT 1"))


def get_database_check():
    return ping_database


@router.get("/", response_model=HealthCheckResponse)
async def health_check(request: Request) -> HealthCheckResponse:
    """Liveness: the process is up and serving requests."""
    return HealthCheckResponse(
        status="healthy", version=request.app.version, environment=settings.ENVIRONMENT
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    request: Request, check_database=Depends(get_database_check)
) -> ReadinessResponse:
    """
    Readiness: the database answers.
    A failing database surfaces as the generic 503 of the SQLAlchemyError handler.
    """
    await check_database()
    return ReadinessResponse(
        status="healthy",
        version=request.app.version,
        environment=settings.ENVIRONMENT,
        database="ok",
    )
