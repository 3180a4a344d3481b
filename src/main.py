import asyncio
import logging
from contextlib import asynccontextmanager

import sentry_sdk
from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sqlalchemy.exc import SQLAlchemyError

from src.auth.router import router as auth_router
from src.config.logging import setup_logging
from src.config.settings import settings
from src.events.routers import router as events_router
from src.exceptions import TransientFailure, ValidationError, WeddingPlatformError
from src.guests.routers import router as guests_router
from src.messaging.routers import router as messaging_router
from src.photos.routers import router as photos_router
from src.registry.routers import router as registry_router
from src.routers.healthz.router import router as healthz_router
from src.rsvp.routers import router as rsvp_router
from src.seating.routers import router as seating_router
from src.tenants.routers import router as tenants_router

setup_logging()
logger = logging.getLogger(__name__)


async def run_migrations():
    alembic_cfg = Config("alembic.ini")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        await run_migrations()
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Wedding Platform API",
    description="Multi-tenant API for wedding sites, guest lists, RSVPs, seating and registries",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WeddingPlatformError)
async def handle_platform_error(request: Request, exc: WeddingPlatformError) -> JSONResponse:
    content: dict = {"detail": exc.message}
    if isinstance(exc, ValidationError) and exc.field_errors:
        content["errors"] = exc.field_errors
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Same shape as ValidationError: field name -> first message
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.setdefault(".".join(location) or "body", error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=422,
        content={"detail": next(iter(errors.values()), "Invalid data"), "errors": errors},
    )


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=503, content={"detail": TransientFailure.default_message})


# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(auth_router, tags=["Auth"])
app.include_router(tenants_router, tags=["Tenants"])
app.include_router(guests_router, tags=["Guests"])
app.include_router(events_router, tags=["Events"])
app.include_router(rsvp_router, tags=["RSVP"])
app.include_router(seating_router, tags=["Seating"])
app.include_router(registry_router, tags=["Registry"])
app.include_router(messaging_router, tags=["Messaging"])
app.include_router(photos_router, tags=["Photos"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Wedding Platform API"}
