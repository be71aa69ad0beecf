"""FastAPI application factory for the OfficeDesk staff and office API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from officedesk.api.limiter import limiter
from officedesk.api.route_table import ensure_unique_routes
from officedesk.config import settings
from officedesk.database.engine import engine
from officedesk.exceptions import AppException, InternalServerError, RateLimitException, ValidationException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle: dispose async engine on shutdown."""
    logger.info("OfficeDesk API starting (environment=%s)", settings.environment)
    yield
    await engine.dispose()


def _get_request_id(request: Request) -> str:
    """Retrieve the request ID stored by RequestIdMiddleware."""
    return getattr(request.state, "request_id", "unknown")


def _error_response(request: Request, exc: AppException) -> JSONResponse:
    """Render an AppException as ``{message, statusCode, name, ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "statusCode": exc.status_code,
            "name": exc.code,
            "details": exc.details,
            "requestId": _get_request_id(request),
        },
    )


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="OfficeDesk API",
        description="Municipal office and staff management with role-based access control.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    # Rate limiter
    application.state.limiter = limiter

    # --- Middleware (last added = outermost in Starlette) ---

    # CORS: configured via CORS_ORIGINS env var, never wildcard with credentials
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID: registered last so it runs first (outermost)
    from officedesk.middleware.request_id import RequestIdMiddleware

    application.add_middleware(RequestIdMiddleware)

    # --- Routers ---
    from officedesk.api.v1 import v1_router

    application.include_router(v1_router)

    # --- Exception Handlers ---

    @application.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s: %s", exc.code, exc.message)
        return _error_response(request, exc)

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {"field": ".".join(str(loc) for loc in err.get("loc", [])), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return _error_response(request, ValidationException("Validation failed", details=details))

    @application.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        return _error_response(request, RateLimitException(str(exc.detail)))

    @application.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled exception: %s", exc)
        return _error_response(request, InternalServerError("An unexpected error occurred."))

    # Health check
    @application.get("/health")
    async def health_check() -> dict:
        return {"status": "ok"}

    ensure_unique_routes(application)
    return application


app = create_app()
