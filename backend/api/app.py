"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings as get_app_settings
from shared.exceptions import CampuzwayError
from .config import get_settings
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health, users
from modules.admin.routes import router as admin_router
from modules.articles.routes import router as articles_router
from modules.auth.routes import router as auth_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app_settings = get_app_settings()
    if not app_settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; sign-in will fail until it is configured")
    if not app_settings.super_admin_email:
        logger.warning("SUPER_ADMIN_EMAIL is not set; no account has super admin access")
    logger.info(f"Starting {app_settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {app_settings.app_name}")


async def campuzway_error_handler(request: Request, exc: CampuzwayError) -> JSONResponse:
    """Render a domain error with the status of its exception class."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.message}")

    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details or None)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body/query validation failures as 400."""
    errors = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    body = ValidationErrorResponse(details={"errors": errors})
    return JSONResponse(status_code=400, content=jsonable_encoder(body))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback and answer with JSON, never HTML."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = ErrorResponse(error="INTERNAL_ERROR", message="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.app_name,
        description="Authentication, roles and administration for Campuzway",
        version=app_settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error handlers
    app.add_exception_handler(CampuzwayError, campuzway_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(admin_router, prefix="/api/admin", tags=["admin"])
    app.include_router(articles_router, prefix="/api/admin/articles", tags=["articles"])

    return app


# Application instance for uvicorn
app = create_app()
