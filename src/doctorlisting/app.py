"""
FastAPI application factory and main app configuration.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .api.routers import doctors, health
from .api.utils.responses import fail
from .api.utils.validation import first_validation_message
from .core.config import get_settings
from .core.exceptions import DoctorListingException
from .core.structured_logger import configure_logging
from .domain.errors import DomainError
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger = configure_logging(settings)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env}")

    # Initialize database connection (MongoDB + Beanie)
    from beanie import init_beanie
    from motor.motor_asyncio import AsyncIOMotorClient
    import certifi

    from .adapters.db.mongo.models.doctor_m import DoctorMongo

    mongo_uri = settings.database.uri
    timeout_ms = settings.database.server_selection_timeout_ms

    try:
        # Enable TLS only for Atlas SRV URIs
        if mongo_uri.startswith("mongodb+srv://"):
            client = AsyncIOMotorClient(
                mongo_uri,
                serverSelectionTimeoutMS=timeout_ms,
                tls=True,
                tlsCAFile=certifi.where(),
            )
        else:
            client = AsyncIOMotorClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)

        db = client.get_default_database(default=settings.database.db_name)
        await init_beanie(database=db, document_models=[DoctorMongo])
        logger.info(f"Database connection established (db={db.name})")
    except Exception:
        logger.error("Database connection failed", exc_info=True)
        raise

    logger.info(f"Server running on port {settings.port}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    client.close()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Doctor profile registry with filtered, paginated listing",
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Credentials cannot be combined with a wildcard origin
    allow_origins = settings.cors.allowed_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials="*" not in allow_origins,
        allow_methods=settings.cors.allowed_methods or ["*"],
        allow_headers=settings.cors.allowed_headers or ["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
        max_age=600,
    )

    app.add_middleware(PerformanceMiddleware, slow_request_ms=settings.logging.slow_request_ms)

    # Register X-Request-ID middleware after CORS etc.
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(doctors.router)

    @app.exception_handler(RequestValidationError)
    async def pydantic_error_handler(request: Request, exc: RequestValidationError):
        req_id = getattr(request.state, "request_id", None)
        message = first_validation_message(exc.errors())
        logging.getLogger("doctorlisting").info(
            f"Validation failed on {request.method} {request.url.path}: {message} | request_id={req_id}"
        )
        return fail(request, message, 400)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return fail(request, exc.message, 400)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return fail(request, str(exc), 400)

    @app.exception_handler(DoctorListingException)
    async def service_error_handler(request: Request, exc: DoctorListingException):
        req_id = getattr(request.state, "request_id", None)
        logging.getLogger("doctorlisting").error(
            f"{exc.error_code}: {exc.message} | request_id={req_id}", exc_info=exc
        )
        return fail(request, "Internal server error", 500)

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logging.getLogger("doctorlisting").error(
            f"Unhandled error: {type(exc).__name__} | request_id={req_id}", exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "request_id": req_id},
        )

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": "/docs",
            "endpoints": {
                "health": "GET /health",
                "add_doctor": "POST /add-doctor",
                "list_doctors": "GET /list-doctor-with-filter",
            },
        }

    return app


# Create the app instance
app = create_app()
