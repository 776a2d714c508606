import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.app.api.v1 import clients
from src.app.api.validation import request_validation_exception_handler
from src.app.config import get_settings
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the client tables on startup."""
    container: Container = app.state.container
    logger.info("Starting Client Registry API...")

    db = container.database()
    await db.create_tables()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Client Registry API...")
    await db.dispose()


def create_app(container: Container, lifespan=default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=[
        "src.app.api.v1.clients",
    ])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Include routers
    app.include_router(clients.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {"message": "Welcome to Client Registry API"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
