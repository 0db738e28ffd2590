"""
Main Application - Main Layer

ASGI application the dashboard host talks to. Builds the container, mounts
the data source routes (connectivity check, panel queries, templating
lookups) and opens them to browser-side callers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.main.config import get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import datasource_router
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Bootstrap from LOG_* variables so settings errors are logged too
configure_logging()
settings = get_settings()
update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and hold the datastore container while serving."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("datasource.starting", datastore_url=settings.datastore.url)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("datasource.stopped")


def create_app() -> FastAPI:
    """
    Build the data source API.

    Each call creates a fresh container from the current settings and wires
    the presentation routes to it.

    Returns:
        FastAPI: Application serving ``/``, ``/query``, ``/search`` and
        ``/sources``
    """
    settings = get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # The dashboard host calls from the browser in direct access mode
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(datasource_router)

    return app


app = create_app()
