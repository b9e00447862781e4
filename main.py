import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from activity_fanout.application.services import get_activity_services
from activity_fanout.config import get_settings
from activity_fanout.infrastructure.database import engine, initialize_database
from activity_fanout.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup; drain fan-out and release the engine on shutdown."""

    logging.basicConfig(level=get_settings().log_level.upper())
    initialize_database()
    yield
    if get_activity_services.cache_info().currsize:
        get_activity_services().close()
        get_activity_services.cache_clear()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
