import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import router
from .. import __version__
from ..config import settings
from ..core.registry import SourceRegistry
from ..logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: register all bundled holiday sources
    configure_logging(settings.log_level)
    SourceRegistry.discover_sources()
    if SourceRegistry.get_source(settings.holiday_source) is None:
        logger.warning("Configured holiday source %r is not registered", settings.holiday_source)
    logger.info("Holiday API ready with sources: %s", ", ".join(SourceRegistry.list_sources()))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Public holidays per country, grouped into ISO weeks",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    return app


app = create_app()
