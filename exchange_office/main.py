"""Application entry point: routers, error handlers, startup and shutdown."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exchange_office import __version__
from exchange_office.core.config import get_settings
from exchange_office.core.container import get_container
from exchange_office.core.logging import configure_logging
from exchange_office.infrastructure.database.session import dispose_engine, get_session_factory, init_db
from exchange_office.interfaces.http import create_api_router
from exchange_office.interfaces.http.errors import register_error_handlers
from exchange_office.modules.rates import RateService

settings = get_settings()
logger = logging.getLogger(__name__)


async def seed_default_rates() -> None:
    async with get_session_factory()() as session:
        await RateService.with_session(session).initialize_defaults()
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    await init_db()
    await seed_default_rates()

    container = get_container()
    refresher = container.rate_refresher
    if refresher is not None:
        refresher.start()
    logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
    try:
        yield
    finally:
        if refresher is not None:
            await refresher.stop()
        await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Retail currency exchange portal API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()
