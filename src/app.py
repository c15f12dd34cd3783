"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.infrastructure.logging.logger import setup_logging
from src.services.dashboard.session import create_chart_session

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate configuration at startup."""
    if settings.canvas_width <= 100 or settings.canvas_height <= 100:
        logger.warning(
            "Canvas %sx%s leaves no room inside the 50px margins",
            settings.canvas_width,
            settings.canvas_height,
        )
    if not settings.data_url:
        logger.warning("data_url is empty, every poll will fail until a source is set")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s", settings.app_name)
    _validate_startup_config(settings)

    session = create_chart_session(settings)
    app.state.chart_session = session
    if settings.poll_on_startup:
        # Server is not listening yet; the first tick draws the chart.
        await session.start(fetch_now=False)

    yield
    logger.info("Shutting down %s", settings.app_name)
    session.stop()
    try:
        await session.close()
    except Exception as e:
        logger.error("Error closing chart session: %s", e, exc_info=True)
    app.state.chart_session = None


app = FastAPI(
    title=settings.app_name,
    description="Polls a labeled numeric series and renders it as a line chart",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")
