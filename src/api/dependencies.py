"""FastAPI dependencies."""

from functools import lru_cache

from fastapi import HTTPException, Request

from src.config.settings import Settings, get_settings
from src.services.dashboard.session import ChartSession


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


def get_chart_session(request: Request) -> ChartSession:
    """Return the chart session created by the application lifespan."""
    session = getattr(request.app.state, "chart_session", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Chart session is not running")
    return session
