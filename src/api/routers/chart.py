"""Live chart endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from src.api.dependencies import get_chart_session, get_settings_dependency
from src.api.models import ChartResponse, ResizeRequest, UpdateSourceRequest
from src.api.response import build_chart_response
from src.config.settings import Settings
from src.services.chart.plotly_export import render_html
from src.services.chart.surface import to_svg
from src.services.dashboard.session import ChartSession, resolve_source_url

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ChartResponse)
async def get_chart(
    session: ChartSession = Depends(get_chart_session),  # noqa: B008
) -> dict[str, Any]:
    """Current series, axis range and draw instructions."""
    return build_chart_response(session)


@router.get("/svg")
async def get_chart_svg(
    session: ChartSession = Depends(get_chart_session),  # noqa: B008
) -> Response:
    """Current drawing as SVG markup."""
    return Response(content=to_svg(session.instructions), media_type="image/svg+xml")


@router.get("/html", response_class=HTMLResponse)
async def get_chart_html(
    session: ChartSession = Depends(get_chart_session),  # noqa: B008
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HTMLResponse:
    """Current drawing as an interactive plotly page."""
    return HTMLResponse(render_html(session.instructions, title=settings.app_name))


@router.post("/refresh", response_model=ChartResponse)
async def refresh_chart(
    session: ChartSession = Depends(get_chart_session),  # noqa: B008
) -> dict[str, Any]:
    """Fetch now and redraw, independent of the poll timer."""
    await session.refresh()
    return build_chart_response(session)


@router.put("/source", response_model=ChartResponse)
async def update_source(
    request: UpdateSourceRequest,
    session: ChartSession = Depends(get_chart_session),  # noqa: B008
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> dict[str, Any]:
    """Switch source and interval, then restart polling with a fresh baseline."""
    endpoint = resolve_source_url(settings, request.source, request.url)
    await session.update_source(endpoint, request.interval_seconds)
    return build_chart_response(session)


@router.put("/size", response_model=ChartResponse)
async def resize_chart(
    request: ResizeRequest,
    session: ChartSession = Depends(get_chart_session),  # noqa: B008
) -> dict[str, Any]:
    """Resize the surface and redraw from cached data without fetching."""
    session.resize(request.width, request.height)
    return build_chart_response(session)
