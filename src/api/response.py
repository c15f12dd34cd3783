"""Standardized response builder for ChartResponse."""

from typing import Any

from src.api.models import ChartResponse
from src.services.dashboard.session import ChartSession


def build_chart_response(session: ChartSession) -> dict[str, Any]:
    """Build a ChartResponse-compatible dict with Pydantic validation."""
    instructions = session.instructions
    axis = instructions.axis
    fields: dict[str, Any] = {
        "endpoint": session.poller.endpoint,
        "interval_ms": session.poller.interval_ms,
        "polling": session.is_running,
        "width": instructions.width,
        "height": instructions.height,
        "series": session.series.to_dict(),
        "axis": {
            "start": axis.start,
            "end": axis.end,
            "step": axis.step,
            "tick_count": axis.tick_count,
        },
        "drawing": instructions.to_dict(),
    }
    return ChartResponse(**fields).model_dump()
