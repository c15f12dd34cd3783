"""Sample data endpoint."""

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_settings_dependency
from src.api.models import SampleDataResponse
from src.config.constants import MAX_SAMPLE_POINTS
from src.config.settings import Settings
from src.services.sample.generator import generate_random_series

router = APIRouter()


@router.get("", response_model=SampleDataResponse)
async def get_sample_data(
    points: int | None = Query(None, ge=1, le=MAX_SAMPLE_POINTS),
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> SampleDataResponse:
    """Serve a fresh random series on every call."""
    count = points or settings.sample_point_count
    data = generate_random_series(count, settings.sample_value_min, settings.sample_value_max)
    return SampleDataResponse(data=data)
