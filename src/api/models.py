"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from src.config.constants import DataSource


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")


class SamplePoint(BaseModel):
    """One point of the random sample series."""

    x: str
    value: int


class SampleDataResponse(BaseModel):
    """Payload of the sample data endpoint, shaped like any polled source."""

    data: list[SamplePoint]


class SeriesPointModel(BaseModel):
    label: str
    value: float


class SeriesModel(BaseModel):
    """Normalized series currently drawn."""

    points: list[SeriesPointModel] = Field(default_factory=list)
    max_value: float = 0
    min_value: float = 0
    step_x: float = 0


class AxisModel(BaseModel):
    start: float
    end: float
    step: float
    tick_count: int


class ChartResponse(BaseModel):
    """Current chart state."""

    endpoint: str = Field(..., description="URL being polled")
    interval_ms: int = Field(..., description="Poll interval in milliseconds")
    polling: bool = Field(..., description="Whether the poll timer is active")
    width: float
    height: float
    series: SeriesModel
    axis: AxisModel
    drawing: dict[str, Any] = Field(..., description="Draw instructions for the current render")


class UpdateSourceRequest(BaseModel):
    """Switch the polled source and interval."""

    source: DataSource | None = Field(None, description="Predefined source; ignored when url is set")
    url: str | None = Field(None, description="Explicit endpoint URL")
    interval_seconds: int = Field(5, gt=0, description="Poll interval in seconds")


class ResizeRequest(BaseModel):
    """New rendering surface size in pixels."""

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
