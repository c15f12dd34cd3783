"""Chart geometry and drawing-instruction models."""

from dataclasses import asdict, dataclass, field
from typing import Any

from src.config.constants import (
    GRID_COLOR,
    GRID_DASH,
    LINE_WIDTH,
    MARKER_RADIUS,
    SERIES_COLOR,
    TEXT_COLOR,
)


@dataclass(frozen=True)
class AxisRange:
    """Value-axis range made of whole ticks."""

    start: float
    end: float
    step: float

    @property
    def tick_count(self) -> int:
        return int((self.end - self.start) // self.step) + 1

    @property
    def span(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Tick:
    """A labeled gridline position on the value axis."""

    value: float
    y: float


@dataclass(frozen=True)
class PointPosition:
    """Pixel position of a data point."""

    label: str
    value: float
    x: float
    y: float


@dataclass(frozen=True)
class ChartLayout:
    """Everything needed to place the chart on a canvas."""

    axis: AxisRange
    ticks: tuple[Tick, ...]
    point_positions: tuple[PointPosition, ...]
    rotate_labels: bool


@dataclass(frozen=True)
class GridLine:
    x1: float
    x2: float
    y: float
    stroke: str = GRID_COLOR
    dash: str = GRID_DASH


@dataclass(frozen=True)
class TextLabel:
    x: float
    y: float
    text: str
    rotation: float = 0
    fill: str = TEXT_COLOR


@dataclass(frozen=True)
class Marker:
    """Point marker; ``value`` is kept for hover inspection."""

    cx: float
    cy: float
    value: float
    label: str
    radius: float = MARKER_RADIUS
    fill: str = SERIES_COLOR


@dataclass(frozen=True)
class Polyline:
    points: tuple[tuple[float, float], ...]
    stroke: str = SERIES_COLOR
    stroke_width: float = LINE_WIDTH


@dataclass(frozen=True)
class DrawInstructions:
    """Vector primitives for one full redraw of the chart."""

    width: float
    height: float
    axis: AxisRange
    grid_lines: tuple[GridLine, ...] = field(default_factory=tuple)
    y_labels: tuple[TextLabel, ...] = field(default_factory=tuple)
    x_labels: tuple[TextLabel, ...] = field(default_factory=tuple)
    polyline: Polyline = field(default_factory=lambda: Polyline(points=()))
    markers: tuple[Marker, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
