"""Series models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawPoint:
    """A point as received from the source, value not yet validated."""

    label: str
    value: Any


@dataclass(frozen=True)
class DataPoint:
    """A labeled point whose value is a finite number."""

    label: str
    value: float


@dataclass(frozen=True)
class PreparedSeries:
    """Normalized series plus the metrics the renderer needs.

    ``points`` keeps source order; the x axis is positional.
    """

    points: tuple[DataPoint, ...] = field(default_factory=tuple)
    max_value: float = 0
    min_value: float = 0
    step_x: float = 0

    @classmethod
    def empty(cls) -> "PreparedSeries":
        """Degenerate series: no usable data."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.points

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [{"label": p.label, "value": p.value} for p in self.points],
            "max_value": self.max_value,
            "min_value": self.min_value,
            "step_x": self.step_x,
        }
