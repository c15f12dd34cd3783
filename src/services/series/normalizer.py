"""Pure-Python series normalization and change detection."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from src.config.constants import CHART_MARGIN_TOTAL
from src.services.series.errors import MalformedPointError
from src.services.series.models import DataPoint, PreparedSeries, RawPoint

logger = logging.getLogger(__name__)


def parse_raw_point(entry: Any) -> RawPoint:
    """Read one ``{x, value}`` entry of the wire payload."""
    if isinstance(entry, RawPoint):
        return entry
    if not isinstance(entry, Mapping):
        raise MalformedPointError(entry, "entry is not an object")
    if "x" not in entry:
        raise MalformedPointError(entry, "missing 'x' label")
    return RawPoint(label=str(entry["x"]), value=entry.get("value"))


def coerce_value(value: Any) -> float:
    """Convert a raw scalar to a finite float or raise MalformedPointError.

    Numbers and numeric strings (surrounding whitespace allowed) are accepted.
    Booleans, ``None``, blank strings, NaN and infinities are rejected.
    """
    if isinstance(value, bool) or value is None:
        raise MalformedPointError(value, "not a number")

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise MalformedPointError(value, "blank string")
        try:
            number = float(text)
        except ValueError as e:
            raise MalformedPointError(value, "not a number") from e
    else:
        raise MalformedPointError(value, f"unsupported type {type(value).__name__}")

    if not math.isfinite(number):
        raise MalformedPointError(value, "not finite")
    return number


def compute_step_x(source_width: float, point_count: int) -> float:
    """Horizontal pixel distance between consecutive points.

    Series with fewer than two points have no spacing and get 0.
    """
    if point_count <= 1:
        return 0
    return (source_width - CHART_MARGIN_TOTAL) / (point_count - 1)


def normalize_points(raw_points: Iterable[Any], source_width: float) -> PreparedSeries:
    """Build a PreparedSeries from raw entries, dropping unusable ones."""
    points: list[DataPoint] = []
    for entry in raw_points:
        try:
            raw = parse_raw_point(entry)
            points.append(DataPoint(label=raw.label, value=coerce_value(raw.value)))
        except MalformedPointError as e:
            logger.warning("Dropping point: %s", e)

    if not points:
        logger.warning("No valid data points found")
        return PreparedSeries.empty()

    values = [p.value for p in points]
    return PreparedSeries(
        points=tuple(points),
        max_value=max(values),
        min_value=min(values),
        step_x=compute_step_x(source_width, len(points)),
    )


def points_changed(previous: Sequence[DataPoint], current: Sequence[DataPoint]) -> bool:
    """Positional comparison of two series.

    Labels and values must match exactly at every index; a reordering counts
    as a change.
    """
    if len(previous) != len(current):
        return True
    for old, new in zip(previous, current):
        if old.label != new.label or old.value != new.value:
            return True
    return False
