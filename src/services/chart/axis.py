"""Value-axis scaling."""

import math

from src.config.constants import TICK_STEP_FALLBACK, TICK_STEPS
from src.services.chart.models import AxisRange


def select_tick_step(value_range: float) -> int:
    """Pick a tick step from the span of the data."""
    for max_range, step in TICK_STEPS:
        if value_range <= max_range:
            return step
    return TICK_STEP_FALLBACK


def compute_axis_range(min_value: float, max_value: float) -> AxisRange:
    """Round ``[min_value, max_value]`` out to whole ticks.

    The axis starts at zero unless the data goes negative, in which case the
    start is the minimum floored to a whole step. The end is the maximum
    rounded up to a whole step.
    """
    step = select_tick_step(max_value - min_value)
    end = math.ceil(max_value / step) * step
    start = 0
    if min_value < 0:
        start = math.floor(min_value / step) * step
    return AxisRange(start=start, end=end, step=step)
