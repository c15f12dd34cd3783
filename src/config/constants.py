"""
Constants, enums, and static values.
"""

from enum import Enum


class DataSource(str, Enum):
    """Selectable series sources."""

    LOCAL = "local"  # Random series served by this app
    ANYCHART = "anychart"  # Static AnyChart sample feed


# =============================================================================
# Chart layout (pixels)
# =============================================================================

CHART_MARGIN = 50
CHART_MARGIN_TOTAL = CHART_MARGIN * 2

Y_LABEL_X = 20
X_LABEL_OFFSET = 30

LABEL_ROTATION_THRESHOLD = 8
LABEL_ROTATION_DEGREES = 45

MARKER_RADIUS = 4
LINE_WIDTH = 2

# =============================================================================
# Axis tick policy: (max range, step), first match wins
# =============================================================================

TICK_STEPS: tuple[tuple[float, int], ...] = (
    (50, 10),
    (100, 25),
)
TICK_STEP_FALLBACK = 50

# =============================================================================
# Colors
# =============================================================================

SERIES_COLOR = "#007bff"
GRID_COLOR = "#e0e0e0"
TEXT_COLOR = "#000"
GRID_DASH = "5,5"

# =============================================================================
# Sample data endpoint
# =============================================================================

MAX_SAMPLE_POINTS = 500
