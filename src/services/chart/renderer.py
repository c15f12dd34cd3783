"""Line chart layout and drawing-instruction builder."""

import logging

from src.config.constants import (
    CHART_MARGIN,
    CHART_MARGIN_TOTAL,
    LABEL_ROTATION_DEGREES,
    LABEL_ROTATION_THRESHOLD,
    X_LABEL_OFFSET,
    Y_LABEL_X,
)
from src.services.chart.axis import compute_axis_range
from src.services.chart.models import (
    ChartLayout,
    DrawInstructions,
    GridLine,
    Marker,
    PointPosition,
    Polyline,
    TextLabel,
    Tick,
)
from src.services.series.models import PreparedSeries

logger = logging.getLogger(__name__)


def format_tick(value: float) -> str:
    """Tick labels are whole numbers."""
    return str(round(value))


class ChartRenderer:
    """Maps a PreparedSeries onto a fixed-margin canvas.

    Stateless: every call recomputes from the series it is given, and the
    series is never modified.
    """

    def layout(
        self,
        series: PreparedSeries,
        canvas_width: float,
        canvas_height: float,
    ) -> ChartLayout:
        """Compute axis ticks and point coordinates.

        Args:
            series: Normalized series (its ``step_x`` drives x positions)
            canvas_width: Surface width in pixels
            canvas_height: Surface height in pixels

        Returns:
            ChartLayout with ticks bottom-up and points in series order
        """
        axis = compute_axis_range(series.min_value, series.max_value)
        plot_height = canvas_height - CHART_MARGIN_TOTAL
        bottom_y = canvas_height - CHART_MARGIN
        center_y = CHART_MARGIN + plot_height / 2

        tick_count = axis.tick_count
        if tick_count > 1:
            pitch = plot_height / (tick_count - 1)
            ticks = tuple(
                Tick(value=axis.start + i * axis.step, y=bottom_y - i * pitch)
                for i in range(tick_count)
            )
        else:
            ticks = (Tick(value=axis.start, y=center_y),)

        positions: list[PointPosition] = []
        for i, point in enumerate(series.points):
            if axis.span == 0:
                y = center_y
            else:
                y = bottom_y - ((point.value - axis.start) / axis.span) * plot_height
            positions.append(
                PointPosition(
                    label=point.label,
                    value=point.value,
                    x=CHART_MARGIN + i * series.step_x,
                    y=y,
                )
            )

        return ChartLayout(
            axis=axis,
            ticks=ticks,
            point_positions=tuple(positions),
            rotate_labels=len(series.points) > LABEL_ROTATION_THRESHOLD,
        )

    def render(
        self,
        series: PreparedSeries,
        canvas_width: float,
        canvas_height: float,
    ) -> DrawInstructions:
        """Build the full set of primitives for one redraw."""
        layout = self.layout(series, canvas_width, canvas_height)

        grid_lines = tuple(
            GridLine(x1=CHART_MARGIN, x2=canvas_width - CHART_MARGIN, y=tick.y)
            for tick in layout.ticks
        )
        y_labels = tuple(
            TextLabel(x=Y_LABEL_X, y=tick.y, text=format_tick(tick.value))
            for tick in layout.ticks
        )

        label_y = canvas_height - X_LABEL_OFFSET
        rotation = LABEL_ROTATION_DEGREES if layout.rotate_labels else 0
        x_labels = tuple(
            TextLabel(x=pos.x, y=label_y, text=pos.label, rotation=rotation)
            for pos in layout.point_positions
        )

        markers = tuple(
            Marker(cx=pos.x, cy=pos.y, value=pos.value, label=pos.label)
            for pos in layout.point_positions
        )
        polyline = Polyline(points=tuple((pos.x, pos.y) for pos in layout.point_positions))

        logger.debug(
            "Rendered %d points on %sx%s (axis %s..%s step %s)",
            len(markers),
            canvas_width,
            canvas_height,
            layout.axis.start,
            layout.axis.end,
            layout.axis.step,
        )

        return DrawInstructions(
            width=canvas_width,
            height=canvas_height,
            axis=layout.axis,
            grid_lines=grid_lines,
            y_labels=y_labels,
            x_labels=x_labels,
            polyline=polyline,
            markers=markers,
        )
