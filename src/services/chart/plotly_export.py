"""Plotly rendering of DrawInstructions as an interactive HTML page."""

import plotly.graph_objects as go

from src.services.chart.models import DrawInstructions


def _apply_styling(fig: go.Figure, instructions: DrawInstructions, title: str | None) -> None:
    """Pin both axes to canvas pixels so the drawing matches the SVG surface."""
    fig.update_layout(
        title=title,
        template="plotly_white",
        hovermode="closest",
        showlegend=False,
        width=int(instructions.width),
        height=int(instructions.height),
        font={"family": "Inter, Arial, sans-serif", "size": 14},
        margin={"l": 0, "r": 0, "t": 0, "b": 0},
    )
    fig.update_xaxes(range=[0, instructions.width], visible=False, fixedrange=True)
    # Pixel y grows downward.
    fig.update_yaxes(range=[instructions.height, 0], visible=False, fixedrange=True)


def build_figure(instructions: DrawInstructions, title: str | None = None) -> go.Figure:
    """Translate the primitives into a plotly figure.

    Markers carry their data values, shown on hover as ``Value: <n>``.
    """
    fig = go.Figure()

    for line in instructions.grid_lines:
        fig.add_shape(
            type="line",
            x0=line.x1,
            x1=line.x2,
            y0=line.y,
            y1=line.y,
            line={"color": line.stroke, "dash": "dash", "width": 1},
            layer="below",
        )

    for label in (*instructions.y_labels, *instructions.x_labels):
        fig.add_annotation(
            x=label.x,
            y=label.y,
            text=label.text,
            showarrow=False,
            xanchor="left",
            yanchor="bottom",
            textangle=label.rotation,
            font={"color": label.fill},
        )

    markers = instructions.markers
    fig.add_trace(
        go.Scatter(
            x=[x for x, _ in instructions.polyline.points],
            y=[y for _, y in instructions.polyline.points],
            mode="lines+markers",
            line={
                "color": instructions.polyline.stroke,
                "width": instructions.polyline.stroke_width,
            },
            marker={
                "size": [m.radius * 2 for m in markers],
                "color": [m.fill for m in markers],
            },
            customdata=[m.value for m in markers],
            text=[m.label for m in markers],
            hovertemplate="%{text}<br>Value: %{customdata}<extra></extra>",
        )
    )

    _apply_styling(fig, instructions, title)
    return fig


def render_html(instructions: DrawInstructions, title: str | None = None) -> str:
    """Render the drawing to a standalone HTML page (plotly.js from CDN)."""
    fig = build_figure(instructions, title)
    return fig.to_html(full_html=True, include_plotlyjs="cdn")
