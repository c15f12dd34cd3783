"""Rendering surfaces that consume DrawInstructions."""

import logging
import xml.etree.ElementTree as ET
from typing import Protocol

from src.services.chart.models import DrawInstructions

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class RenderSurface(Protocol):
    """A drawing target whose size is readable synchronously."""

    @property
    def current_width(self) -> float: ...

    @property
    def current_height(self) -> float: ...

    def resize(self, width: float, height: float) -> None: ...

    def draw(self, instructions: DrawInstructions) -> None: ...


def _num(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def to_svg(instructions: DrawInstructions) -> str:
    """Serialize draw instructions to an SVG document string."""
    svg = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": "100%",
            "height": _num(instructions.height),
            "viewBox": f"0 0 {_num(instructions.width)} {_num(instructions.height)}",
        },
    )

    for label, line in zip(instructions.y_labels, instructions.grid_lines):
        text = ET.SubElement(
            svg, "text", {"x": _num(label.x), "y": _num(label.y), "fill": label.fill}
        )
        text.text = label.text
        ET.SubElement(
            svg,
            "line",
            {
                "x1": _num(line.x1),
                "y1": _num(line.y),
                "x2": _num(line.x2),
                "y2": _num(line.y),
                "stroke": line.stroke,
                "stroke-dasharray": line.dash,
            },
        )

    for label in instructions.x_labels:
        attrs = {"x": _num(label.x), "y": _num(label.y), "fill": label.fill}
        if label.rotation:
            attrs["transform"] = f"rotate({_num(label.rotation)}, {_num(label.x)}, {_num(label.y)})"
        text = ET.SubElement(svg, "text", attrs)
        text.text = label.text

    for marker in instructions.markers:
        ET.SubElement(
            svg,
            "circle",
            {
                "cx": _num(marker.cx),
                "cy": _num(marker.cy),
                "r": _num(marker.radius),
                "fill": marker.fill,
                "class": "data-point",
                "data-value": _num(marker.value),
            },
        )

    polyline = instructions.polyline
    ET.SubElement(
        svg,
        "polyline",
        {
            "points": " ".join(f"{_num(x)},{_num(y)}" for x, y in polyline.points),
            "fill": "none",
            "stroke": polyline.stroke,
            "stroke-width": _num(polyline.stroke_width),
        },
    )

    return ET.tostring(svg, encoding="unicode")


class SvgSurface:
    """In-memory SVG drawing surface.

    Each ``draw`` replaces the previous drawing entirely.
    """

    def __init__(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._instructions: DrawInstructions | None = None
        self._markup = ""
        self.draw_count = 0

    @property
    def current_width(self) -> float:
        return self._width

    @property
    def current_height(self) -> float:
        return self._height

    @property
    def instructions(self) -> DrawInstructions | None:
        return self._instructions

    @property
    def markup(self) -> str:
        if not self._markup:
            return (
                f'<svg xmlns="{SVG_NS}" width="100%" height="{_num(self._height)}" '
                f'viewBox="0 0 {_num(self._width)} {_num(self._height)}" />'
            )
        return self._markup

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self._width = width
        self._height = height

    def draw(self, instructions: DrawInstructions) -> None:
        self._instructions = instructions
        self._markup = to_svg(instructions)
        self.draw_count += 1
        logger.debug("SVG surface redrawn (%d markers)", len(instructions.markers))
