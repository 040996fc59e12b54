"""SVG and CSS serialization for hosts that render via style decorations."""

from __future__ import annotations

from typing import Mapping, Union
from xml.sax.saxutils import escape

from line_to_definition.geometry import chars_to_css, lines_to_css

from .descriptor import LineDescriptor
from .orientation import DrawingBox

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
# Quotes are entity-encoded too: the SVG ends up inside a quoted CSS url().
ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def render_svg(descriptor: LineDescriptor) -> str:
    """Single-line SVG document stretched over the whole drawing box."""

    line = (
        f'<line x1="{descriptor.x1}%" y1="{descriptor.y1}%" '
        f'x2="{descriptor.x2}%" y2="{descriptor.y2}%" '
        f'stroke="{escape(descriptor.color, ATTRIBUTE_ENTITIES)}" '
        f'stroke-width="{_format_number(descriptor.width)}" '
        f'stroke-opacity="{_format_number(descriptor.opacity_percent)}%"/>'
    )
    return f'<svg width="100%" height="100%" xmlns="{SVG_NAMESPACE}">{line}</svg>'


def background_image(descriptor: LineDescriptor) -> str:
    return f"url('data:image/svg+xml,{render_svg(descriptor)}')"


def css_from_mapping(values: Mapping[str, Union[str, int]]) -> str:
    return " ".join(f"{key}:{value};" for key, value in values.items())


def decoration_css(box: DrawingBox, descriptor: LineDescriptor, line_height: int) -> str:
    """CSS for an absolutely positioned ``before`` pseudo-element."""

    return css_from_mapping(
        {
            "position": "absolute",
            "width": chars_to_css(box.width_chars),
            "height": lines_to_css(max(0, box.height_lines - 1), line_height),
            "top": lines_to_css(box.top_offset_lines, line_height),
            "display": "inline-block",
            "z-index": 1,
            "pointer-events": "none",
            "background-size": "100% 100%",
            "background-repeat": "no-repeat",
            "background-image": background_image(descriptor),
        }
    )


__all__ = ["render_svg", "background_image", "css_from_mapping", "decoration_css"]
