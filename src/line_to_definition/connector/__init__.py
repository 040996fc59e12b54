"""Orientation selection, drawing box, and line descriptors."""

from .descriptor import LineDescriptor, build_line_descriptor
from .orientation import (
    ASCENDING_WIDTH_TRIM,
    MIN_WIDTH_CHARS,
    TOP_INSET_LINES,
    DrawingBox,
    Orientation,
    compute_drawing_box,
    select_orientation,
)
from .svg import background_image, decoration_css, render_svg

__all__ = [
    "Orientation",
    "DrawingBox",
    "LineDescriptor",
    "select_orientation",
    "compute_drawing_box",
    "build_line_descriptor",
    "render_svg",
    "background_image",
    "decoration_css",
    "TOP_INSET_LINES",
    "ASCENDING_WIDTH_TRIM",
    "MIN_WIDTH_CHARS",
]
