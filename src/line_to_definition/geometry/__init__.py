"""Text-space value types and the geometry engine."""

from .engine import (
    bounding_range,
    center_of_range,
    center_of_word_range,
    chars_to_css,
    lines_to_css,
)
from .positions import InvalidRangeShape, Position, Range, ensure_single_line

__all__ = [
    "Position",
    "Range",
    "InvalidRangeShape",
    "ensure_single_line",
    "center_of_range",
    "center_of_word_range",
    "bounding_range",
    "chars_to_css",
    "lines_to_css",
]
