"""Line orientation selection and the trimmed drawing box."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from line_to_definition.geometry import Position, Range

# Empirical corrections tuned to the host's glyph metrics. They are part of the
# drawing contract: a different rendering surface must re-measure them, not
# drop them.
TOP_INSET_LINES = 1
ASCENDING_WIDTH_TRIM = 1
MIN_WIDTH_CHARS = 2


class Orientation(str, Enum):
    """Shape of the connector inside its bounding box."""

    DESCENDING = "top-left-to-bottom-right"
    ASCENDING = "top-right-to-bottom-left"
    VERTICAL = "vertical"


def select_orientation(definition_center: Position, cursor_center: Position) -> Orientation:
    if definition_center.column == cursor_center.column:
        return Orientation.VERTICAL
    if definition_center.column < cursor_center.column:
        return Orientation.DESCENDING
    return Orientation.ASCENDING


@dataclass(frozen=True, slots=True)
class DrawingBox:
    """Visual rectangle derived from the raw bounding range."""

    range: Range
    width_chars: int
    height_lines: int
    top_offset_lines: int
    left_offset_chars: int

    def height_px(self, line_height: int) -> int:
        return max(0, (self.height_lines - 1) * line_height)

    def top_px(self, line_height: int) -> int:
        return self.top_offset_lines * line_height


def compute_drawing_box(rect: Range, orientation: Orientation) -> DrawingBox:
    trim = ASCENDING_WIDTH_TRIM if orientation is Orientation.ASCENDING else 0
    width = rect.end.column - rect.start.column - trim
    return DrawingBox(
        range=rect,
        width_chars=max(MIN_WIDTH_CHARS, width),
        height_lines=rect.end.line - rect.start.line,
        top_offset_lines=TOP_INSET_LINES,
        left_offset_chars=rect.start.column,
    )


__all__ = [
    "Orientation",
    "DrawingBox",
    "select_orientation",
    "compute_drawing_box",
    "TOP_INSET_LINES",
    "ASCENDING_WIDTH_TRIM",
    "MIN_WIDTH_CHARS",
]
