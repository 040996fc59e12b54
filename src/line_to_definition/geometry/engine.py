"""Pure geometry helpers used to place the connector overlay."""

from __future__ import annotations

from .positions import Position, Range, ensure_single_line


def center_of_range(start: int, end: int) -> int:
    """Midpoint of ``[start, end]`` rounded down, so even widths lean to ``start``."""

    return start + (end - start) // 2


def center_of_word_range(range: Range) -> Position:
    ensure_single_line(range)
    return Position(
        range.start.line, center_of_range(range.start.column, range.end.column)
    )


def bounding_range(a: Position, b: Position) -> Range:
    """Axis-aligned rectangle spanning both positions on both axes."""

    return Range(
        Position(min(a.line, b.line), min(a.column, b.column)),
        Position(max(a.line, b.line), max(a.column, b.column)),
    )


def chars_to_css(chars: int) -> str:
    return f"{chars}ch"


def lines_to_css(lines: int, line_height: int) -> str:
    return f"{lines * line_height}px"


__all__ = [
    "center_of_range",
    "center_of_word_range",
    "bounding_range",
    "chars_to_css",
    "lines_to_css",
]
