"""Text-space coordinates: positions, ranges, and shape validation."""

from __future__ import annotations

from dataclasses import dataclass

from line_to_definition.errors import LineToDefinitionError


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based ``(line, column)`` coordinate, ordered lexicographically."""

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two positions with ``start <= end``."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"range start {self.start} is after end {self.end}")

    @classmethod
    def of(cls, start_line: int, start_column: int, end_line: int, end_column: int) -> "Range":
        return cls(Position(start_line, start_column), Position(end_line, end_column))

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def contains(self, position: Position) -> bool:
        return self.start <= position <= self.end


class InvalidRangeShape(LineToDefinitionError):
    """Raised when a range expected to sit on one line spans several."""

    def __init__(self, message: str, *, range: Range | None = None) -> None:
        super().__init__(message)
        self.range = range


def ensure_single_line(range: Range) -> Range:
    if not range.is_single_line:
        raise InvalidRangeShape(
            f"expected a single-line range, got lines {range.start.line}-{range.end.line}",
            range=range,
        )
    return range


__all__ = ["Position", "Range", "InvalidRangeShape", "ensure_single_line"]
