"""Declarative vector-line descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from line_to_definition.config import StyleConfig

from .orientation import Orientation

# (x1, y1, x2, y2) in percent of the drawing box.
ENDPOINTS: Mapping[Orientation, tuple[int, int, int, int]] = MappingProxyType(
    {
        Orientation.VERTICAL: (50, 0, 50, 100),
        Orientation.DESCENDING: (0, 0, 100, 100),
        Orientation.ASCENDING: (100, 0, 0, 100),
    }
)


@dataclass(frozen=True, slots=True)
class LineDescriptor:
    orientation: Orientation
    x1: int
    y1: int
    x2: int
    y2: int
    color: str
    width: float
    opacity_percent: float

    @property
    def start(self) -> tuple[int, int]:
        return (self.x1, self.y1)

    @property
    def end(self) -> tuple[int, int]:
        return (self.x2, self.y2)


def build_line_descriptor(orientation: Orientation, style: StyleConfig) -> LineDescriptor:
    x1, y1, x2, y2 = ENDPOINTS[orientation]
    return LineDescriptor(
        orientation=orientation,
        x1=x1,
        y1=y1,
        x2=x2,
        y2=y2,
        color=style.line_color,
        width=style.line_width,
        opacity_percent=style.line_opacity,
    )


__all__ = ["LineDescriptor", "build_line_descriptor", "ENDPOINTS"]
