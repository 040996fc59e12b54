"""Character-grid render collaborator used by the Textual demo."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, Sequence, Tuple

from line_to_definition.connector import DrawingBox, LineDescriptor, Orientation
from line_to_definition.host import RenderHandle

GLYPHS = {
    Orientation.VERTICAL: "│",
    Orientation.DESCENDING: "╲",
    Orientation.ASCENDING: "╱",
}

Cell = Tuple[int, int]  # (line, column)


@dataclass(frozen=True, slots=True)
class CanvasOverlay:
    box: DrawingBox
    descriptor: LineDescriptor

    def cells(self) -> Iterator[Cell]:
        """Yield the grid cells the line crosses between its two endpoints.

        The endpoint lines hold the words themselves, so painting starts
        ``top_offset_lines`` below the top edge and covers ``height_lines - 1``
        rows, matching the pixel box a style-based host would draw.
        """

        rect = self.box.range
        rows = self.box.height_lines - 1
        if rows <= 0:
            return
        span = rect.end.column - rect.start.column
        for step in range(rows):
            line = rect.start.line + self.box.top_offset_lines + step
            fraction = (step + 1) / self.box.height_lines
            if self.descriptor.orientation is Orientation.VERTICAL:
                column = rect.start.column
            elif self.descriptor.orientation is Orientation.DESCENDING:
                column = rect.start.column + round(span * fraction)
            else:
                column = rect.end.column - round(span * fraction)
            yield (line, column)


class CanvasRenderer:
    """Keeps live overlays keyed by handle and paints them onto text lines."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._overlays: Dict[RenderHandle, CanvasOverlay] = {}

    @property
    def overlays(self) -> Dict[RenderHandle, CanvasOverlay]:
        return dict(self._overlays)

    def draw_connector(
        self, box: DrawingBox, descriptor: LineDescriptor, line_height: int
    ) -> RenderHandle:
        del line_height  # grid cells are one line tall
        handle = next(self._ids)
        self._overlays[handle] = CanvasOverlay(box=box, descriptor=descriptor)
        return handle

    def release_connector(self, handle: RenderHandle) -> None:
        self._overlays.pop(handle, None)

    def paint(self, lines: Sequence[str]) -> Dict[Cell, Tuple[str, LineDescriptor]]:
        """Return glyphs to draw per cell; cells covered by text are skipped."""

        painted: Dict[Cell, Tuple[str, LineDescriptor]] = {}
        for overlay in self._overlays.values():
            glyph = GLYPHS[overlay.descriptor.orientation]
            for line, column in overlay.cells():
                if line >= len(lines):
                    continue
                text = lines[line]
                if column < len(text) and not text[column].isspace():
                    continue
                painted[(line, column)] = (glyph, overlay.descriptor)
        return painted


__all__ = ["CanvasOverlay", "CanvasRenderer", "GLYPHS"]
