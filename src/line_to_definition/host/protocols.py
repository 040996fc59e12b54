"""Boundary types describing what the core needs from a host editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Hashable, Optional, Protocol, Sequence

from line_to_definition.connector import DrawingBox, LineDescriptor
from line_to_definition.geometry import Position, Range

DocumentId = Hashable
RenderHandle = Hashable


@dataclass(frozen=True, slots=True)
class DefinitionCandidate:
    """One location returned by the host's definition provider."""

    target_document_id: DocumentId
    target_range: Range
    precise_target_range: Optional[Range] = None

    @property
    def best_range(self) -> Range:
        return self.precise_target_range or self.target_range


@dataclass(frozen=True, slots=True)
class ActiveEditor:
    """Snapshot of the focused editor at the time of a cursor event."""

    document_id: DocumentId
    cursor: Position


class DefinitionResolver(Protocol):
    def resolve_definition(
        self, document_id: DocumentId, position: Position
    ) -> Awaitable[Sequence[DefinitionCandidate]]:
        """Return every definition location known for ``position``."""
        ...


class WordRangeLookup(Protocol):
    def word_range_at(
        self, document_id: DocumentId, position: Position
    ) -> Optional[Range]:
        """Return the single-line word range under ``position`` if any."""
        ...


class RenderCollaborator(Protocol):
    """Turns declarative descriptors into on-screen overlays.

    ``box`` is already trimmed; ``box.range`` is the raw bounding rectangle.
    """

    def draw_connector(
        self, box: DrawingBox, descriptor: LineDescriptor, line_height: int
    ) -> RenderHandle:
        ...

    def release_connector(self, handle: RenderHandle) -> None:
        ...


__all__ = [
    "ActiveEditor",
    "DefinitionCandidate",
    "DefinitionResolver",
    "DocumentId",
    "RenderCollaborator",
    "RenderHandle",
    "WordRangeLookup",
]
