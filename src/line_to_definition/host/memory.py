"""In-memory host collaborators for the demo adapter and tests."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from line_to_definition.connector import DrawingBox, LineDescriptor, decoration_css
from line_to_definition.geometry import Position, Range

from .protocols import DefinitionCandidate, DocumentId, RenderHandle

WORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(slots=True)
class TextDocument:
    """List-of-lines text storage with identifier lookup."""

    document_id: DocumentId
    _lines: List[str] = field(default_factory=lambda: [""])

    @classmethod
    def from_text(cls, document_id: DocumentId, text: str) -> "TextDocument":
        lines = text.splitlines()
        if not lines:
            lines = [""]
        elif text.endswith("\n"):
            lines.append("")
        return cls(document_id=document_id, _lines=list(lines))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    def word_range_at(self, position: Position) -> Optional[Range]:
        if position.line >= self.line_count:
            return None
        text = self._lines[position.line]
        for match in WORD_PATTERN.finditer(text):
            # A cursor sitting right after the last character still counts.
            if match.start() <= position.column <= match.end():
                return Range.of(position.line, match.start(), position.line, match.end())
        return None

    def text_in(self, range: Range) -> str:
        if not range.is_single_line:
            raise ValueError("text_in only supports single-line ranges")
        return self._lines[range.start.line][range.start.column : range.end.column]


class DocumentWorkspace:
    """Registry of open documents; answers word-range lookups."""

    def __init__(self, documents: Sequence[TextDocument] = ()) -> None:
        self._documents: Dict[DocumentId, TextDocument] = {}
        for document in documents:
            self.open(document)

    def open(self, document: TextDocument) -> TextDocument:
        self._documents[document.document_id] = document
        return document

    def get(self, document_id: DocumentId) -> Optional[TextDocument]:
        return self._documents.get(document_id)

    def word_range_at(
        self, document_id: DocumentId, position: Position
    ) -> Optional[Range]:
        document = self._documents.get(document_id)
        if document is None:
            return None
        return document.word_range_at(position)


class PatternDefinitionResolver:
    """Finds ``def``/``class``/assignment sites of a name in its own document."""

    TEMPLATES = (
        r"^\s*(?:async\s+)?def\s+({name})\b",
        r"^\s*class\s+({name})\b",
        r"^\s*({name})\s*(?::[^=]*)?=(?!=)",
    )

    def __init__(self, workspace: DocumentWorkspace) -> None:
        self.workspace = workspace
        self.requests: List[Tuple[DocumentId, Position]] = []

    async def resolve_definition(
        self, document_id: DocumentId, position: Position
    ) -> Sequence[DefinitionCandidate]:
        self.requests.append((document_id, position))
        document = self.workspace.get(document_id)
        if document is None:
            return []
        word = document.word_range_at(position)
        if word is None:
            return []
        name = re.escape(document.text_in(word))
        patterns = [re.compile(t.format(name=name)) for t in self.TEMPLATES]

        candidates: List[DefinitionCandidate] = []
        for line_no, text in enumerate(document.snapshot()):
            for pattern in patterns:
                match = pattern.match(text)
                if match is None:
                    continue
                precise = Range.of(line_no, match.start(1), line_no, match.end(1))
                candidates.append(
                    DefinitionCandidate(
                        target_document_id=document_id,
                        target_range=Range.of(line_no, 0, line_no, len(text)),
                        precise_target_range=precise,
                    )
                )
                break
        return candidates


@dataclass(slots=True)
class DrawnConnector:
    box: DrawingBox
    descriptor: LineDescriptor
    line_height: int
    css: str

    @property
    def rect(self) -> Range:
        return self.box.range


class RecordingRenderer:
    """Render collaborator that records the decoration CSS instead of painting."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.live: Dict[RenderHandle, DrawnConnector] = {}
        self.drawn: List[DrawnConnector] = []
        self.released: List[RenderHandle] = []

    def draw_connector(
        self, box: DrawingBox, descriptor: LineDescriptor, line_height: int
    ) -> RenderHandle:
        handle = next(self._ids)
        drawn = DrawnConnector(
            box=box,
            descriptor=descriptor,
            line_height=line_height,
            css=decoration_css(box, descriptor, line_height),
        )
        self.live[handle] = drawn
        self.drawn.append(drawn)
        return handle

    def release_connector(self, handle: RenderHandle) -> None:
        if self.live.pop(handle, None) is None:
            raise KeyError(f"render handle {handle!r} is not live")
        self.released.append(handle)


class DictConfigurationSource:
    """Settings held in nested dictionaries keyed by section name."""

    def __init__(self, sections: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._sections: Dict[str, Dict[str, Any]] = {
            name: dict(values) for name, values in (sections or {}).items()
        }

    def read_section(self, name: str) -> Mapping[str, Any]:
        return dict(self._sections.get(name, {}))

    def update(self, name: str, **values: Any) -> None:
        self._sections.setdefault(name, {}).update(values)


__all__ = [
    "WORD_PATTERN",
    "TextDocument",
    "DocumentWorkspace",
    "PatternDefinitionResolver",
    "RecordingRenderer",
    "DrawnConnector",
    "DictConfigurationSource",
]
