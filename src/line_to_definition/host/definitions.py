"""Filtering rules applied to definition provider results."""

from __future__ import annotations

from typing import Optional, Sequence

from line_to_definition.geometry import Range
from line_to_definition.runtime import telemetry

from .protocols import DefinitionCandidate, DocumentId


def select_definition_range(
    document_id: DocumentId, candidates: Sequence[DefinitionCandidate]
) -> Optional[Range]:
    """Return the target range only for a single, same-document result.

    Several candidates count as no result: picking one could draw a line to
    the wrong definition.
    """

    if not candidates:
        return None
    if len(candidates) != 1:
        telemetry.get_logger("line_to_definition.host").debug(
            f"got {len(candidates)} definition locations; ignoring"
        )
        return None
    candidate = candidates[0]
    if candidate.target_document_id != document_id:
        return None
    return candidate.best_range


__all__ = ["select_definition_range"]
