from __future__ import annotations

import asyncio

import pytest

from line_to_definition.geometry import Position, Range
from line_to_definition.host import (
    DefinitionCandidate,
    DocumentWorkspace,
    PatternDefinitionResolver,
    RecordingRenderer,
    TextDocument,
    select_definition_range,
)
from line_to_definition.connector import (
    Orientation,
    build_line_descriptor,
    compute_drawing_box,
)
from line_to_definition.config import StyleConfig

SOURCE = """\
import os

GREETING = "hello"


def greet(name):
    message = GREETING + ", " + name
    return message
"""


def make_workspace(text: str = SOURCE) -> DocumentWorkspace:
    return DocumentWorkspace([TextDocument.from_text("demo", text)])


def test_word_range_at_inside_and_at_end_of_word() -> None:
    document = TextDocument.from_text("demo", SOURCE)

    assert document.word_range_at(Position(6, 5)) == Range.of(6, 4, 6, 11)
    assert document.word_range_at(Position(6, 11)) == Range.of(6, 4, 6, 11)


def test_word_range_at_whitespace_or_punctuation_is_none() -> None:
    document = TextDocument.from_text("demo", SOURCE)

    assert document.word_range_at(Position(1, 0)) is None
    assert document.word_range_at(Position(2, 10)) is None
    assert document.word_range_at(Position(99, 0)) is None


def test_workspace_unknown_document_has_no_words() -> None:
    workspace = make_workspace()

    assert workspace.word_range_at("missing", Position(0, 0)) is None


def test_pattern_resolver_finds_assignment() -> None:
    workspace = make_workspace()
    resolver = PatternDefinitionResolver(workspace)

    candidates = asyncio.run(resolver.resolve_definition("demo", Position(6, 16)))

    assert len(candidates) == 1
    assert candidates[0].best_range == Range.of(2, 0, 2, 8)
    assert candidates[0].target_document_id == "demo"


def test_pattern_resolver_finds_function_definition() -> None:
    workspace = make_workspace(SOURCE + "\n\nprint(greet('x'))\n")
    resolver = PatternDefinitionResolver(workspace)

    candidates = asyncio.run(resolver.resolve_definition("demo", Position(10, 7)))

    assert [c.best_range for c in candidates] == [Range.of(5, 4, 5, 9)]
    assert resolver.requests == [("demo", Position(10, 7))]


def test_pattern_resolver_reports_every_assignment() -> None:
    workspace = make_workspace("x = 1\nx = 2\nprint(x)\n")
    resolver = PatternDefinitionResolver(workspace)

    candidates = asyncio.run(resolver.resolve_definition("demo", Position(2, 6)))

    assert len(candidates) == 2
    assert select_definition_range("demo", candidates) is None


def test_pattern_resolver_ignores_comparisons() -> None:
    workspace = make_workspace("x == 1\nprint(x)\n")
    resolver = PatternDefinitionResolver(workspace)

    assert asyncio.run(resolver.resolve_definition("demo", Position(1, 6))) == []


def test_select_definition_range_rules() -> None:
    target = Range.of(1, 0, 1, 4)
    precise = Range.of(1, 1, 1, 3)

    assert select_definition_range("a", []) is None
    assert select_definition_range("a", [DefinitionCandidate("b", target)]) is None
    assert select_definition_range("a", [DefinitionCandidate("a", target)]) == target
    assert (
        select_definition_range("a", [DefinitionCandidate("a", target, precise)])
        == precise
    )


def test_recording_renderer_tracks_live_handles() -> None:
    renderer = RecordingRenderer()
    descriptor = build_line_descriptor(Orientation.VERTICAL, StyleConfig())

    first_box = compute_drawing_box(Range.of(0, 1, 4, 1), descriptor.orientation)
    second_box = compute_drawing_box(Range.of(0, 1, 6, 1), descriptor.orientation)

    first = renderer.draw_connector(first_box, descriptor, 18)
    second = renderer.draw_connector(second_box, descriptor, 18)
    renderer.release_connector(first)

    assert list(renderer.live) == [second]
    assert "height:90px;" in renderer.live[second].css
    assert renderer.released == [first]
    with pytest.raises(KeyError):
        renderer.release_connector(first)
