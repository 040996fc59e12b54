"""Stateful owner of the single visible connector decoration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from line_to_definition.config import StyleConfigStore
from line_to_definition.connector import (
    DrawingBox,
    LineDescriptor,
    build_line_descriptor,
    compute_drawing_box,
    select_orientation,
)
from line_to_definition.geometry import (
    InvalidRangeShape,
    Range,
    bounding_range,
    center_of_word_range,
)
from line_to_definition.host import (
    ActiveEditor,
    DefinitionResolver,
    RenderCollaborator,
    RenderHandle,
    WordRangeLookup,
    select_definition_range,
)
from line_to_definition.runtime import telemetry


@dataclass(frozen=True, slots=True)
class AnchoredDecoration:
    """Visible connector keyed by the cursor word range it was computed for."""

    anchor_word_range: Range
    handle: RenderHandle
    box: Optional[DrawingBox] = None
    descriptor: Optional[LineDescriptor] = None


@dataclass(frozen=True, slots=True)
class KeepCurrent:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    reason: str = ""


@dataclass(frozen=True, slots=True)
class Replace:
    decoration: AnchoredDecoration


@dataclass(frozen=True, slots=True)
class Superseded:
    """A newer cursor event started while this evaluation was suspended."""

    generation: int


DisplayDecision = Union[KeepCurrent, Clear, Replace]
Evaluation = Union[KeepCurrent, Clear, Replace, Superseded]


class DecorationStateMachine:
    """Decides, per cursor event, whether to keep, clear, or replace the connector.

    Every event bumps a generation counter. A definition lookup that resumes
    after a newer event has started is discarded as ``Superseded`` without
    rendering anything.
    """

    def __init__(
        self,
        *,
        words: WordRangeLookup,
        resolver: DefinitionResolver,
        renderer: RenderCollaborator,
        style: StyleConfigStore,
        line_height: int,
        logger_name: str | None = None,
    ) -> None:
        self.words = words
        self.resolver = resolver
        self.renderer = renderer
        self.style = style
        self.line_height = line_height
        self._logger_name = logger_name or "line_to_definition.decorations"
        self.logger = telemetry.get_logger(self._logger_name)
        self._current: Optional[AnchoredDecoration] = None
        self._generation = 0

    @property
    def current(self) -> Optional[AnchoredDecoration]:
        return self._current

    @property
    def is_showing(self) -> bool:
        return self._current is not None

    @property
    def generation(self) -> int:
        return self._generation

    async def on_cursor_moved(self, editor: Optional[ActiveEditor]) -> Evaluation:
        self._generation += 1
        result = await self._evaluate(editor, self._generation)
        self.apply(result)
        return result

    def clear(self) -> None:
        """Drop the visible connector and invalidate in-flight lookups."""

        self._generation += 1
        self.apply(Clear(reason="host"))

    def apply(self, result: Evaluation) -> None:
        if isinstance(result, (KeepCurrent, Superseded)):
            self._record(result)
            return
        if isinstance(result, Clear):
            self._release_current()
            self._current = None
        elif isinstance(result, Replace):
            self._release_current()
            self._current = result.decoration
        else:
            raise TypeError(f"Unknown display decision {result!r}")
        self._record(result)

    async def _evaluate(
        self, editor: Optional[ActiveEditor], generation: int
    ) -> Evaluation:
        if editor is None:
            return Clear(reason="no_editor")

        try:
            word_range = self.words.word_range_at(editor.document_id, editor.cursor)
        except Exception as exc:
            self.logger.warning(f"word lookup failed: {exc}")
            return Clear(reason="word_lookup_failed")
        if word_range is None:
            return Clear(reason="no_word")

        if self._current is not None and word_range == self._current.anchor_word_range:
            return KeepCurrent()

        try:
            candidates = await self.resolver.resolve_definition(
                editor.document_id, editor.cursor
            )
        except Exception as exc:
            if generation != self._generation:
                return Superseded(generation=generation)
            self.logger.warning(f"definition lookup failed: {exc}")
            return Clear(reason="lookup_failed")

        if generation != self._generation:
            return Superseded(generation=generation)

        definition_range = select_definition_range(editor.document_id, candidates)
        if definition_range is None:
            return Clear(reason="no_definition")

        try:
            return self._draw(word_range, definition_range)
        except InvalidRangeShape as exc:
            self.logger.warning(f"skipping connector: {exc}")
            return Clear(reason="invalid_range")
        except Exception as exc:
            self.logger.warning(f"renderer failed to draw connector: {exc}")
            return Clear(reason="render_failed")

    def _draw(self, word_range: Range, definition_range: Range) -> Replace:
        with telemetry.span(
            "decorations::draw",
            logger_name=self._logger_name,
            component="decorations",
            metadata={"anchor": word_range, "definition": definition_range},
        ) as handle:
            definition_center = center_of_word_range(definition_range)
            cursor_center = center_of_word_range(word_range)
            rect = bounding_range(definition_center, cursor_center)
            orientation = select_orientation(definition_center, cursor_center)
            box = compute_drawing_box(rect, orientation)
            descriptor = build_line_descriptor(orientation, self.style.current)
            handle.add_metadata("orientation", orientation.value)

            render_handle = self.renderer.draw_connector(
                box, descriptor, self.line_height
            )
            return Replace(
                AnchoredDecoration(
                    anchor_word_range=word_range,
                    handle=render_handle,
                    box=box,
                    descriptor=descriptor,
                )
            )

    def _release_current(self) -> None:
        if self._current is not None:
            self.renderer.release_connector(self._current.handle)

    def _record(self, result: Evaluation) -> None:
        if isinstance(result, KeepCurrent):
            telemetry.record_event(
                "decoration.keep", level="debug", logger_name=self._logger_name
            )
        elif isinstance(result, Superseded):
            telemetry.record_event(
                "decoration.superseded",
                level="debug",
                data={"generation": result.generation, "latest": self._generation},
                logger_name=self._logger_name,
            )
        elif isinstance(result, Clear):
            telemetry.record_event(
                "decoration.clear",
                level="debug",
                data={"reason": result.reason},
                logger_name=self._logger_name,
            )
        else:
            telemetry.record_event(
                "decoration.replace",
                level="debug",
                data={"anchor": result.decoration.anchor_word_range},
                logger_name=self._logger_name,
            )


__all__ = [
    "AnchoredDecoration",
    "DecorationStateMachine",
    "DisplayDecision",
    "Evaluation",
    "KeepCurrent",
    "Clear",
    "Replace",
    "Superseded",
]
