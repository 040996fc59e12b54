"""Adapter wiring host cursor/config events into the decoration state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from line_to_definition.config import StyleConfigStore
from line_to_definition.decorations import (
    Clear,
    DecorationStateMachine,
    Evaluation,
    KeepCurrent,
    Replace,
    Superseded,
)
from line_to_definition.geometry import Position
from line_to_definition.host import ActiveEditor, DocumentId


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    refresh_overlay: Callable[[], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualConnectorAdapter:
    """Bridges Textual cursor and settings events to ``DecorationStateMachine``."""

    def __init__(
        self,
        machine: DecorationStateMachine,
        style: StyleConfigStore,
        hooks: TextualUIHooks,
    ) -> None:
        self.machine = machine
        self.style = style
        self.hooks = hooks

    async def handle_cursor(
        self, document_id: Optional[DocumentId], row: int, column: int
    ) -> Evaluation:
        """Translate a ``(row, column)`` cursor into a state-machine event."""

        editor = (
            None
            if document_id is None
            else ActiveEditor(document_id=document_id, cursor=Position(row, column))
        )
        self._log_state("cursor ->", document=document_id, row=row, column=column)
        result = await self.machine.on_cursor_moved(editor)
        self._after_result(result)
        return result

    def handle_configuration_changed(self) -> None:
        self.style.on_configuration_changed()
        self._log_state("config ->", color=self.style.current.line_color)

    def shutdown(self) -> None:
        self.machine.clear()
        self.hooks.refresh_overlay()

    def _after_result(self, result: Evaluation) -> None:
        if isinstance(result, Superseded):
            self._log_state("result <-", status="superseded")
            return
        if isinstance(result, KeepCurrent):
            self._log_state("result <-", status="keep")
            return
        if isinstance(result, Clear):
            self.hooks.update_status("")
            self._log_state("result <-", status="clear", reason=result.reason)
        elif isinstance(result, Replace):
            descriptor = result.decoration.descriptor
            label = descriptor.orientation.value if descriptor else "connector"
            self.hooks.update_status(label)
            self._log_state("result <-", status="replace", orientation=label)
        self.hooks.refresh_overlay()

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        current = self.machine.current
        return {
            "showing": current is not None,
            "anchor": current.anchor_word_range if current else None,
            "generation": self.machine.generation,
        }


__all__ = ["TextualConnectorAdapter", "TextualUIHooks"]
