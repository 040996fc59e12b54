"""Startup wiring: metrics, style store, and the state machine."""

from __future__ import annotations

from typing import Optional

from line_to_definition.config import (
    EDITOR_SECTION,
    ConfigurationSource,
    EditorMetrics,
    StyleConfigStore,
)
from line_to_definition.decorations import DecorationStateMachine
from line_to_definition.host import (
    DefinitionResolver,
    RenderCollaborator,
    WordRangeLookup,
)
from line_to_definition.runtime import telemetry


def create_state_machine(
    settings: ConfigurationSource,
    *,
    words: WordRangeLookup,
    resolver: DefinitionResolver,
    renderer: RenderCollaborator,
    platform_name: Optional[str] = None,
) -> DecorationStateMachine:
    """Build a ready state machine; raises ``MissingEditorMetric`` without a font size."""

    metrics = EditorMetrics.from_settings(
        settings.read_section(EDITOR_SECTION), platform_name=platform_name
    )
    style = StyleConfigStore(settings)
    telemetry.record_event(
        "session.start",
        data={
            "line_height": metrics.line_height,
            "platform": metrics.platform_name,
        },
    )
    return DecorationStateMachine(
        words=words,
        resolver=resolver,
        renderer=renderer,
        style=style,
        line_height=metrics.line_height,
    )


__all__ = ["create_state_machine"]
