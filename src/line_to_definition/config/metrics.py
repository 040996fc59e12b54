"""Editor metrics read once at startup."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from line_to_definition.errors import LineToDefinitionError

EDITOR_SECTION = "editor"
MINIMUM_LINE_HEIGHT = 8
DARWIN_LINE_HEIGHT_RATIO = 1.5
DEFAULT_LINE_HEIGHT_RATIO = 1.35


class MissingEditorMetric(LineToDefinitionError):
    """Raised when a metric required at startup is unavailable."""

    def __init__(self, metric: str) -> None:
        super().__init__(f"could not load editor metric '{metric}'")
        self.metric = metric


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_line_height(font_size: float, platform_name: str) -> int:
    ratio = (
        DARWIN_LINE_HEIGHT_RATIO
        if platform_name == "darwin"
        else DEFAULT_LINE_HEIGHT_RATIO
    )
    return max(MINIMUM_LINE_HEIGHT, _round_half_up(ratio * font_size))


@dataclass(frozen=True, slots=True)
class EditorMetrics:
    font_size: float
    platform_name: str
    line_height: int

    @classmethod
    def from_settings(
        cls, settings: Mapping[str, Any], *, platform_name: Optional[str] = None
    ) -> "EditorMetrics":
        font_size = settings.get("fontSize")
        if (
            isinstance(font_size, bool)
            or not isinstance(font_size, (int, float))
            or not math.isfinite(font_size)
            or font_size <= 0
        ):
            raise MissingEditorMetric("fontSize")
        platform_name = platform_name or sys.platform
        return cls(
            font_size=font_size,
            platform_name=platform_name,
            line_height=compute_line_height(font_size, platform_name),
        )


__all__ = [
    "EditorMetrics",
    "MissingEditorMetric",
    "compute_line_height",
    "EDITOR_SECTION",
    "MINIMUM_LINE_HEIGHT",
]
