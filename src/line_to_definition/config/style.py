"""Connector style configuration and its reloadable store."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

from line_to_definition.runtime import telemetry

SECTION = "lineToDefinition"

DEFAULT_LINE_COLOR = "red"
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_LINE_OPACITY = 50.0


class ConfigurationSource(Protocol):
    """Host settings reader; returns the raw values of one section."""

    def read_section(self, name: str) -> Mapping[str, Any]:
        ...


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Color, stroke width, and percent opacity of the connector line."""

    line_color: str = DEFAULT_LINE_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    line_opacity: float = DEFAULT_LINE_OPACITY

    def __post_init__(self) -> None:
        if not self.line_color:
            raise ValueError("line_color cannot be empty")
        if not math.isfinite(self.line_width) or self.line_width <= 0:
            raise ValueError("line_width must be a finite number > 0")
        if not 0 <= self.line_opacity <= 100:
            raise ValueError("line_opacity must be within [0, 100]")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "StyleConfig":
        """Build a config from raw settings, replacing bad values with defaults."""

        logger = telemetry.get_logger("line_to_definition.config")

        color = values.get("lineColor")
        if not isinstance(color, str) or not color.strip():
            if color is not None:
                logger.warning(f"invalid lineColor {color!r}; using default")
            color = DEFAULT_LINE_COLOR

        width = values.get("lineWidth")
        if not _is_number(width) or width <= 0:
            if width is not None:
                logger.warning(f"invalid lineWidth {width!r}; using default")
            width = DEFAULT_LINE_WIDTH

        opacity = values.get("lineOpacity", values.get("opacity"))
        if not _is_number(opacity) or not 0 <= opacity <= 100:
            if opacity is not None:
                logger.warning(f"invalid lineOpacity {opacity!r}; using default")
            opacity = DEFAULT_LINE_OPACITY

        return cls(line_color=color.strip(), line_width=width, line_opacity=opacity)


class StyleConfigStore:
    """Holds the latest ``StyleConfig``; reloads replace it wholesale."""

    def __init__(
        self,
        source: Optional[ConfigurationSource] = None,
        *,
        section: str = SECTION,
    ) -> None:
        self._source = source
        self._section = section
        self._current = StyleConfig()
        if source is not None:
            self.reload()

    @property
    def current(self) -> StyleConfig:
        return self._current

    def reload(self) -> StyleConfig:
        if self._source is None:
            return self._current
        values = self._source.read_section(self._section) or {}
        self._current = StyleConfig.from_mapping(values)
        telemetry.record_event(
            "config.reload",
            level="debug",
            data={
                "color": self._current.line_color,
                "width": self._current.line_width,
                "opacity": self._current.line_opacity,
            },
        )
        return self._current

    def on_configuration_changed(self, _event: object | None = None) -> None:
        self.reload()


__all__ = [
    "ConfigurationSource",
    "StyleConfig",
    "StyleConfigStore",
    "SECTION",
    "DEFAULT_LINE_COLOR",
    "DEFAULT_LINE_WIDTH",
    "DEFAULT_LINE_OPACITY",
]
