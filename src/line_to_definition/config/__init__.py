"""Style configuration and editor metrics."""

from .metrics import (
    EDITOR_SECTION,
    EditorMetrics,
    MissingEditorMetric,
    compute_line_height,
)
from .style import ConfigurationSource, StyleConfig, StyleConfigStore

__all__ = [
    "ConfigurationSource",
    "StyleConfig",
    "StyleConfigStore",
    "EditorMetrics",
    "MissingEditorMetric",
    "compute_line_height",
    "EDITOR_SECTION",
]
