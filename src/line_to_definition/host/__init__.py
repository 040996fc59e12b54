"""Host editor collaborator boundaries and in-memory implementations."""

from .definitions import select_definition_range
from .memory import (
    DictConfigurationSource,
    DocumentWorkspace,
    PatternDefinitionResolver,
    RecordingRenderer,
    TextDocument,
)
from .protocols import (
    ActiveEditor,
    DefinitionCandidate,
    DefinitionResolver,
    DocumentId,
    RenderCollaborator,
    RenderHandle,
    WordRangeLookup,
)

__all__ = [
    "ActiveEditor",
    "DefinitionCandidate",
    "DefinitionResolver",
    "DocumentId",
    "RenderCollaborator",
    "RenderHandle",
    "WordRangeLookup",
    "select_definition_range",
    "TextDocument",
    "DocumentWorkspace",
    "PatternDefinitionResolver",
    "RecordingRenderer",
    "DictConfigurationSource",
]
