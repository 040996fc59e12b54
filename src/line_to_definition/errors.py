"""Exception hierarchy shared across the package."""

from __future__ import annotations


class LineToDefinitionError(RuntimeError):
    """Base class for errors raised by line_to_definition."""


__all__ = ["LineToDefinitionError"]
