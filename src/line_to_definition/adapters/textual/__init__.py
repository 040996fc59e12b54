"""Textual host adapter."""

from .canvas import CanvasOverlay, CanvasRenderer
from .controller import TextualConnectorAdapter, TextualUIHooks

__all__ = [
    "CanvasOverlay",
    "CanvasRenderer",
    "TextualConnectorAdapter",
    "TextualUIHooks",
]
