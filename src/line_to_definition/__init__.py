"""Draw a connector line from the word under the cursor to its definition."""

__all__ = [
    "adapters",
    "config",
    "connector",
    "decorations",
    "geometry",
    "host",
    "runtime",
    "session",
]

__version__ = "0.1.0"
