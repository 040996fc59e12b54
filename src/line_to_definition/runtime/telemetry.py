"""Structured logging for the connector core, backed by telelog.

Callers use four entry points: ``configure``, ``get_logger``,
``record_event`` and ``span``. The configuration is built lazily from
``LINE_TO_DEFINITION_*`` environment variables the first time a logger is
requested, so embedding hosts can call ``configure`` before anything logs.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINE_TO_DEFINITION_"
ROOT_LOGGER_NAME = "line_to_definition"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
    return config


def configure(config: Optional[Any] = None) -> Any:
    """Adopt ``config`` (or rebuild it from the environment) for new loggers.

    Cached loggers are dropped so the next ``get_logger`` call picks up the
    change.
    """

    global _config
    _config = config if config is not None else _config_from_env()
    _loggers.clear()
    return _config


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or ROOT_LOGGER_NAME
    logger = _loggers.get(logger_name)
    if logger is None:
        config = _config if _config is not None else configure()
        logger = _loggers[logger_name] = tl.Logger.with_config(logger_name, config)
    return logger


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    """Prefer ``<level>_with`` so key/value pairs stay structured."""

    name = str(level).lower()
    method = getattr(logger, f"{name}_with", None)
    if method is not None:
        return method, True
    method = getattr(logger, name, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return method, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block; ``metadata`` is logger context while it runs.

    An exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log, span_name=name, component_name=component, metadata=dict(context)
    )
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "ENV_PREFIX",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
