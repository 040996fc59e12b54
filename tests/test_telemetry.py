from __future__ import annotations

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Dict, List, Tuple

import pytest

from line_to_definition.runtime import telemetry


class FakeConfig:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def __getattr__(self, name: str):
        if not name.startswith("with_"):
            raise AttributeError(name)

        def record(*args: Any) -> "FakeConfig":
            self.calls.append((name, args))
            return self

        return record

    def value_of(self, name: str) -> Tuple[Any, ...]:
        return dict(self.calls)[name]


class FakeLogger:
    created: List["FakeLogger"] = []

    def __init__(self, name: str, config: FakeConfig) -> None:
        self.name = name
        self.config = config
        self.lines: List[Tuple[str, str, List[Tuple[str, str]]]] = []
        self.context: Dict[str, str] = {}
        self.trace: List[str] = []

    @classmethod
    def with_config(cls, name: str, config: FakeConfig) -> "FakeLogger":
        logger = cls(name, config)
        cls.created.append(logger)
        return logger

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("info", message, pairs))

    def debug_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("debug", message, pairs))

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("error", message, pairs))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        del self.context[key]

    @contextmanager
    def profile(self, name: str):
        self.trace.append(f"profile:{name}")
        yield
        self.trace.append(f"end:{name}")

    @contextmanager
    def track_component(self, name: str):
        self.trace.append(f"component:{name}")
        yield


@pytest.fixture
def fake_telelog(monkeypatch: pytest.MonkeyPatch):
    FakeLogger.created = []
    monkeypatch.setattr(
        telemetry, "tl", SimpleNamespace(Config=FakeConfig, Logger=FakeLogger)
    )
    monkeypatch.setattr(telemetry, "_config", None)
    monkeypatch.setattr(telemetry, "_loggers", {})
    knobs = (
        "LOG_LEVEL",
        "LOG_FILE",
        "LOG_JSON",
        "DISABLE_CONSOLE",
        "NO_COLOR",
        "LOG_BUFFERED",
    )
    for name in knobs:
        monkeypatch.delenv(f"{telemetry.ENV_PREFIX}{name}", raising=False)
    return FakeLogger


def test_configuration_reads_prefixed_environment(
    fake_telelog, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LINE_TO_DEFINITION_LOG_LEVEL", "debug")
    monkeypatch.setenv("LINE_TO_DEFINITION_DISABLE_CONSOLE", "yes")
    monkeypatch.setenv("LINE_TO_DEFINITION_LOG_FILE", "/tmp/connector.log")

    logger = telemetry.get_logger("line_to_definition.test")

    config = logger.config
    assert config.value_of("with_min_level") == ("DEBUG",)
    assert config.value_of("with_console_output") == (False,)
    assert config.value_of("with_file_output") == ("/tmp/connector.log",)
    assert "with_colored_output" not in dict(config.calls)


def test_loggers_are_cached_until_reconfigured(fake_telelog) -> None:
    first = telemetry.get_logger()
    assert telemetry.get_logger() is first
    assert first.name == "line_to_definition"

    explicit = FakeConfig()
    telemetry.configure(explicit)

    second = telemetry.get_logger()
    assert second is not first
    assert second.config is explicit


def test_record_event_emits_structured_pairs(fake_telelog) -> None:
    telemetry.record_event(
        "decoration.clear",
        level="debug",
        data={"reason": "no_word", "anchor": (3, 2)},
        logger_name="line_to_definition.decorations",
    )

    (logger,) = fake_telelog.created
    assert logger.lines == [
        (
            "debug",
            "event::decoration.clear",
            [
                ("event", "decoration.clear"),
                ("reason", "no_word"),
                ("anchor", "(3, 2)"),
            ],
        )
    ]


def test_record_event_rejects_unknown_level(fake_telelog) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("anything", level="loud")


def test_span_profiles_and_scopes_context(fake_telelog) -> None:
    with telemetry.span(
        "decorations::draw", component="decorations", metadata={"anchor": 3}
    ) as handle:
        logger = fake_telelog.created[0]
        assert logger.context == {"anchor": "3"}
        handle.add_metadata("orientation", "vertical")

    assert logger.context == {}
    assert logger.trace == [
        "component:decorations",
        "profile:decorations::draw",
        "end:decorations::draw",
    ]
    assert handle.metadata == {"anchor": "3", "orientation": "vertical"}
    assert logger.lines == []


def test_span_logs_failure_and_reraises(fake_telelog) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("decorations::draw", metadata={"anchor": 3}):
            raise RuntimeError("boom")

    (logger,) = fake_telelog.created
    assert logger.context == {}
    level, message, pairs = logger.lines[0]
    assert (level, message) == ("error", "span::fail")
    assert ("reason", "boom") in pairs
    assert ("span", "decorations::draw") in pairs
