from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, TextIO

from inputiter.config.models import LoggingSettings

_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload; serialized as one compact JSON object per line.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in _LEVELS:
            raise ValueError(f"LogMessage.level must be one of: {sorted(_LEVELS)}")


class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None: ...

    def close(self) -> None: ...


class StreamLogSink:
    # Writes structured log lines to a text stream (stderr by default, keeping stdout for items).
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(_dump(message) + "\n")
        stream.flush()

    def close(self) -> None:
        # Stream is borrowed, not owned.
        pass


class JsonlLogSink:
    # File-backed structured log sink.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_dump(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class NullLogSink:
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        pass


class LevelFilterSink:
    # Drops messages below the configured threshold before delegating.
    def __init__(self, inner: LogSink, level: str) -> None:
        if level not in _LEVELS:
            raise ValueError(f"level must be one of: {sorted(_LEVELS)}")
        self._inner = inner
        self._threshold = _LEVELS[level]

    def emit(self, message: LogMessage) -> None:
        if _LEVELS[message.level] >= self._threshold:
            self._inner.emit(message)

    def close(self) -> None:
        self._inner.close()


def build_log_sink(settings: LoggingSettings, *, stream: TextIO | None = None) -> LogSink:
    inner: LogSink
    if settings.sink == "jsonl":
        assert settings.path is not None
        inner = JsonlLogSink(Path(settings.path))
    elif settings.sink == "none":
        inner = NullLogSink()
    else:
        inner = StreamLogSink(stream)
    return LevelFilterSink(inner, settings.level)


def _dump(message: LogMessage) -> str:
    payload = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
