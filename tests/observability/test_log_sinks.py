from __future__ import annotations

import io
import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from inputiter.config.models import LoggingSettings
from inputiter.observability.logging import (
    JsonlLogSink,
    LevelFilterSink,
    LogMessage,
    NullLogSink,
    StreamLogSink,
    build_log_sink,
)

_TS = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_log_message_requires_level_and_message() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="", message="x")
    with pytest.raises(ValueError):
        LogMessage(level="info", message="")
    with pytest.raises(ValueError):
        LogMessage(level="verbose", message="x")


def test_stream_log_sink_writes_compact_json() -> None:
    stream = io.StringIO()
    StreamLogSink(stream).emit(LogMessage(level="info", message="hello", timestamp=_TS, fields={"items": 2}))
    assert json.loads(stream.getvalue()) == {
        "level": "info",
        "message": "hello",
        "timestamp": "2024-01-02T03:04:05Z",
        "fields": {"items": 2},
    }


def test_jsonl_log_sink_appends_lines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "log.jsonl"
    sink = JsonlLogSink(path)
    sink.emit(LogMessage(level="info", message="a", timestamp=_TS))
    sink.emit(LogMessage(level="error", message="b", timestamp=_TS))
    sink.close()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["a", "b"]


def test_level_filter_drops_messages_below_threshold() -> None:
    stream = io.StringIO()
    sink = LevelFilterSink(StreamLogSink(stream), "warning")
    sink.emit(LogMessage(level="info", message="quiet"))
    sink.emit(LogMessage(level="error", message="loud"))
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["message"] == "loud"


def test_build_log_sink_selects_sink(tmp_path: Path) -> None:
    stream = io.StringIO()
    sink = build_log_sink(LoggingSettings(sink="stderr", level="debug"), stream=stream)
    sink.emit(LogMessage(level="debug", message="d"))
    assert "d" in stream.getvalue()

    path = tmp_path / "log.jsonl"
    sink = build_log_sink(LoggingSettings(sink="jsonl", path=str(path)))
    sink.emit(LogMessage(level="info", message="to-file"))
    sink.close()
    assert "to-file" in path.read_text(encoding="utf-8")


def test_null_log_sink_discards() -> None:
    sink = NullLogSink()
    sink.emit(LogMessage(level="error", message="gone"))
    sink.close()
