from .logging import (
    JsonlLogSink,
    LevelFilterSink,
    LogMessage,
    LogSink,
    NullLogSink,
    StreamLogSink,
    build_log_sink,
)

__all__ = [
    "LogMessage",
    "LogSink",
    "StreamLogSink",
    "JsonlLogSink",
    "NullLogSink",
    "LevelFilterSink",
    "build_log_sink",
]
