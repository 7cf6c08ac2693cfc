from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from inputiter.scanner import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_LINE_LENGTH, check_line_encoding

# Config models map YAML sections to typed structures.


class ScannerSettings(BaseModel):
    # Line scanner tuning; defaults match ScannerIter defaults.
    model_config = ConfigDict(extra="forbid")
    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, gt=0)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    encoding: str = "utf-8"
    decode_errors: Literal["strict", "replace"] = "strict"

    @field_validator("encoding")
    @classmethod
    def _line_codec(cls, value: str) -> str:
        return check_line_encoding(value)


class LoggingSettings(BaseModel):
    # Selects the structured log sink used by the CLI consumer.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stderr", "jsonl", "none"] = "stderr"
    path: str | None = None
    level: Literal["debug", "info", "warning", "error"] = "info"

    @model_validator(mode="after")
    def _jsonl_requires_path(self) -> LoggingSettings:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is jsonl")
        return self


class AppConfig(BaseModel):
    # Root config model.
    model_config = ConfigDict(extra="forbid")
    scanner: ScannerSettings = Field(default_factory=ScannerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
