from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from inputiter.config.models import AppConfig
from inputiter.errors import ConfigError


def load_yaml_config(path: Path) -> dict[str, object]:
    # YAML loader; returns a raw mapping for validation.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def load_config(path: Path) -> AppConfig:
    return parse_config(load_yaml_config(path))


def parse_config(raw: dict[str, object]) -> AppConfig:
    # Fail fast on unknown keys or invalid values to prevent silent misconfiguration.
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
