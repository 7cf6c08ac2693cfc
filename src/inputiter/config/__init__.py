from .loader import load_config, load_yaml_config, parse_config
from .models import AppConfig, LoggingSettings, ScannerSettings

__all__ = [
    "AppConfig",
    "LoggingSettings",
    "ScannerSettings",
    "load_config",
    "load_yaml_config",
    "parse_config",
]
