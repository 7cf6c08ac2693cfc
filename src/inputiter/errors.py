from __future__ import annotations


class InputIterError(Exception):
    # Base class for failures raised by inputiter producers.
    pass


class LineTooLongError(InputIterError):
    # Terminal scanner error: a line exceeded the buffered maximum (never truncated).
    def __init__(self, limit: int) -> None:
        super().__init__(f"line exceeds maximum length of {limit}")
        self.limit = limit


class ConfigError(ValueError):
    # Raised for invalid configuration (fail fast).
    pass
