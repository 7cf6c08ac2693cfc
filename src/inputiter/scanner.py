from __future__ import annotations

from types import TracebackType
from typing import Any, Protocol

from inputiter.errors import LineTooLongError

DEFAULT_MAX_LINE_LENGTH = 64 * 1024
DEFAULT_CHUNK_SIZE = 4096
_SUPPORTED_DECODE_ERRORS = {"strict", "replace"}


def check_line_encoding(encoding: str) -> str:
    # Lines are split on b"\n" before decoding, so the codec must encode "\n" as that byte.
    try:
        newline = "\n".encode(encoding)
    except LookupError as exc:
        raise ValueError(f"unknown encoding: {encoding}") from exc
    if newline != b"\n":
        raise ValueError(f"encoding {encoding} does not encode newline as a single byte")
    return encoding


class ReadCloser(Protocol):
    # Anything file-like: read(size) returning bytes or str, plus close().
    def read(self, size: int = -1, /) -> Any: ...

    def close(self) -> None: ...


class ScannerIter:
    # IterCloser[str] over the lines of a readable resource.
    # The resource is owned exclusively; the caller must close() on every exit path.

    def __init__(
        self,
        resource: ReadCloser,
        *,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8",
        decode_errors: str = "strict",
    ) -> None:
        if max_line_length <= 0:
            raise ValueError("max_line_length must be positive")
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if decode_errors not in _SUPPORTED_DECODE_ERRORS:
            raise ValueError(f"decode_errors must be one of: {sorted(_SUPPORTED_DECODE_ERRORS)}")
        check_line_encoding(encoding)
        self._resource = resource
        self._max_line_length = max_line_length
        self._chunk_size = chunk_size
        self._encoding = encoding
        self._decode_errors = decode_errors
        # Buffer type follows the resource mode (bytes or str) once the first chunk arrives.
        self._buffer: bytes | str | None = None
        self._pos = 0
        self._eof = False
        self._done = False
        self._token = ""
        self._err: BaseException | None = None

    def item(self) -> str:
        return self._token

    def next(self) -> bool:
        if self._done:
            return False
        while True:
            if self._buffer is not None:
                newline = b"\n" if isinstance(self._buffer, bytes) else "\n"
                idx = self._buffer.find(newline, self._pos)  # type: ignore[arg-type]
                if idx >= 0:
                    raw = self._buffer[self._pos : idx]
                    self._pos = idx + 1
                    return self._emit(raw)
                pending = len(self._buffer) - self._pos
                # One extra slot for a "\r" that may precede the next "\n".
                if pending > self._max_line_length + 1:
                    return self._fail(LineTooLongError(self._max_line_length))
                if self._eof:
                    if pending == 0:
                        self._done = True
                        return False
                    raw = self._buffer[self._pos :]
                    self._pos = len(self._buffer)
                    return self._emit(raw)
            self._fill()

    def err(self) -> BaseException | None:
        return self._err

    def close(self) -> None:
        self._resource.close()

    def __enter__(self) -> ScannerIter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _fill(self) -> None:
        # Read one chunk; compacts consumed bytes so the buffer only holds the pending line.
        # A read failure ends input like EOF: the pending partial line is still emitted,
        # and the error surfaces once the buffer is drained.
        try:
            chunk = self._resource.read(self._chunk_size)
        except (OSError, ValueError) as exc:
            self._err = exc
            chunk = None
        if not chunk:
            self._eof = True
            if self._buffer is None:
                self._buffer = b""
            return
        if self._buffer is None:
            self._buffer = chunk
        else:
            self._buffer = self._buffer[self._pos :] + chunk
        self._pos = 0

    def _emit(self, raw: bytes | str) -> bool:
        if raw[-1:] in (b"\r", "\r"):
            raw = raw[:-1]
        if len(raw) > self._max_line_length:
            return self._fail(LineTooLongError(self._max_line_length))
        if isinstance(raw, bytes):
            try:
                self._token = raw.decode(self._encoding, errors=self._decode_errors)
            except UnicodeDecodeError as exc:
                return self._fail(exc)
        else:
            self._token = raw
        return True

    def _fail(self, error: BaseException) -> bool:
        # Errors are terminal: no retry, no recovery.
        self._err = error
        self._done = True
        self._token = ""
        return False
