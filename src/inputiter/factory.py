from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO
from urllib.parse import urlparse

from inputiter.config.models import ScannerSettings
from inputiter.iter import IterCloser
from inputiter.scanner import ReadCloser, ScannerIter
from inputiter.sequence import SliceIter

STDIN_ARG = "-"


def open_file(path: str) -> ReadCloser:
    return open(path, "rb")


class _BorrowedStream:
    # Wraps a stream the producer must read but not close (e.g. process stdin).
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self, size: int = -1, /) -> bytes:
        return self._stream.read(size)

    def close(self) -> None:
        pass


def scanner_from_settings(resource: ReadCloser, settings: ScannerSettings | None = None) -> ScannerIter:
    settings = settings or ScannerSettings()
    return ScannerIter(
        resource,
        max_line_length=settings.max_line_length,
        chunk_size=settings.chunk_size,
        encoding=settings.encoding,
        decode_errors=settings.decode_errors,
    )


def new_iter(
    args: Sequence[str],
    *,
    settings: ScannerSettings | None = None,
    opener: Callable[[str], ReadCloser] = open_file,
    stdin: BinaryIO | None = None,
) -> IterCloser[str]:
    # One argument is a file to scan ("-" for stdin), or a lone URL if no such file exists.
    # Any other number of arguments is iterated as-is.
    if len(args) == 1:
        arg = args[0]
        if arg == STDIN_ARG:
            stream = stdin if stdin is not None else sys.stdin.buffer
            return scanner_from_settings(_BorrowedStream(stream), settings)
        try:
            resource = opener(arg)
        except FileNotFoundError:
            if not _looks_like_url(arg):
                raise
        else:
            return scanner_from_settings(resource, settings)
    return SliceIter(args)


def _looks_like_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)
