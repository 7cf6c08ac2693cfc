from __future__ import annotations

import io
from pathlib import Path

import pytest

from inputiter.config.models import ScannerSettings
from inputiter.errors import LineTooLongError
from inputiter.factory import new_iter
from inputiter.iter import iterate
from inputiter.scanner import ScannerIter
from inputiter.sequence import SliceIter


def test_new_iter_single_existing_file_scans_lines(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    it = new_iter([str(path)])
    try:
        assert isinstance(it, ScannerIter)
        assert list(iterate(it)) == ["a", "b"]
    finally:
        it.close()


def test_new_iter_multiple_args_are_items() -> None:
    it = new_iter(["a", "b", "c"])
    assert isinstance(it, SliceIter)
    assert list(iterate(it)) == ["a", "b", "c"]


def test_new_iter_no_args_is_empty() -> None:
    it = new_iter([])
    assert it.next() is False
    assert it.err() is None


def test_new_iter_missing_file_that_is_a_url_becomes_single_item() -> None:
    it = new_iter(["https://github.com/ossf/scorecard"])
    assert isinstance(it, SliceIter)
    assert list(iterate(it)) == ["https://github.com/ossf/scorecard"]


def test_new_iter_missing_plain_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        new_iter([str(tmp_path / "missing.txt")])


def test_new_iter_other_open_errors_propagate() -> None:
    def _opener(path: str) -> io.BytesIO:
        raise PermissionError(path)

    with pytest.raises(PermissionError):
        new_iter(["https://example.com/x"], opener=_opener)


def test_new_iter_uses_injected_opener() -> None:
    opened: list[str] = []

    def _opener(path: str) -> io.BytesIO:
        opened.append(path)
        return io.BytesIO(b"x\ny")

    it = new_iter(["repos.txt"], opener=_opener)
    assert list(iterate(it)) == ["x", "y"]
    assert opened == ["repos.txt"]


def test_new_iter_dash_reads_stdin_without_closing_it() -> None:
    stdin = io.BytesIO(b"one\ntwo\n")
    it = new_iter(["-"], stdin=stdin)
    assert list(iterate(it)) == ["one", "two"]
    it.close()
    assert not stdin.closed


def test_new_iter_applies_scanner_settings() -> None:
    settings = ScannerSettings(max_line_length=2)
    it = new_iter(["-"], settings=settings, stdin=io.BytesIO(b"abc\n"))
    assert it.next() is False
    assert isinstance(it.err(), LineTooLongError)
