from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TextIO

from inputiter.config.loader import load_config, parse_config
from inputiter.config.models import AppConfig
from inputiter.errors import ConfigError
from inputiter.factory import new_iter, open_file
from inputiter.iter import IterCloser
from inputiter.observability.logging import LogMessage, LogSink, build_log_sink
from inputiter.scanner import ReadCloser

EXIT_OK = 0
EXIT_ITER_FAILED = 1
EXIT_SETUP_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inputiter",
        description="Print items from a file (one per line), stdin ('-'), or the arguments themselves.",
    )
    parser.add_argument("--config")
    parser.add_argument("--max-line-length", type=int)
    parser.add_argument("--encoding")
    parser.add_argument("args", nargs="*")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    # CLI flags override values loaded from --config.
    config = load_config(Path(args.config)) if args.config else AppConfig()
    overrides: dict[str, object] = {}
    if args.max_line_length is not None:
        overrides["max_line_length"] = args.max_line_length
    if args.encoding is not None:
        overrides["encoding"] = args.encoding
    if not overrides:
        return config
    scanner = config.scanner.model_dump()
    scanner.update(overrides)
    return parse_config({"scanner": scanner, "logging": config.logging.model_dump()})


def run(
    argv: list[str],
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    stdin: BinaryIO | None = None,
    opener: Callable[[str], ReadCloser] = open_file,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    args = parse_args(argv)
    try:
        config = resolve_config(args)
        log = build_log_sink(config.logging, stream=stderr)
    except (ConfigError, OSError) as exc:
        (stderr if stderr is not None else sys.stderr).write(f"inputiter: invalid config: {exc}\n")
        return EXIT_SETUP_FAILED

    try:
        try:
            it = new_iter(args.args, settings=config.scanner, stdin=stdin, opener=opener)
        except OSError as exc:
            log.emit(LogMessage(level="error", message="open failed", fields={"error": str(exc)}))
            return EXIT_SETUP_FAILED
        log.emit(LogMessage(level="debug", message="iteration started", fields={"args": list(args.args)}))
        return _consume(it, out, log)
    finally:
        log.close()


def _consume(it: IterCloser[str], out: TextIO, log: LogSink) -> int:
    # The producer is closed on every exit path, whether or not iteration completed.
    count = 0
    status = EXIT_OK
    try:
        while it.next():
            out.write(it.item() + "\n")
            count += 1
        error = it.err()
        if error is not None:
            log.emit(
                LogMessage(
                    level="error",
                    message="iteration failed",
                    fields={"items": count, "error": repr(error)},
                )
            )
            status = EXIT_ITER_FAILED
    finally:
        try:
            it.close()
        except OSError as exc:
            log.emit(LogMessage(level="error", message="close failed", fields={"error": repr(exc)}))
            status = EXIT_ITER_FAILED
    if status == EXIT_OK:
        log.emit(LogMessage(level="debug", message="iteration finished", fields={"items": count}))
    return status


def main(argv: list[str] | None = None) -> int:
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    raise SystemExit(main())
