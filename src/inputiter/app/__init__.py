from .cli import build_parser, main, parse_args, run

__all__ = ["build_parser", "main", "parse_args", "run"]
