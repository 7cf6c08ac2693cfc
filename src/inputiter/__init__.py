from .errors import ConfigError, InputIterError, LineTooLongError
from .factory import new_iter, open_file, scanner_from_settings
from .iter import Closer, Iter, IterCloser, close_if_closable, iterate
from .scanner import ScannerIter
from .sequence import SliceIter

__all__ = [
    "Iter",
    "Closer",
    "IterCloser",
    "iterate",
    "close_if_closable",
    "ScannerIter",
    "SliceIter",
    "new_iter",
    "open_file",
    "scanner_from_settings",
    "InputIterError",
    "LineTooLongError",
    "ConfigError",
]
