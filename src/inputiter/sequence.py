from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Generic, TypeVar

T = TypeVar("T")


class SliceIter(Generic[T]):
    # IterCloser[T] over a pre-built sequence. The sequence is shared, not copied;
    # callers must not mutate it while iterating.

    def __init__(self, values: Sequence[T]) -> None:
        self._values = values
        # Cursor in [0, len(values)]: 0 is "before first item", len(values) is exhausted.
        self._next = 0

    def item(self) -> T:
        return self._values[self._next - 1]

    def next(self) -> bool:
        if self._next < len(self._values):
            self._next += 1
            return True
        return False

    def err(self) -> BaseException | None:
        # No I/O, no failure mode.
        return None

    def close(self) -> None:
        pass

    def __enter__(self) -> SliceIter[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
