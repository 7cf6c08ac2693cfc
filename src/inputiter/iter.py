from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# Pull-based iteration contract, modeled on a line scanner:
# call next() before every item(), check err() once next() returns False.
@runtime_checkable
class Iter(Protocol[T_co]):
    def item(self) -> T_co:
        """Return the current item; only valid after next() returned True."""
        raise NotImplementedError("Iter is a port; use a concrete producer.")

    def next(self) -> bool:
        """Advance to the next item; False on exhaustion or error."""
        raise NotImplementedError("Iter is a port; use a concrete producer.")

    def err(self) -> BaseException | None:
        """Return the error that stopped iteration, if any."""
        raise NotImplementedError("Iter is a port; use a concrete producer.")


@runtime_checkable
class Closer(Protocol):
    def close(self) -> None:
        """Release the underlying resource."""
        raise NotImplementedError("Closer is a port; use a concrete producer.")


@runtime_checkable
class IterCloser(Iter[T_co], Closer, Protocol[T_co]):
    # Iter that owns a resource (e.g. an open file) and must be closed by the caller.
    pass


def iterate(it: Iter[T]) -> Iterator[T]:
    # Bridge to native iteration: yields every item, then raises the terminal error.
    while it.next():
        yield it.item()
    error = it.err()
    if error is not None:
        raise error


def close_if_closable(it: object) -> None:
    # Closing is an opt-in capability; producers without close() are left alone.
    if isinstance(it, Closer):
        it.close()
