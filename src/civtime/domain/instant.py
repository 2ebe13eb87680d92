"""Instant — a point in time as milliseconds since the Unix epoch.

INVARIANT: ``posix_to_millis(millis_to_posix(n)) == n`` for every int,
including negative counts before 1970.
"""

from __future__ import annotations

from functools import total_ordering


@total_ordering
class Instant:
    """Opaque, immutable wrapper around a millisecond count.

    Build one with :func:`millis_to_posix` and read it back with
    :func:`posix_to_millis`.  Equality and ordering follow the count.
    """

    __slots__ = ("_millis",)

    def __init__(self, millis: int) -> None:
        if isinstance(millis, bool) or not isinstance(millis, int):
            msg = f"Instant requires an int millisecond count, got {type(millis).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "_millis", millis)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Instant is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Instant is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis < other._millis

    def __hash__(self) -> int:
        return hash(self._millis)

    def __repr__(self) -> str:
        return f"Instant({self._millis})"

    def __reduce__(self) -> tuple[type[Instant], tuple[int]]:
        return (Instant, (self._millis,))


def millis_to_posix(millis: int) -> Instant:
    """Wrap a millisecond count (any int) as an :class:`Instant`."""
    return Instant(millis)


def posix_to_millis(instant: Instant) -> int:
    """Return the exact millisecond count wrapped by *instant*."""
    return instant._millis
