"""Zones — a default UTC offset plus an ordered list of offset overrides.

An :class:`Era` says "from minute ``start`` onward the offset is
``offset`` minutes".  Eras are stored exactly as given; the canonical
order is most-recent-first.

INVARIANT: resolution returns the offset of the *first* era in list
order whose ``start`` is strictly earlier than the queried minute, and
falls back to ``default_offset`` when none matches.  Out-of-order era
lists are not rejected; see :func:`eras_in_canonical_order`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from civtime.domain.calendar import floor_div
from civtime.domain.instant import Instant, posix_to_millis

MILLIS_PER_MINUTE = 60_000


@dataclass(frozen=True)
class Era:
    """One offset override, effective after minute ``start``."""

    start: int  # minutes since epoch
    offset: int  # minutes east of UTC


@dataclass(frozen=True)
class Zone:
    """Immutable offset table.  Build with :func:`custom_zone` or use :data:`UTC`."""

    default_offset: int
    eras: tuple[Era, ...] = ()

    @property
    def is_utc(self) -> bool:
        return self.default_offset == 0 and not self.eras


UTC = Zone(default_offset=0)


def custom_zone(default_offset: int, eras: Iterable[Era | tuple[int, int]] = ()) -> Zone:
    """Build a zone from a default offset and eras, keeping their order.

    Eras may be :class:`Era` instances or ``(start, offset)`` pairs.
    Ordering and overlap are the caller's responsibility.
    """
    frozen = tuple(era if isinstance(era, Era) else Era(*era) for era in eras)
    return Zone(default_offset=default_offset, eras=frozen)


def resolve_era(zone: Zone, minutes: int) -> Era | None:
    """Return the first era (in list order) starting before *minutes*, if any."""
    for era in zone.eras:
        if era.start < minutes:
            return era
    return None


def resolve_offset(zone: Zone, minutes: int) -> int:
    """Offset in minutes that *zone* applies at *minutes* since epoch."""
    era = resolve_era(zone, minutes)
    return zone.default_offset if era is None else era.offset


def instant_minutes(instant: Instant) -> int:
    """Whole minutes since epoch containing *instant* (floored)."""
    return floor_div(posix_to_millis(instant), MILLIS_PER_MINUTE)


def adjusted_minutes(zone: Zone, instant: Instant) -> int:
    """Local wall-clock minutes since epoch for *instant* in *zone*."""
    minutes = instant_minutes(instant)
    return minutes + resolve_offset(zone, minutes)


def eras_in_canonical_order(zone: Zone) -> bool:
    """True when eras are strictly most-recent-first.

    Only in that order does first-match resolution agree with picking
    the nearest preceding era.
    """
    starts = [era.start for era in zone.eras]
    return all(a > b for a, b in zip(starts, starts[1:]))


def describe_zone(zone: Zone) -> dict[str, Any]:
    """JSON-friendly description of *zone*."""
    return {
        "default_offset": zone.default_offset,
        "eras": [{"start": era.start, "offset": era.offset} for era in zone.eras],
        "utc": zone.is_utc,
    }
