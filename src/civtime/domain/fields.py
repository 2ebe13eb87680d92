"""Calendar field accessors.

Every accessor takes ``(zone, instant)`` and is pure.  Date and
hour/minute fields go through zone resolution; seconds and
milliseconds do not, because zone offsets are whole minutes.
"""

from __future__ import annotations

from dataclasses import dataclass

from civtime.domain.calendar import (
    floor_div,
    floor_mod,
    minutes_to_civil_date,
    minutes_to_weekday,
)
from civtime.domain.instant import Instant, posix_to_millis
from civtime.domain.types import Month, Weekday
from civtime.domain.zone import Zone, adjusted_minutes, instant_minutes, resolve_offset


def to_year(zone: Zone, instant: Instant) -> int:
    """Proleptic Gregorian year; 0 and negative years come before 1 AD."""
    return minutes_to_civil_date(adjusted_minutes(zone, instant)).year


def to_month(zone: Zone, instant: Instant) -> Month:
    """Month of the year as a :class:`Month`."""
    return Month.from_number(minutes_to_civil_date(adjusted_minutes(zone, instant)).month)


def to_day(zone: Zone, instant: Instant) -> int:
    """Day of the month, 1-31."""
    return minutes_to_civil_date(adjusted_minutes(zone, instant)).day


def to_weekday(zone: Zone, instant: Instant) -> Weekday:
    """Day of the week as a :class:`Weekday`."""
    return minutes_to_weekday(adjusted_minutes(zone, instant))


def to_hour(zone: Zone, instant: Instant) -> int:
    """Hour of the day, 0-23."""
    return floor_mod(floor_div(adjusted_minutes(zone, instant), 60), 24)


def to_minute(zone: Zone, instant: Instant) -> int:
    """Minute of the hour, 0-59."""
    return floor_mod(adjusted_minutes(zone, instant), 60)


def to_second(zone: Zone, instant: Instant) -> int:
    """Second of the minute, 0-59.  *zone* is accepted but never shifts it."""
    return floor_mod(floor_div(posix_to_millis(instant), 1000), 60)


def to_millis(zone: Zone, instant: Instant) -> int:
    """Millisecond of the second, 0-999.  *zone* is accepted but never shifts it."""
    return floor_mod(posix_to_millis(instant), 1000)


@dataclass(frozen=True)
class CivilParts:
    """Every calendar field of one instant in one zone."""

    year: int
    month: Month
    day: int
    weekday: Weekday
    hour: int
    minute: int
    second: int
    millisecond: int
    offset: int


def to_parts(zone: Zone, instant: Instant) -> CivilParts:
    """All fields at once, resolving the zone a single time."""
    minutes = instant_minutes(instant)
    offset = resolve_offset(zone, minutes)
    local = minutes + offset
    date = minutes_to_civil_date(local)
    return CivilParts(
        year=date.year,
        month=Month.from_number(date.month),
        day=date.day,
        weekday=minutes_to_weekday(local),
        hour=floor_mod(floor_div(local, 60), 24),
        minute=floor_mod(local, 60),
        second=to_second(zone, instant),
        millisecond=to_millis(zone, instant),
        offset=offset,
    )
