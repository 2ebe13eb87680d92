"""Civil calendar conversion — minutes since epoch to Gregorian dates.

Howard Hinnant's ``civil_from_days`` algorithm, shifted so the internal
400-year era begins on 0000-03-01.  Integer arithmetic only.

All divisions that can see a negative operand are floored (round toward
negative infinity), which keeps pre-1970 instants on the right day.
"""

from __future__ import annotations

from typing import NamedTuple

from civtime.domain.types import Weekday

MINUTES_PER_DAY = 1440
DAYS_PER_ERA = 146097  # 400 Gregorian years

# Days from 0000-03-01 to 1970-01-01.
EPOCH_SHIFT = 719468

# Index 0 is the epoch day, 1970-01-01, a Thursday.
_WEEKDAYS_FROM_EPOCH: tuple[Weekday, ...] = (
    Weekday.THU,
    Weekday.FRI,
    Weekday.SAT,
    Weekday.SUN,
    Weekday.MON,
    Weekday.TUE,
    Weekday.WED,
)


class CivilDate(NamedTuple):
    """A proleptic Gregorian date: month is 1-12, day is 1-31."""

    year: int
    month: int
    day: int


def floor_div(numerator: int, divisor: int) -> int:
    """Integer division rounding toward negative infinity."""
    return numerator // divisor


def floor_mod(numerator: int, divisor: int) -> int:
    """Modulo with the sign of *divisor* (never negative for positive divisors)."""
    return numerator % divisor


def days_to_civil_date(days: int) -> CivilDate:
    """Convert days since 1970-01-01 to a :class:`CivilDate`."""
    raw_day = days + EPOCH_SHIFT
    # Floored division already rounds negative days into the previous era.
    era = floor_div(raw_day, DAYS_PER_ERA)
    day_of_era = raw_day - era * DAYS_PER_ERA  # [0, 146096]
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365  # [0, 399]
    year = year_of_era + era * 400
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    mp = (5 * day_of_year + 2) // 153  # [0, 11], March is 0
    month = mp + 3 if mp < 10 else mp - 9
    day = day_of_year - (153 * mp + 2) // 5 + 1
    if month <= 2:
        year += 1
    return CivilDate(year, month, day)


def minutes_to_civil_date(total_minutes: int) -> CivilDate:
    """Convert minutes since the epoch to the civil date containing them."""
    return days_to_civil_date(floor_div(total_minutes, MINUTES_PER_DAY))


def minutes_to_weekday(total_minutes: int) -> Weekday:
    """Return the weekday of the day containing *total_minutes*."""
    day = floor_div(total_minutes, MINUTES_PER_DAY)
    return _WEEKDAYS_FROM_EPOCH[floor_mod(day, 7)]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to days since 1970-01-01.

    Inverse of :func:`days_to_civil_date` for valid dates.  Out-of-range
    days are not validated and simply overflow into neighbouring dates.
    """
    if month <= 2:
        year -= 1
    era = floor_div(year, 400)
    year_of_era = year - era * 400  # [0, 399]
    mp = month - 3 if month > 2 else month + 9
    day_of_year = (153 * mp + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - EPOCH_SHIFT
