"""Calendar enumerations.

Weekday and Month are purely nominal; the converter produces them and
the output layer serializes them by value.
"""

from __future__ import annotations

from enum import StrEnum


class Weekday(StrEnum):
    """Days of the week, Monday first."""

    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"


class Month(StrEnum):
    """Months of the Gregorian year."""

    JAN = "jan"
    FEB = "feb"
    MAR = "mar"
    APR = "apr"
    MAY = "may"
    JUN = "jun"
    JUL = "jul"
    AUG = "aug"
    SEP = "sep"
    OCT = "oct"
    NOV = "nov"
    DEC = "dec"

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Return the month for a 1-based month number."""
        if not 1 <= number <= 12:
            msg = f"Month number out of range: {number}"
            raise ValueError(msg)
        return _MONTHS[number - 1]

    @property
    def number(self) -> int:
        """1-based month number (JAN is 1)."""
        return _MONTHS.index(self) + 1


_MONTHS: tuple[Month, ...] = tuple(Month)
