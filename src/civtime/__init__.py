"""civtime — civil-time conversion for millisecond instants.

An instant is an int count of milliseconds since 1970-01-01T00:00:00 UTC.
Calendar fields are read through a zone (a default offset plus eras)::

    from civtime import UTC, custom_zone, millis_to_posix, to_hour

    to_hour(custom_zone(60, []), millis_to_posix(0))  # 1
"""

from civtime.domain.fields import (
    CivilParts,
    to_day,
    to_hour,
    to_millis,
    to_minute,
    to_month,
    to_parts,
    to_second,
    to_weekday,
    to_year,
)
from civtime.domain.instant import Instant, millis_to_posix, posix_to_millis
from civtime.domain.types import Month, Weekday
from civtime.domain.zone import UTC, Era, Zone, custom_zone, resolve_offset
from civtime.infrastructure.host import from_datetime, here, now, to_datetime

__version__ = "0.1.0"

__all__ = [
    "UTC",
    "CivilParts",
    "Era",
    "Instant",
    "Month",
    "Weekday",
    "Zone",
    "custom_zone",
    "from_datetime",
    "here",
    "millis_to_posix",
    "now",
    "posix_to_millis",
    "resolve_offset",
    "to_datetime",
    "to_day",
    "to_hour",
    "to_millis",
    "to_minute",
    "to_month",
    "to_parts",
    "to_second",
    "to_weekday",
    "to_year",
]
