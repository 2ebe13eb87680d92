"""Host collaborators: wall clock, local offset, and datetime interop.

``now()`` and ``here()`` each perform one synchronous read of host
state.  Repeated calls need not agree with each other.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime, timedelta

from civtime.domain.calendar import floor_div
from civtime.domain.instant import Instant, millis_to_posix, posix_to_millis
from civtime.domain.zone import Zone, custom_zone

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)
_ONE_MINUTE = timedelta(minutes=1)


def now() -> Instant:
    """Current host wall-clock time, floored to the millisecond."""
    return millis_to_posix(floor_div(time.time_ns(), 1_000_000))


def local_offset_minutes() -> int:
    """The host's current local UTC offset, in whole minutes east of UTC."""
    offset = datetime.now().astimezone().utcoffset()
    if offset is None:
        return 0
    return offset // _ONE_MINUTE


def here() -> Zone:
    """A flat zone using the host's offset at call time.

    Only the offset in effect right now is captured; DST transitions
    and historical changes of the host zone are not represented.
    """
    offset = local_offset_minutes()
    logger.debug("Host local offset: %d minutes", offset)
    return custom_zone(offset, ())


def to_datetime(instant: Instant) -> datetime:
    """Convert *instant* to an aware UTC :class:`datetime`."""
    return _EPOCH + timedelta(milliseconds=posix_to_millis(instant))


def from_datetime(value: datetime) -> Instant:
    """Convert a :class:`datetime` to an :class:`Instant`.

    Naive datetimes are read as UTC.  Microseconds below the millisecond
    are floored away.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return millis_to_posix((value - _EPOCH) // _ONE_MILLI)
