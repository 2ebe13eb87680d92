"""ConvertService — calendar breakdowns and offset resolution for one zone."""

from __future__ import annotations

import logging
from typing import Any

from civtime.domain.fields import to_parts
from civtime.domain.instant import Instant, millis_to_posix, posix_to_millis
from civtime.domain.zone import Zone, describe_zone, eras_in_canonical_order, resolve_era
from civtime.services.result import ServiceResult

logger = logging.getLogger(__name__)

ORDER_WARNING = (
    "Zone eras are not most-recent-first; first-match resolution may pick "
    "an older era than the nearest preceding one"
)


class ConvertService:
    """Answers calendar questions about instants in a fixed zone."""

    def __init__(self, zone: Zone) -> None:
        self._zone = zone

    @property
    def zone(self) -> Zone:
        return self._zone

    def _warnings(self) -> list[str]:
        return [] if eras_in_canonical_order(self._zone) else [ORDER_WARNING]

    def breakdown(self, instant: Instant | int) -> ServiceResult:
        """Every calendar field of *instant* (an Instant or a millisecond count)."""
        if not isinstance(instant, Instant):
            try:
                instant = millis_to_posix(instant)
            except TypeError as exc:
                return ServiceResult.failure(
                    "breakdown", "INVALID_INSTANT", str(exc), value=repr(instant)
                )

        parts = to_parts(self._zone, instant)
        logger.debug(
            "Broke down %d ms with offset %d", posix_to_millis(instant), parts.offset
        )
        return ServiceResult.success(
            "breakdown",
            {
                "millis": posix_to_millis(instant),
                "year": parts.year,
                "month": parts.month.value,
                "month_number": parts.month.number,
                "day": parts.day,
                "weekday": parts.weekday.value,
                "hour": parts.hour,
                "minute": parts.minute,
                "second": parts.second,
                "millisecond": parts.millisecond,
                "offset": parts.offset,
            },
            self._warnings(),
        )

    def resolve(self, minute: int) -> ServiceResult:
        """Which offset applies at *minute* since epoch, and where it came from."""
        era = resolve_era(self._zone, minute)
        if era is None:
            offset, source = self._zone.default_offset, "default"
        else:
            offset, source = era.offset, "era"
        logger.debug("Resolved minute %d to offset %d (%s)", minute, offset, source)
        data: dict[str, Any] = {"minute": minute, "offset": offset, "source": source}
        if era is not None:
            data["era_start"] = era.start
        return ServiceResult.success("resolve", data, self._warnings())

    def describe(self) -> ServiceResult:
        """The zone's default offset and era table."""
        return ServiceResult.success("zone", describe_zone(self._zone), self._warnings())

    def stamp(self, instant: Instant) -> ServiceResult:
        """The raw millisecond count of *instant* with its UTC ISO rendering."""
        from civtime.infrastructure.host import to_datetime

        return ServiceResult.success(
            "now",
            {
                "millis": posix_to_millis(instant),
                "utc": to_datetime(instant).isoformat(timespec="milliseconds"),
            },
        )
