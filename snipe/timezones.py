"""
Timezone resolution backed by the pytz database.

Local wall-clock times around DST transitions are handled as follows:
ambiguous times (the repeated hour when clocks fall back) resolve to the
earlier of the two instants unless `strict` is requested, in which case
AmbiguousLocalTime is raised; nonexistent times (the skipped hour when
clocks spring forward) always raise NonexistentLocalTime.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timezone

import pytz
from pytz.tzinfo import BaseTzInfo

from snipe.constants import DEFAULT_DATE_FORMAT
from snipe.errors import (
    AmbiguousLocalTime,
    InvalidTimezone,
    NonexistentLocalTime,
    UnrepresentableTime,
)


@dataclass(frozen=True)
class TzHandle:
    """A resolved zone, converting between unix instants and wall-clock fields"""

    zone: BaseTzInfo

    @property
    def name(self) -> str:
        """Zone identifier, e.g. America/New_York"""
        return str(self.zone.zone)

    def to_local(self, unix_time: int) -> datetime:
        """Aware datetime of `unix_time` in this zone"""
        try:
            utc = datetime.fromtimestamp(unix_time, tz=timezone.utc)
            return utc.astimezone(self.zone)
        except (ValueError, OverflowError, OSError) as err:
            raise UnrepresentableTime(unix_time, err) from err

    def to_unix(self, wall_clock: datetime, strict: bool = False) -> int:
        """Unix time of naive `wall_clock` fields interpreted in this zone"""
        try:
            aware = self.zone.localize(wall_clock, is_dst=None)
        except pytz.exceptions.NonExistentTimeError as err:
            raise NonexistentLocalTime(str(wall_clock), self.name) from err
        except pytz.exceptions.AmbiguousTimeError as err:
            if strict:
                raise AmbiguousLocalTime(str(wall_clock), self.name) from err
            # DST side of the overlap comes first.
            aware = self.zone.localize(wall_clock, is_dst=True)
        return calendar.timegm(aware.utctimetuple())

    def render(self, unix_time: int, date_format: str | None = None) -> str:
        """Formats `unix_time` as local time of this zone"""
        return self.to_local(unix_time).strftime(date_format or DEFAULT_DATE_FORMAT)


def resolve(identifier: str) -> TzHandle:
    """Looks up a zone by name, raising InvalidTimezone for unknown names"""
    try:
        return TzHandle(pytz.timezone(identifier))
    except pytz.exceptions.UnknownTimeZoneError as err:
        raise InvalidTimezone(identifier) from err


def list_all() -> list[str]:
    """All identifiers known to the zone database, in stable order"""
    return list(pytz.all_timezones)
