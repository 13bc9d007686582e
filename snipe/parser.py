"""
Parses partial time strings (YYYY[-MM[-DD[ hh[:mm[:ss]]]]]) into unix time.

Unspecified trailing components normally take their lowest value, so "2016"
means 2016-01-01 00:00:00. A prefix that agrees with the genesis instant's
local breakdown is instead completed from genesis itself: "2015" and
"2015-07-30" both mean the genesis second rather than a moment before the
chain existed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from snipe.config import ChainConfig
from snipe.constants import (
    TIME_COMPONENT_MINIMUMS,
    TIME_COMPONENT_NAMES,
    TIME_SEPARATORS,
)
from snipe.errors import MalformedTimeString, PredatesGenesis
from snipe.logger import set_log
from snipe.timezones import TzHandle

log = set_log(__name__)

SEPARATOR_PATTERN = re.compile(f"[{re.escape(TIME_SEPARATORS)}]")
MAX_COMPONENTS = len(TIME_COMPONENT_NAMES)


@dataclass(frozen=True)
class PartialTime:
    """The 1-6 leading components (year first) of a wall-clock time"""

    components: tuple[int, ...]

    @staticmethod
    def parse(time: str) -> PartialTime:
        """Splits on `-`, space and `:` in strict year..second order"""
        tokens = split_time(time.strip())
        if len(tokens) > MAX_COMPONENTS:
            raise MalformedTimeString(
                time, f"expected at most {MAX_COMPONENTS} components"
            )
        for name, token in zip(TIME_COMPONENT_NAMES, tokens):
            if not (token.isascii() and token.isdigit()):
                raise MalformedTimeString(time, f"{name} {token!r} is not a number")
        return PartialTime(tuple(int(token) for token in tokens))

    def matches_prefix(self, reference: tuple[int, ...]) -> bool:
        """True if every specified component equals the same position of `reference`"""
        return self.components == tuple(reference[: len(self.components)])

    def complete(self, fill: tuple[int, ...]) -> tuple[int, ...]:
        """Six components, taking the unspecified trailing ones from `fill`"""
        return self.components + tuple(fill[len(self.components) :])


def split_time(time: str) -> list[str]:
    """Splits a time string into its raw components"""
    return SEPARATOR_PATTERN.split(time)


def breakdown(moment: datetime) -> tuple[int, ...]:
    """(year, month, day, hour, minute, second) of a datetime"""
    return (
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
    )


def time_to_unix(
    time: str,
    tz: TzHandle,
    chain: ChainConfig,
    strict: bool = False,
) -> int:
    """
    Unix time of a partial wall-clock time string in zone `tz`.
    Raises MalformedTimeString for unparsable input and PredatesGenesis
    for anything earlier than the genesis block.
    """
    partial = PartialTime.parse(time)
    genesis_local = breakdown(tz.to_local(chain.genesis_unix))

    if partial.matches_prefix(genesis_local):
        log.debug(f"{time!r} is a prefix of genesis {genesis_local} in {tz.name}")
        fields = partial.complete(genesis_local)
    else:
        fields = partial.complete(TIME_COMPONENT_MINIMUMS)

    try:
        wall_clock = datetime(*fields)
    except (ValueError, OverflowError) as err:
        raise MalformedTimeString(time, str(err)) from err

    unix_time = tz.to_unix(wall_clock, strict=strict)
    if unix_time < chain.genesis_unix:
        raise PredatesGenesis(time, unix_time, chain.genesis_unix)
    log.debug(f"Parsed {time!r} in {tz.name} as {unix_time}")
    return unix_time
