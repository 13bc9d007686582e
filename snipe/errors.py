"""Exceptions raised by block/time conversions.

None of these are recovered from internally: each one ends the current
conversion and carries enough context (offending input, chained cause)
for the caller to report it.
"""

from __future__ import annotations


class SnipeError(Exception):
    """Base class for all conversion failures"""


class ConfigError(SnipeError):
    """Required configuration is missing"""


class RpcError(SnipeError):
    """Network, transport or malformed-response failure of the chain client"""

    def __init__(self, operation: str, cause: Exception | str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"RPC call {operation} failed: {cause}")


class InvalidTimezone(SnipeError):
    """Unknown timezone identifier"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Invalid time zone {identifier!r} (see `snipe list-timezones`)"
        )


class MalformedTimeString(SnipeError):
    """Input is not of the form YYYY[-MM[-DD[ hh[:mm[:ss]]]]]"""

    def __init__(self, time: str, reason: str):
        self.time = time
        self.reason = reason
        super().__init__(f"Malformed time {time!r}: {reason}")


class PredatesGenesis(SnipeError):
    """Parsed instant is earlier than the genesis block"""

    def __init__(self, time: str, unix_time: int, genesis_unix: int):
        self.time = time
        self.unix_time = unix_time
        self.genesis_unix = genesis_unix
        super().__init__(
            f"{time!r} ({unix_time}) predates Ethereum genesis ({genesis_unix})"
        )


class TimeInFuture(SnipeError):
    """Search target lies beyond the timestamp of the current chain head"""

    def __init__(self, unix_time: int, head: int, head_time: int):
        self.unix_time = unix_time
        self.head = head
        self.head_time = head_time
        super().__init__(
            f"Time {unix_time} is in the future "
            f"(chain head {head} was mined at {head_time})"
        )


class AmbiguousLocalTime(SnipeError):
    """Wall-clock time occurs twice in the zone (DST fall-back)"""

    def __init__(self, wall_clock: str, zone: str):
        self.wall_clock = wall_clock
        self.zone = zone
        super().__init__(f"{wall_clock} is ambiguous in {zone}")


class NonexistentLocalTime(SnipeError):
    """Wall-clock time is skipped in the zone (DST spring-forward)"""

    def __init__(self, wall_clock: str, zone: str):
        self.wall_clock = wall_clock
        self.zone = zone
        super().__init__(f"{wall_clock} does not exist in {zone}")


class UnrepresentableTime(SnipeError):
    """Unix time lies outside the range a calendar date can express"""

    def __init__(self, unix_time: int, cause: Exception):
        self.unix_time = unix_time
        self.cause = cause
        super().__init__(f"Could not convert unix time {unix_time} to a date: {cause}")


class InvalidBlockNumber(SnipeError):
    """Block numbers are non-negative"""

    def __init__(self, height: int):
        self.height = height
        super().__init__(f"Invalid block number {height}: must not be negative")
