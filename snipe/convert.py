"""
Caller facing conversions. Each call is independent and opens its own chain
client; time zones and time strings are validated before any network call.
"""

from __future__ import annotations

from snipe import timezones
from snipe.chain import ChainClient
from snipe.config import ChainConfig, SnipeConfig
from snipe.logger import set_log
from snipe.oracle import BlockTimestampOracle
from snipe.parser import time_to_unix
from snipe.search import BlockSearch

log = set_log(__name__)


def block_to_time(
    config: SnipeConfig, block_num: int, chain: ChainConfig | None = None
) -> str:
    """
    Convert an Ethereum block number to a time string in the configured zone.
    Blocks that have yet to be mined get a prediction of
    `average_block_seconds` per block past the current head.
    """
    tz = timezones.resolve(config.time_zone)
    chain = chain or ChainConfig.mainnet()
    client = ChainClient.from_url(config.require_rpc_url())

    block_time = BlockTimestampOracle(client, chain).lookup(block_num)
    rendered = tz.render(block_time.unix_time, config.date_format)
    if block_time.predicted:
        log.info(f"Block {block_num} has not been mined, predicted time {rendered}")
    else:
        log.info(f"Block {block_num} was mined at {rendered}")
    return rendered


def time_to_block(
    config: SnipeConfig, time: str, chain: ChainConfig | None = None
) -> int:
    """
    Convert a time of the form YYYY[-MM[-DD[ hh[:mm[:ss]]]]] to the first
    block mined at or after it. Times beyond the chain head are rejected.
    """
    tz = timezones.resolve(config.time_zone)
    chain = chain or ChainConfig.mainnet()
    unix_time = time_to_unix(time, tz, chain)
    client = ChainClient.from_url(config.require_rpc_url())

    block = BlockSearch(BlockTimestampOracle(client, chain)).find_block(unix_time)
    log.info(f"{time!r} ({tz.name}) resolves to block {block}")
    return block


def list_timezones() -> list[str]:
    """All available time zone identifiers"""
    return timezones.list_all()
