"""Block timestamp oracle: real timestamps up to the chain head, predictions beyond it."""

from __future__ import annotations

from dataclasses import dataclass

from snipe.chain import ChainClient
from snipe.config import ChainConfig
from snipe.errors import InvalidBlockNumber
from snipe.logger import set_log

log = set_log(__name__)


@dataclass(frozen=True)
class BlockTime:
    """Timestamp of a block, flagged when it is only a prediction"""

    height: int
    unix_time: int
    predicted: bool


class BlockTimestampOracle:
    """
    Answers "what is (or will be) the unix time of block N".

    The chain head is re-read on every call, so a block that was in the
    future on one call may be realized on the next. Estimates are
    non-decreasing in the block number, which the block search relies on.
    """

    def __init__(self, client: ChainClient, chain: ChainConfig):
        self.client = client
        self.chain = chain

    def lookup(self, height: int) -> BlockTime:
        """Real timestamp of a mined block, extrapolated from the head otherwise"""
        if height < 0:
            raise InvalidBlockNumber(height)
        head = self.client.current_height()
        if height <= head:
            return BlockTime(height, self.client.timestamp_of(height), predicted=False)

        head_time = self.client.timestamp_of(head)
        unix_time = head_time + self.chain.average_block_seconds * (height - head)
        log.debug(
            f"Block {height} is {height - head} blocks ahead of head {head}, "
            f"predicting {unix_time}"
        )
        return BlockTime(height, unix_time, predicted=True)

    def estimate(self, height: int) -> int:
        """Unix time of block `height`"""
        return self.lookup(height).unix_time
