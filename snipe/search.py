"""Binary search for the first block at or after a unix time"""

from __future__ import annotations

from snipe.errors import TimeInFuture
from snipe.logger import set_log
from snipe.oracle import BlockTimestampOracle

log = set_log(__name__)


class BlockSearch:
    """Inverts a BlockTimestampOracle over the range [0, chain head]"""

    def __init__(self, oracle: BlockTimestampOracle):
        self.oracle = oracle

    def find_block(self, unix_time: int) -> int:
        """
        Lowest block number whose timestamp is at or after `unix_time`.
        Raises TimeInFuture if `unix_time` is later than the current head's timestamp.
        """
        client = self.oracle.client
        head = client.current_height()
        head_time = client.timestamp_of(head)
        if unix_time > head_time:
            raise TimeInFuture(unix_time, head, head_time)

        lower, upper = 0, head
        probes = 0
        while lower <= upper:
            mid = (lower + upper) // 2
            mid_time = self.oracle.estimate(mid)
            probes += 1
            log.debug(f"Probe {probes}: block {mid} at {mid_time} in [{lower}, {upper}]")
            if mid_time == unix_time:
                log.info(f"Exact match: block {mid} at {unix_time} after {probes} probes")
                return mid
            if mid_time < unix_time:
                lower = mid + 1
            else:
                upper = mid - 1

        log.info(f"First block after {unix_time} is {lower} ({probes} probes)")
        return lower
