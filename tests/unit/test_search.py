import random
import unittest

from snipe.config import ChainConfig
from snipe.constants import GENESIS_UNIX
from snipe.errors import TimeInFuture
from snipe.oracle import BlockTimestampOracle
from snipe.search import BlockSearch
from tests.unit.util_methods import FakeChainClient, chain_timestamps


def make_search(timestamps: list[int]) -> tuple[BlockSearch, FakeChainClient]:
    client = FakeChainClient(timestamps)
    oracle = BlockTimestampOracle(client, ChainConfig.mainnet())
    return BlockSearch(oracle), client


class TestBlockSearch(unittest.TestCase):
    def setUp(self) -> None:
        rng = random.Random(1438269973)
        self.timestamps = chain_timestamps([rng.randint(1, 30) for _ in range(500)])
        self.search, self.client = make_search(self.timestamps)

    def test_exact_block_search(self):
        for height in [0, 1, 17, 250, 499, 500]:
            self.assertEqual(self.search.find_block(self.timestamps[height]), height)

    def test_block_vague_search(self):
        # one second after block h was mined, the answer is h + 1
        for height in range(len(self.timestamps) - 1):
            found = self.search.find_block(self.timestamps[height] + 1)
            self.assertGreaterEqual(self.timestamps[found], self.timestamps[height] + 1)
            self.assertLess(self.timestamps[found - 1], self.timestamps[height] + 1)

    def test_first_at_or_after(self):
        for target in range(self.timestamps[0], self.timestamps[-1] + 1, 7):
            found = self.search.find_block(target)
            self.assertGreaterEqual(self.timestamps[found], target)
            if found > 0:
                self.assertLess(self.timestamps[found - 1], target)

    def test_before_genesis_returns_first_block(self):
        self.assertEqual(self.search.find_block(GENESIS_UNIX - 3600), 0)

    def test_round_trip(self):
        oracle = self.search.oracle
        for height in range(0, len(self.timestamps), 11):
            found = self.search.find_block(oracle.estimate(height))
            self.assertEqual(oracle.estimate(found), oracle.estimate(height))

    def test_time_in_future(self):
        head_time = self.timestamps[-1]
        with self.assertRaises(TimeInFuture) as err:
            self.search.find_block(head_time + 1)
        self.assertEqual(err.exception.head, len(self.timestamps) - 1)
        self.assertEqual(err.exception.head_time, head_time)
        self.assertEqual(err.exception.unix_time, head_time + 1)

    def test_search_is_logarithmic(self):
        self.client.calls.clear()
        self.search.find_block(self.timestamps[123] + 1)
        probes = self.client.calls.count("current_height") - 1
        self.assertLessEqual(probes, 10)

    def test_single_block_chain(self):
        search, _ = make_search([GENESIS_UNIX])
        self.assertEqual(search.find_block(GENESIS_UNIX), 0)
        self.assertEqual(search.find_block(GENESIS_UNIX - 1), 0)
        with self.assertRaises(TimeInFuture):
            search.find_block(GENESIS_UNIX + 1)


class TestBlockSearchWithDuplicates(unittest.TestCase):
    def test_repeated_timestamps(self):
        # blocks are not guaranteed unique per second
        timestamps = chain_timestamps([0, 0, 5, 0, 12, 1, 0, 0, 9])
        search, _ = make_search(timestamps)
        for target in range(timestamps[0], timestamps[-1] + 1):
            found = search.find_block(target)
            self.assertGreaterEqual(timestamps[found], target)
            self.assertEqual(timestamps[found], min(t for t in timestamps if t >= target))


if __name__ == "__main__":
    unittest.main()
