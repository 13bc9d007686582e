"""
Minimal chain client: the current block height and the timestamp of block N.
Every call is a fresh JSON-RPC round trip (no retries, no caching).
"""

from __future__ import annotations

from typing import Any

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from snipe.errors import RpcError
from snipe.logger import set_log

log = set_log(__name__)

# web3 surfaces node side errors as ValueError on some versions.
TRANSPORT_ERRORS = (Web3Exception, requests.RequestException, ValueError)


class ChainClient:
    """Wraps a Web3 instance, translating its failures into RpcError"""

    def __init__(self, web3: Web3):
        self.web3 = web3

    @staticmethod
    def from_url(rpc_url: str) -> ChainClient:
        """Connects over HTTP to the node at `rpc_url`"""
        return ChainClient(Web3(Web3.HTTPProvider(rpc_url)))

    def current_height(self) -> int:
        """Highest block number the node currently knows about"""
        try:
            height = self.web3.eth.block_number
        except TRANSPORT_ERRORS as err:
            raise RpcError("eth_blockNumber", err) from err
        log.debug(f"Chain head at block {height}")
        return int(height)

    def timestamp_of(self, height: int) -> int:
        """Unix timestamp of an already mined block"""
        operation = f"eth_getBlockByNumber({height})"
        try:
            block = self.web3.eth.get_block(height)
        except TRANSPORT_ERRORS as err:
            raise RpcError(operation, err) from err
        return parse_timestamp(operation, block)


def parse_timestamp(operation: str, block: Any) -> int:
    """Extracts the timestamp field of a block payload (int or hex string)"""
    if block is None:
        raise RpcError(operation, "node returned no block")
    try:
        timestamp = block["timestamp"]
    except (KeyError, TypeError) as err:
        raise RpcError(operation, f"block payload has no timestamp: {block}") from err

    try:
        if isinstance(timestamp, str):
            return int(timestamp, 16)
        return int(timestamp)
    except (TypeError, ValueError) as err:
        raise RpcError(operation, f"malformed timestamp {timestamp!r}") from err
