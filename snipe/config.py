"""Config for block/time conversions."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from snipe.constants import (
    AVERAGE_BLOCK_SECONDS,
    DEFAULT_TIME_ZONE,
    GENESIS_UNIX,
    LOG_CONFIG_FILE,
)
from snipe.errors import ConfigError

load_dotenv()


@dataclass(frozen=True)
class ChainConfig:
    """Chain constants the parser, oracle and search engine agree on.

    Attributes:
    genesis_unix -- unix time of block 0, lower bound for every query
    average_block_seconds -- per block interval used beyond the chain head
    """

    genesis_unix: int
    average_block_seconds: int

    @staticmethod
    def mainnet() -> ChainConfig:
        """Ethereum mainnet constants."""
        return ChainConfig(
            genesis_unix=GENESIS_UNIX,
            average_block_seconds=AVERAGE_BLOCK_SECONDS,
        )


@dataclass(frozen=True)
class SnipeConfig:
    """Endpoint configuration of a single conversion request."""

    rpc_url: str | None
    time_zone: str = DEFAULT_TIME_ZONE
    date_format: str | None = None

    @staticmethod
    def from_env() -> SnipeConfig:
        """Initialize snipe config from environment variables (and .env file)."""
        load_dotenv()
        return SnipeConfig(
            rpc_url=os.environ.get("SNIPE_RPC_URL") or None,
            time_zone=os.environ.get("SNIPE_TIME_ZONE") or DEFAULT_TIME_ZONE,
            date_format=os.environ.get("SNIPE_DATE_FORMAT") or None,
        )

    def with_overrides(
        self,
        rpc_url: str | None = None,
        time_zone: str | None = None,
        date_format: str | None = None,
    ) -> SnipeConfig:
        """Returns a copy where every non-empty argument replaces the stored value"""
        return replace(
            self,
            rpc_url=rpc_url or self.rpc_url,
            time_zone=time_zone or self.time_zone,
            date_format=date_format or self.date_format,
        )

    def require_rpc_url(self) -> str:
        """The rpc url, failing loudly when it was never configured"""
        if not self.rpc_url:
            raise ConfigError(
                "No rpc url configured: pass --rpc-url or set SNIPE_RPC_URL"
            )
        return self.rpc_url


@dataclass(frozen=True)
class IOConfig:
    """Configuration of input and output."""

    log_config_file: Path

    @staticmethod
    def from_env() -> IOConfig:
        """Initialize io config from environment variables."""
        log_config_file = os.environ.get("LOG_CONFIG_FILE")
        return IOConfig(
            log_config_file=Path(log_config_file)
            if log_config_file
            else LOG_CONFIG_FILE
        )
