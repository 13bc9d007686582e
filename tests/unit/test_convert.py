import pytest
from pytest_mock import MockerFixture

from snipe.config import ChainConfig, SnipeConfig
from snipe.constants import GENESIS_UNIX
from snipe.convert import block_to_time, list_timezones, time_to_block
from snipe.errors import (
    ConfigError,
    InvalidBlockNumber,
    InvalidTimezone,
    MalformedTimeString,
    PredatesGenesis,
    TimeInFuture,
    UnrepresentableTime,
)
from tests.unit.util_methods import FakeChainClient, chain_timestamps

RPC_URL = "http://localhost:8545"


@pytest.fixture
def chain(mocker: MockerFixture) -> FakeChainClient:
    client = FakeChainClient(chain_timestamps([15] * 1000))
    mocker.patch("snipe.convert.ChainClient.from_url", return_value=client)
    return client


def test_block_to_time(chain):
    config = SnipeConfig(rpc_url=RPC_URL)
    assert block_to_time(config, 1) == "2015-07-30 15:26:28 UTC"
    assert block_to_time(config, 0) == "2015-07-30 15:26:13 UTC"


def test_block_to_time_in_zone_with_format(chain):
    config = SnipeConfig(
        rpc_url=RPC_URL, time_zone="America/New_York", date_format="%H:%M:%S %Z"
    )
    assert block_to_time(config, 0) == "11:26:13 EDT"


def test_future_block_to_time(chain):
    config = SnipeConfig(rpc_url=RPC_URL, date_format="%H:%M:%S")
    # head is block 1000 at 15:26:13 + 15000s, then 12 seconds per block
    assert chain.timestamps[-1] == GENESIS_UNIX + 15 * 1000
    assert block_to_time(config, 1000) == "19:36:13"
    assert block_to_time(config, 1010) == "19:38:13"


def test_time_to_block(chain):
    config = SnipeConfig(rpc_url=RPC_URL)
    assert time_to_block(config, "2015") == 0
    assert time_to_block(config, "2015-07-30 15:26:28") == 1
    assert time_to_block(config, "2015-07-30 15:26:29") == 2
    assert time_to_block(config, "2015-07-30 16") == 136


def test_time_to_block_in_zone(chain):
    config = SnipeConfig(rpc_url=RPC_URL, time_zone="America/New_York")
    assert time_to_block(config, "2015-07-30 11:26:28") == 1
    assert time_to_block(config, "2015-07-30 11") == 0


def test_time_in_future(chain):
    with pytest.raises(TimeInFuture):
        time_to_block(SnipeConfig(rpc_url=RPC_URL), "2030")


def test_validation_before_network(mocker: MockerFixture):
    from_url = mocker.patch("snipe.convert.ChainClient.from_url")
    with pytest.raises(InvalidTimezone):
        block_to_time(SnipeConfig(rpc_url=RPC_URL, time_zone="Nowhere/City"), 1)
    with pytest.raises(InvalidTimezone):
        time_to_block(SnipeConfig(rpc_url=RPC_URL, time_zone="Nowhere/City"), "2016")
    with pytest.raises(PredatesGenesis):
        time_to_block(SnipeConfig(rpc_url=RPC_URL), "2014")
    with pytest.raises(MalformedTimeString):
        time_to_block(SnipeConfig(rpc_url=RPC_URL), "yesterday")
    from_url.assert_not_called()


def test_missing_rpc_url(mocker: MockerFixture):
    from_url = mocker.patch("snipe.convert.ChainClient.from_url")
    with pytest.raises(ConfigError):
        block_to_time(SnipeConfig(rpc_url=None), 1)
    from_url.assert_not_called()


def test_custom_chain(chain):
    config = SnipeConfig(rpc_url=RPC_URL, date_format="%H:%M:%S")
    fast_chain = ChainConfig(genesis_unix=GENESIS_UNIX, average_block_seconds=1)
    # head is block 1000 at 15:26:13 + 15000s = 19:36:13
    assert block_to_time(config, 1000, fast_chain) == "19:36:13"
    assert block_to_time(config, 1005, fast_chain) == "19:36:18"


def test_list_timezones():
    zones = list_timezones()
    assert "UTC" in zones
    assert "America/New_York" in zones


def test_far_future_block_to_time(chain):
    with pytest.raises(UnrepresentableTime) as err:
        block_to_time(SnipeConfig(rpc_url=RPC_URL), 10**12)
    assert err.value.unix_time == chain.timestamps[-1] + 12 * (10**12 - 1000)


def test_negative_block_to_time(chain):
    with pytest.raises(InvalidBlockNumber):
        block_to_time(SnipeConfig(rpc_url=RPC_URL), -1)
    assert chain.calls == []
