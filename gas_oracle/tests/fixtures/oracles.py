from unittest.mock import AsyncMock, MagicMock

import pytest

from gas_oracle.clients.blockchain.web3_client import Web3Client
from gas_oracle.config import Config
from gas_oracle.oracles.blocknative import BlockNativeOracle
from gas_oracle.oracles.web3_node import Web3NodeOracle
from gas_oracle.tests.fixtures.aiohttp_session import API_KEY


@pytest.fixture()
def config() -> Config:
    return Config()


@pytest.fixture()
def blocknative_oracle(fake_session, config) -> BlockNativeOracle:
    return BlockNativeOracle(API_KEY, session=fake_session, config=config)


@pytest.fixture()
def web3_client() -> MagicMock:
    client = MagicMock(spec=Web3Client)
    client.get_gas_price = AsyncMock(return_value=25_000_000_000)
    client.get_fee_history = AsyncMock(
        return_value={
            'oldestBlock': 100,
            'baseFeePerGas': [
                10_000_000_000,
                11_000_000_000,
                12_000_000_000,
                13_000_000_000,
                14_000_000_000,
            ],
            'gasUsedRatio': [0.5, 0.6, 0.7, 0.4],
            'reward': [
                [1_000_000_000],
                [2_000_000_000],
                [3_000_000_000],
                [2_000_000_000],
            ],
        }
    )
    return client


@pytest.fixture()
def web3_node_oracle(web3_client, config) -> Web3NodeOracle:
    return Web3NodeOracle(
        'http://localhost:8545', config=config, web3_client=web3_client
    )
