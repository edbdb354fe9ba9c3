from typing import Union
from unittest.mock import AsyncMock, MagicMock

import pytest
import ujson

API_KEY = 'test-blocknative-key'


def make_block_price(block_number: int = 100, prices: tuple = (10, 20, 30, 40)) -> dict:
    return {
        'blockNumber': block_number,
        'estimatedTransactionCount': 150,
        'baseFeePerGas': 11.5,
        'estimatedPrices': [
            {
                'confidence': confidence,
                'price': price,
                'maxPriorityFeePerGas': price / 10,
                'maxFeePerGas': price + 0.25,
            }
            for confidence, price in zip((99, 95, 90, 80), reversed(prices))
        ],
    }


def make_response(*block_prices: dict) -> dict:
    return {
        'system': 'ethereum',
        'network': 'main',
        'unit': 'gwei',
        'maxPrice': 250,
        'blockPrices': list(block_prices),
    }


def make_fake_response(body: Union[bytes, str, dict], status: int = 200) -> MagicMock:
    if isinstance(body, dict):
        body = ujson.dumps(body)
    response = MagicMock()
    response.status = status
    if isinstance(body, str):
        body = body.encode()
    response.read = AsyncMock(return_value=body)
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def make_fake_session(*bodies: Union[bytes, str, dict], status: int = 200) -> MagicMock:
    session = MagicMock()
    session.get.side_effect = [make_fake_response(body, status) for body in bodies]
    return session


@pytest.fixture()
def blocknative_response() -> dict:
    return make_response(make_block_price())


@pytest.fixture()
def fake_session(blocknative_response) -> MagicMock:
    return make_fake_session(blocknative_response)
