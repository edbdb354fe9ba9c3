import pytest
from pydantic import ValidationError

from gas_oracle.models.blocknative_models import BlockNativeGasResponse
from gas_oracle.tests.fixtures.aiohttp_session import make_block_price, make_response


def test_parse_camel_case_response():
    response = BlockNativeGasResponse.model_validate(
        make_response(make_block_price(block_number=42))
    )
    assert response.system == 'ethereum'
    assert response.max_price == 250
    block_price = response.block_prices[0]
    assert block_price.block_number == 42
    assert block_price.estimated_transaction_count == 150
    assert block_price.base_fee_per_gas == 11.5
    assert [p.confidence for p in block_price.estimated_prices] == [99, 95, 90, 80]


def test_optional_fields_may_be_missing():
    response = BlockNativeGasResponse.model_validate({'blockPrices': []})
    assert response.system is None
    assert response.network is None
    assert response.unit is None
    assert response.max_price is None
    assert response.block_prices == []


def test_block_prices_are_required():
    with pytest.raises(ValidationError):
        BlockNativeGasResponse.model_validate({'system': 'ethereum'})


def test_confidence_out_of_range():
    block_price = make_block_price()
    block_price['estimatedPrices'][0]['confidence'] = 101
    with pytest.raises(ValidationError):
        BlockNativeGasResponse.model_validate(make_response(block_price))


@pytest.mark.parametrize('value', [float('inf'), float('nan')])
def test_non_finite_fees_rejected(value):
    block_price = make_block_price()
    block_price['estimatedPrices'][0]['maxFeePerGas'] = value
    with pytest.raises(ValidationError):
        BlockNativeGasResponse.model_validate(make_response(block_price))
