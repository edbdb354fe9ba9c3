from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BlockNativeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class EstimatedPrice(BlockNativeModel):
    confidence: int = Field(ge=0, le=100)
    price: int = Field(ge=0)
    max_priority_fee_per_gas: float = Field(ge=0)
    max_fee_per_gas: float = Field(ge=0)


class BlockPrice(BlockNativeModel):
    block_number: int
    estimated_transaction_count: int
    base_fee_per_gas: float
    estimated_prices: list[EstimatedPrice]


class BlockNativeGasResponse(BlockNativeModel):
    """Docs: https://docs.blocknative.com/gas-prediction/gas-platform"""

    system: Optional[str] = None
    network: Optional[str] = None
    unit: Optional[str] = None
    max_price: Optional[int] = None
    block_prices: list[BlockPrice]
