import asyncio
from statistics import mean
from typing import Optional

from aiohttp import ClientError
from web3.exceptions import Web3Exception

from gas_oracle.clients.blockchain.web3_client import Web3Client
from gas_oracle.config import Config
from gas_oracle.models.gas_category import GasCategory
from gas_oracle.oracles.base_oracle import GasOracle
from gas_oracle.utils.errors import (
    DataConsistencyError,
    Eip1559NotSupportedError,
    TransportError,
)
from gas_oracle.utils.logger import get_logger

logger = get_logger(__name__)


class Web3NodeOracle(GasOracle):
    """
    Gas oracle backed by an Ethereum JSON-RPC node.

    Legacy price comes from eth_gasPrice. EIP-1559 fees come from eth_feeHistory
    over the last FEE_HISTORY_BLOCKS blocks, with the priority fee sampled at
    the category's confidence percentile.
    """

    ORACLE_NAME = 'web3_node'

    def __init__(
        self,
        web3_url: str,
        config: Optional[Config] = None,
        web3_client: Optional[Web3Client] = None,
        gas_category: GasCategory = GasCategory.STANDARD,
    ):
        super().__init__(config=config, gas_category=gas_category)
        self.web3_client = web3_client or Web3Client(web3_url, self.config)

    def handle_exception(self, exception: Exception, **kwargs):
        if isinstance(exception, Web3Exception):
            return TransportError(self.ORACLE_NAME, str(exception), **kwargs)
        return super().handle_exception(exception, **kwargs)

    async def fetch(self) -> int:
        try:
            return await self.web3_client.get_gas_price()
        except (ClientError, asyncio.TimeoutError, Web3Exception) as e:
            raise self.handle_exception(e, method='eth_gasPrice') from e

    async def estimate_eip1559_fees(self) -> tuple[int, int]:
        confidence = self.gas_category.confidence
        try:
            fee_history = await self.web3_client.get_fee_history(
                self.config.FEE_HISTORY_BLOCKS, [confidence]
            )
        except (ClientError, asyncio.TimeoutError, Web3Exception) as e:
            raise self.handle_exception(e, method='eth_feeHistory') from e

        # baseFee for next block
        base_fees = fee_history.get('baseFeePerGas') or []
        if not base_fees or not base_fees[-1]:
            raise Eip1559NotSupportedError(
                self.ORACLE_NAME, 'Node reports no base fee'
            )
        base_fee = base_fees[-1]

        rewards = [reward[0] for reward in fee_history.get('reward') or [] if reward]
        if not rewards:
            raise DataConsistencyError(
                self.ORACLE_NAME,
                f'Fee history has no rewards at percentile {confidence}',
                confidence=confidence,
            )
        priority_fee = int(mean(rewards))
        logger.debug(
            'Estimated base fee %s, priority fee %s', base_fee, priority_fee
        )
        return 2 * base_fee + priority_fee, priority_fee
