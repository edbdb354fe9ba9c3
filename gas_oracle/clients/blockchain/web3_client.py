from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.types import FeeHistory

from gas_oracle.config import Config
from gas_oracle.utils.logger import LogArgs, get_logger

logger = get_logger(__name__)


class Web3Client:
    def __init__(self, uri: str, config: Config):
        self.uri = uri
        self.w3 = AsyncWeb3(
            AsyncHTTPProvider(
                endpoint_uri=uri,
                request_kwargs={'timeout': ClientTimeout(total=config.WEB3_TIMEOUT)},
            )
        )

    async def get_gas_price(self) -> int:
        logger.debug('eth_gasPrice', extra={LogArgs.web3_url: self.uri})
        return await self.w3.eth.gas_price

    async def get_fee_history(
        self, block_count: int, reward_percentiles: list[float]
    ) -> FeeHistory:
        logger.debug('eth_feeHistory', extra={LogArgs.web3_url: self.uri})
        return await self.w3.eth.fee_history(block_count, 'latest', reward_percentiles)
