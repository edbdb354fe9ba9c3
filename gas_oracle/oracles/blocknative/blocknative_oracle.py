import asyncio
from typing import Optional

import ujson
from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout
from pydantic import ValidationError

from gas_oracle.config import Config
from gas_oracle.models.blocknative_models import (
    BlockNativeGasResponse,
    EstimatedPrice,
)
from gas_oracle.models.gas_category import GasCategory
from gas_oracle.oracles.base_oracle import GasOracle
from gas_oracle.utils.errors import DataConsistencyError, TransportError
from gas_oracle.utils.httputils import build_auth_headers, get_client_session
from gas_oracle.utils.logger import LogArgs, get_logger
from gas_oracle.utils.units import blocknative_price_to_wei, gwei_to_wei

logger = get_logger(__name__)


class BlockNativeOracle(GasOracle):
    """
    Gas oracle backed by the BlockNative gas estimator.
    Docs: https://docs.blocknative.com/gas-prediction/gas-platform

    Every request carries the API key in the `Authorization` header. The key is
    kept out of logs and repr.
    """

    ORACLE_NAME = 'blocknative'

    def __init__(
        self,
        api_key: str,
        session: Optional[ClientSession] = None,
        config: Optional[Config] = None,
        gas_category: GasCategory = GasCategory.STANDARD,
    ):
        super().__init__(config=config, gas_category=gas_category)
        self._headers = build_auth_headers(api_key, self.ORACLE_NAME)
        self.aiohttp_session = session or get_client_session()
        self.url = self.config.BLOCKNATIVE_GAS_PRICE_ENDPOINT
        self.request_timeout = ClientTimeout(total=self.config.REQUEST_TIMEOUT)

    async def _get_response_body(self) -> tuple[int, bytes]:
        async with self.aiohttp_session.get(
            self.url, headers=self._headers, timeout=self.request_timeout
        ) as response:
            response: ClientResponse
            log_args = {
                LogArgs.url: self.url,
                LogArgs.gas_category: self.gas_category.name,
            }
            logger.debug(
                'Request GET %(url)s for %(gas_category)s', log_args, extra=log_args
            )
            return response.status, await response.read()

    async def query(self) -> BlockNativeGasResponse:
        """
        Requests the current block price estimates.

        Raises:
            TransportError: connection failure, timeout or non-success status.
            DecodeError: the body is not a valid BlockNative response.
        """
        try:
            status, body = await self._get_response_body()
        except (ClientError, asyncio.TimeoutError) as e:
            raise self.handle_exception(e, url=self.url) from e

        # JSON is UTF-8; the lossy copy is only for logs and error messages.
        text = body.decode('utf-8', errors='replace')

        if not 200 <= status < 300:
            log_args = {
                LogArgs.gas_oracle: self.ORACLE_NAME,
                LogArgs.status: status,
                LogArgs.response: text,
            }
            logger.error(
                'Unexpected status %(status)s from %(gas_oracle)s (resp: %(response)s)',
                log_args,
                extra=log_args,
            )
            raise TransportError(
                self.ORACLE_NAME, f'HTTP {status}: {text}', status=status, url=self.url
            )

        try:
            return BlockNativeGasResponse.model_validate(ujson.loads(body.decode('utf-8')))
        except (ValueError, ValidationError) as e:
            log_args = {
                LogArgs.gas_oracle: self.ORACLE_NAME,
                LogArgs.response: text,
            }
            logger.error(
                'Error from %(gas_oracle)s: %(err)r (resp: %(response)s)',
                {**log_args, 'err': e},
                extra={**log_args, 'err': e},
            )
            raise self.handle_exception(e, response=text) from e

    def select_estimated_price(
        self, response: BlockNativeGasResponse
    ) -> EstimatedPrice:
        """Picks the configured category's tier from the most recent block estimate."""
        if not response.block_prices:
            raise DataConsistencyError(
                self.ORACLE_NAME, 'Response contains no block prices'
            )
        block_price = response.block_prices[-1]
        confidence = self.gas_category.confidence
        for estimated_price in block_price.estimated_prices:
            if estimated_price.confidence == confidence:
                return estimated_price
        raise DataConsistencyError(
            self.ORACLE_NAME,
            f'No estimate with confidence {confidence} '
            f'in block {block_price.block_number}',
            confidence=confidence,
            block_number=block_price.block_number,
        )

    async def fetch(self) -> int:
        response = await self.query()
        estimated_price = self.select_estimated_price(response)
        return blocknative_price_to_wei(estimated_price.price)

    async def estimate_eip1559_fees(self) -> tuple[int, int]:
        response = await self.query()
        estimated_price = self.select_estimated_price(response)
        base_fee = gwei_to_wei(estimated_price.max_fee_per_gas)
        priority_fee = gwei_to_wei(estimated_price.max_priority_fee_per_gas)
        return base_fee, priority_fee
