import asyncio
import copy
from abc import ABC, abstractmethod
from typing import Optional

from aiohttp import ClientError
from pydantic import ValidationError

from gas_oracle.config import Config
from gas_oracle.config import config as default_config
from gas_oracle.models.gas_category import GasCategory
from gas_oracle.utils.errors import (
    DecodeError,
    GasOracleError,
    TransportError,
    UnhandledOracleError,
)


class GasOracle(ABC):
    """
    Common interface of all gas price backends.

    Callers hold a GasOracle and never depend on the concrete backend. Every call
    makes a single network round trip and never mutates the oracle, so one
    instance can serve concurrent callers.
    """

    ORACLE_NAME = 'base_oracle'

    def __init__(
        self,
        config: Optional[Config] = None,
        gas_category: GasCategory = GasCategory.STANDARD,
    ):
        self.config = config or default_config
        self.gas_category = gas_category

    def with_category(self, gas_category: GasCategory) -> "GasOracle":
        """Returns a copy of the oracle which quotes the given category."""
        oracle = copy.copy(self)
        oracle.gas_category = gas_category
        return oracle

    @abstractmethod
    async def fetch(self) -> int:
        """
        Legacy gas price for the configured category.

        Returns:
            Gas price in wei.
        """

    @abstractmethod
    async def estimate_eip1559_fees(self) -> tuple[int, int]:
        """
        Fee pair for a type-2 transaction.

        Returns:
            (base_fee, priority_fee) in wei. Backends put the max fee per gas
            into the base_fee slot.
        """

    def handle_exception(self, exception: Exception, **kwargs) -> GasOracleError:
        if isinstance(exception, GasOracleError):
            return exception
        if isinstance(exception, (KeyError, ValueError, ValidationError)):
            return DecodeError(self.ORACLE_NAME, str(exception), **kwargs)
        if isinstance(exception, (ClientError, asyncio.TimeoutError)):
            return TransportError(self.ORACLE_NAME, str(exception), **kwargs)
        return UnhandledOracleError(self.ORACLE_NAME, str(exception), **kwargs)

    def __repr__(self):
        return f'{self.__class__.__name__}(gas_category={self.gas_category.name})'
