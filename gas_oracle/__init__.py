from gas_oracle.models.gas_category import GasCategory, gas_category_to_confidence
from gas_oracle.oracles import BlockNativeOracle, GasOracle, Web3NodeOracle
from gas_oracle.utils.errors import (
    DataConsistencyError,
    DecodeError,
    Eip1559NotSupportedError,
    GasOracleError,
    InvalidCredentialError,
    TransportError,
)
from gas_oracle.utils.httputils import setup_client_session, teardown_client_session
from gas_oracle.utils.logger import setup_logging
from gas_oracle.utils.units import GWEI_TO_WEI, gwei_to_wei

__all__ = [
    'GasCategory',
    'gas_category_to_confidence',
    'GasOracle',
    'BlockNativeOracle',
    'Web3NodeOracle',
    'GasOracleError',
    'TransportError',
    'DecodeError',
    'DataConsistencyError',
    'Eip1559NotSupportedError',
    'InvalidCredentialError',
    'setup_client_session',
    'teardown_client_session',
    'setup_logging',
    'GWEI_TO_WEI',
    'gwei_to_wei',
]
