from typing import Optional

from gas_oracle.utils.logger import LogArgs


class UserMistakes:
    error_owner = 'user'


class OurMistakes:
    error_owner = 'gas_oracle'


class ProviderMistakes:
    error_owner = 'provider'


class GasOracleError(Exception):
    """common error for gas oracles"""
    msg_to_log = 'Gas oracle error'
    error_owner = 'gas_oracle'

    def __init__(self, oracle: str, message: Optional[str] = None, **kwargs):
        super().__init__(oracle, message)
        self.oracle = oracle
        self.message = message
        self.kwargs = kwargs

    def __str__(self):
        return f'{self.msg_to_log}. Source: {self.oracle}'

    def __repr__(self):
        return f'{self.__class__.__name__}({self.oracle}, {self.message}, {self.kwargs})'

    def to_dict(self):
        return {
            'oracle': self.oracle,
            'reason': self.message,
            'error_owner': self.error_owner,
            **self.kwargs,
        }

    def to_log_args(self):
        return (
            f'{self.msg_to_log.lower()}. Source: %({LogArgs.gas_oracle})s',
            {LogArgs.gas_oracle: self.oracle}
        )


class TransportError(ProviderMistakes, GasOracleError):
    """Connection failure, timeout, non-success HTTP status or node RPC error"""
    msg_to_log = 'Gas oracle is unavailable'

    @property
    def status(self) -> Optional[int]:
        return self.kwargs.get('status')


class DecodeError(ProviderMistakes, GasOracleError):
    """When provider's API returns a body which doesn't match the response schema"""
    msg_to_log = 'Cannot parse response'


class DataConsistencyError(ProviderMistakes, GasOracleError):
    """Well-formed response that lacks an expected element"""
    msg_to_log = 'Response lacks expected data'


class Eip1559NotSupportedError(ProviderMistakes, GasOracleError):
    """Chain behind the oracle has no EIP-1559 base fee"""
    msg_to_log = 'EIP-1559 fee estimation is not supported'


class InvalidCredentialError(UserMistakes, GasOracleError):
    """API credential cannot be sent as an HTTP header value"""
    msg_to_log = 'Invalid API credential'


class UnhandledOracleError(OurMistakes, GasOracleError):
    """Anything the oracle doesn't know how to classify"""
    msg_to_log = 'Unhandled error'
