from typing import Optional

from aiohttp import ClientSession, hdrs

from gas_oracle.config import config
from gas_oracle.utils.errors import InvalidCredentialError

# Singleton aiohttp.ClientSession instance.
CLIENT_SESSION: Optional[ClientSession] = None


class CustomHttpSession(ClientSession):
    """
    Custom aiohttp.ClientSession that adds proxy for requests.
    We can't use `trust_env=True` because it would also pick up unrelated proxy settings.
    """

    async def _request(self, *args, **kwargs):
        proxy = kwargs.pop('proxy', config.PROXY_URL)
        return await super()._request(proxy=proxy, *args, **kwargs)


async def setup_client_session() -> None:
    """Set up the application-global aiohttp.ClientSession instance.

    aiohttp recommends that only one ClientSession exist for the lifetime of an application.
    See: https://docs.aiohttp.org/en/stable/client_quickstart.html#make-a-request

    """
    global CLIENT_SESSION  # pylint: disable=global-statement
    CLIENT_SESSION = CustomHttpSession()


async def teardown_client_session() -> None:
    """Close the application-global aiohttp.ClientSession."""
    global CLIENT_SESSION  # pylint: disable=global-statement
    if CLIENT_SESSION is not None:
        await CLIENT_SESSION.close()
    CLIENT_SESSION = None


def get_client_session() -> ClientSession:
    if CLIENT_SESSION is None:
        raise RuntimeError(
            'Client session is not set up, call setup_client_session() first'
        )
    return CLIENT_SESSION


def _is_valid_header_value(value: str) -> bool:
    # Visible ASCII, space, tab and obs-text (0x80-0xFF) are allowed.
    for char in value:
        code = ord(char)
        if code > 0xFF or code == 0x7F or (code < 0x20 and char != '\t'):
            return False
    return True


def build_auth_headers(api_key: str, oracle: str) -> dict[str, str]:
    if not isinstance(api_key, str) or not _is_valid_header_value(api_key):
        raise InvalidCredentialError(
            oracle, 'API key cannot be encoded as an HTTP header value'
        )
    return {hdrs.AUTHORIZATION: api_key}
