from typing import Optional

from pydantic_settings import BaseSettings


class OraclesConfig(BaseSettings):
    BLOCKNATIVE_GAS_PRICE_ENDPOINT: str = (
        'https://api.blocknative.com/gasprices/blockprices'
    )
    REQUEST_TIMEOUT: int = 7
    WEB3_TIMEOUT: int = 10
    # Number of recent blocks sampled by eth_feeHistory.
    FEE_HISTORY_BLOCKS: int = 4
    PROXY_URL: Optional[str] = None
