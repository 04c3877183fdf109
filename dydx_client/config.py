"""
Configuration management for the dYdX client
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from dydx_client.common import API_HOST_MAINNET, NETWORK_ID_MAINNET


class DydxSettings(BaseSettings):
    """Client settings loaded from DYDX_* environment variables"""

    # API
    host: str = API_HOST_MAINNET
    network_id: int = NETWORK_ID_MAINNET
    api_timeout: Optional[float] = None
    proxy_url: Optional[str] = None

    # Credentials
    api_private_key: Optional[str] = None
    stark_private_key: Optional[str] = None
    eth_private_key: Optional[str] = None

    # Chain
    web3_provider_url: Optional[str] = None

    @field_validator("host", mode="before")
    @classmethod
    def _strip_host(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    class Config:
        env_prefix = "DYDX_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # .env may also hold unrelated settings
