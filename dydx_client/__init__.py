"""
dYdX v3 Client Module

REST trading client for dYdX v3: API-key authenticated requests, STARK-signed
orders and withdrawals, Ethereum-signed onboarding and on-chain deposits.
"""

from .base_models import (
    ApiKeyPair,
    DydxClientError,
    MissingCredentialsError,
    MissingStarkKeyError,
    ModuleNotSupportedError,
    OrderParams,
    StarkKeyPair,
    WithdrawalParams,
)
from .client import DydxClient, ModuleKind
from .common import (
    API_HOST_MAINNET,
    API_HOST_ROPSTEN,
    NETWORK_ID_MAINNET,
    NETWORK_ID_ROPSTEN,
    Asset,
    CandleResolution,
    Market,
    OrderSide,
    OrderStatus,
    OrderType,
    PositionStatus,
    TimeInForce,
)
from .config import DydxSettings

__version__ = "0.1.0"

__all__ = [
    'DydxClient',
    'ModuleKind',
    'DydxSettings',
    'ApiKeyPair',
    'StarkKeyPair',
    'OrderParams',
    'WithdrawalParams',
    'DydxClientError',
    'MissingCredentialsError',
    'MissingStarkKeyError',
    'ModuleNotSupportedError',
    'API_HOST_MAINNET',
    'API_HOST_ROPSTEN',
    'NETWORK_ID_MAINNET',
    'NETWORK_ID_ROPSTEN',
    'Asset',
    'CandleResolution',
    'Market',
    'OrderSide',
    'OrderStatus',
    'OrderType',
    'PositionStatus',
    'TimeInForce',
]
