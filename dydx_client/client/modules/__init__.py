"""
dYdX client modules package.

This package contains the API modules exposed by the dYdX client:
- public: unauthenticated market data
- private: API-key authenticated endpoints and STARK-signed orders/withdrawals
- keys: API key management signed with the Ethereum key
- onboarding: user creation and STARK key derivation
- eth: on-chain balances, allowances and deposits
- not_supported: stand-in for modules missing their credential
"""

from .eth import EthModule
from .keys import KeysModule
from .not_supported import NotSupportedModule
from .onboarding import OnboardingModule
from .private import PrivateModule
from .public import PublicModule

__all__ = [
    "EthModule",
    "KeysModule",
    "NotSupportedModule",
    "OnboardingModule",
    "PrivateModule",
    "PublicModule",
]
