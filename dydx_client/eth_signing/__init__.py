"""
Ethereum (EIP-712) signing for onboarding, STARK key derivation and API key
management.
"""

from .actions import (
    ONBOARDING_ACTION,
    STARK_KEY_ACTION,
    add_signature_type,
    build_off_chain_action,
    build_private_action,
)
from .signers import EthSigner, SignWithKey, SignWithWeb3

__all__ = [
    "ONBOARDING_ACTION",
    "STARK_KEY_ACTION",
    "add_signature_type",
    "build_off_chain_action",
    "build_private_action",
    "EthSigner",
    "SignWithKey",
    "SignWithWeb3",
]
