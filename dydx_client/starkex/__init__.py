"""
StarkEx signing package.

Builds the canonical values the exchange verifies (orders, withdrawals, API
requests) and signs them with the STARK curve primitives from starknet_py.
"""

from .api_request import SignableApiRequest
from .helpers import (
    nonce_from_client_id,
    private_key_to_public_key_hex,
    serialize_signature,
    deserialize_signature,
)
from .order import SignableOrder, StarkwareOrder
from .signable import Signable
from .withdrawal import SignableWithdrawal, StarkwareWithdrawal

__all__ = [
    "Signable",
    "SignableApiRequest",
    "SignableOrder",
    "SignableWithdrawal",
    "StarkwareOrder",
    "StarkwareWithdrawal",
    "nonce_from_client_id",
    "private_key_to_public_key_hex",
    "serialize_signature",
    "deserialize_signature",
]
