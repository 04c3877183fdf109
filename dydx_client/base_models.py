"""
Shared data structures, exceptions, and utilities for the dYdX client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from dydx_client.common import enum_value
from dydx_client.starkex.helpers import key_to_int, private_key_to_public_key_hex, to_iso


# ============================================================================
# Exceptions
# ============================================================================


class DydxClientError(Exception):
    """Base class for client-side misuse errors."""


class MissingCredentialsError(DydxClientError):
    """Raised when a required credential is missing or invalid (placeholders)."""


class MissingStarkKeyError(DydxClientError):
    """Raised when an order or withdrawal must be signed but no STARK key was configured."""


class ModuleNotSupportedError(DydxClientError):
    """Raised by every operation of a module whose prerequisite credential was not supplied."""


_PLACEHOLDER_VALUES = [
    "your_api_private_key_here",
    "your_stark_private_key_here",
    "your_eth_private_key_here",
    "your_private_key_here",
    "PLACEHOLDER",
    "placeholder",
    "",
]


def is_placeholder(value: Optional[str], placeholder_values: Optional[List[str]] = None) -> bool:
    """True when the value is missing or one of the known placeholder strings."""
    if placeholder_values is None:
        placeholder_values = _PLACEHOLDER_VALUES
    return not value or value in placeholder_values


def validate_credentials(
    credential_name: str,
    credential_value: Optional[str],
    placeholder_values: Optional[List[str]] = None,
) -> None:
    """
    Validate a credential to ensure it is not missing or a placeholder.

    Args:
        credential_name: Name of the credential (e.g., 'DYDX_HOST')
        credential_value: Value of the credential
        placeholder_values: List of placeholder values to reject

    Raises:
        MissingCredentialsError: If credential is missing or is a placeholder
    """
    if not credential_value:
        raise MissingCredentialsError(f"Missing {credential_name}")

    if is_placeholder(credential_value, placeholder_values):
        raise MissingCredentialsError(f"{credential_name} is not configured (placeholder or empty)")


# ============================================================================
# Key pairs
# ============================================================================


@dataclass(frozen=True)
class _StarkCurveKeyPair:
    public_key: str
    private_key: str = field(repr=False)

    @classmethod
    def from_private_key(cls, private_key: Union[str, int, "_StarkCurveKeyPair"]):
        """
        Build a key pair from a hex/int private key or an existing pair of the same kind.

        Raises:
            ValueError: If the private key cannot be parsed.
            TypeError: If given a pair of the other kind (API vs STARK).
        """
        if isinstance(private_key, _StarkCurveKeyPair):
            if not isinstance(private_key, cls):
                raise TypeError(f"{cls.__name__} cannot be built from a {type(private_key).__name__}")
            return private_key
        private_int = key_to_int(private_key)
        return cls(public_key=private_key_to_public_key_hex(private_int), private_key=hex(private_int))


class ApiKeyPair(_StarkCurveKeyPair):
    """Key pair that authenticates HTTP requests (DYDX-API-KEY)."""


class StarkKeyPair(_StarkCurveKeyPair):
    """Key pair that authorises orders and withdrawals on the settlement layer."""


# ============================================================================
# Request parameters
# ============================================================================


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def _to_wire(values: Dict[str, Any]) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    for name, value in values.items():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = to_iso(value)
        wire[_camel_case(name)] = enum_value(value)
    return wire


@dataclass
class OrderParams:
    """Parameters of a new order; ``client_id`` and ``signature`` are optional."""

    market: str
    side: str
    type: str
    size: str
    price: str
    limit_fee: str
    expiration: Union[str, datetime]
    post_only: bool = False
    time_in_force: Optional[str] = None
    cancel_id: Optional[str] = None
    trigger_price: Optional[str] = None
    trailing_percent: Optional[str] = None
    client_id: Optional[str] = None
    signature: Optional[str] = None

    def to_wire(self, **overrides: Any) -> Dict[str, Any]:
        """Render the order with camelCase keys, dropping unset optionals."""
        values = {name: getattr(self, name) for name in self.__dataclass_fields__}
        values.update(overrides)
        return _to_wire(values)


@dataclass
class WithdrawalParams:
    """Parameters of a new withdrawal; ``client_id`` and ``signature`` are optional."""

    amount: str
    asset: str
    expiration: Union[str, datetime]
    client_id: Optional[str] = None
    signature: Optional[str] = None

    def to_wire(self, **overrides: Any) -> Dict[str, Any]:
        values = {name: getattr(self, name) for name in self.__dataclass_fields__}
        values.update(overrides)
        return _to_wire(values)


__all__ = [
    "DydxClientError",
    "MissingCredentialsError",
    "MissingStarkKeyError",
    "ModuleNotSupportedError",
    "is_placeholder",
    "validate_credentials",
    "ApiKeyPair",
    "StarkKeyPair",
    "OrderParams",
    "WithdrawalParams",
]
