"""
Conversion helpers for StarkEx canonical values.

Amount quantisation, expiration/nonce derivation, asset ids, signature
(de)serialisation and key derivation.
"""

import hashlib
import math
from datetime import datetime, timezone
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, InvalidOperation
from typing import Tuple, Union

from starknet_py.common import int_from_hex
from starknet_py.hash.utils import private_to_stark_key

from dydx_client.common import COLLATERAL_ASSET, enum_value

from .constants import (
    COLLATERAL_ASSET_ID_BY_NETWORK_ID,
    NONCE_UPPER_BOUND_EXCLUSIVE,
    ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS,
    SYNTHETIC_ASSET_ID_BYTES,
    SYNTHETIC_ASSET_RESOLUTION_EXPONENT,
)

HumanAmount = Union[str, int, Decimal]
Expiration = Union[str, datetime, int, float]


def to_decimal(value: HumanAmount) -> Decimal:
    """Convert a human-readable amount to Decimal, rejecting junk input."""
    try:
        result = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not result.is_finite() or result < 0:
        raise ValueError(f"Invalid amount: {value!r}")
    return result


def to_quantums_exact(human_amount: HumanAmount, resolution_exponent: int) -> int:
    """
    Convert a human amount to quantums, requiring an exact result.

    Raises:
        ValueError: If the amount has more precision than the asset resolution.
    """
    quantums = to_decimal(human_amount).scaleb(resolution_exponent)
    if quantums != quantums.to_integral_value():
        raise ValueError(
            f"Amount {human_amount} is not a multiple of the quantum size 1e-{resolution_exponent}"
        )
    return int(quantums)


def to_quantums_round_up(human_amount: HumanAmount, resolution_exponent: int) -> int:
    return int(to_decimal(human_amount).scaleb(resolution_exponent).to_integral_value(rounding=ROUND_CEILING))


def to_quantums_round_down(human_amount: HumanAmount, resolution_exponent: int) -> int:
    return int(to_decimal(human_amount).scaleb(resolution_exponent).to_integral_value(rounding=ROUND_FLOOR))


def nonce_from_client_id(client_id: str) -> int:
    """Derive the 32-bit StarkEx nonce from a client id."""
    digest = hashlib.sha256(client_id.encode("utf-8")).hexdigest()
    return int(digest, 16) % NONCE_UPPER_BOUND_EXCLUSIVE


def to_iso(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix; naive datetimes are UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_to_epoch_seconds(expiration: Expiration) -> float:
    """
    Convert an ISO-8601 string, datetime or epoch number to epoch seconds.

    Naive datetimes and strings without offset are taken as UTC.
    """
    if isinstance(expiration, (int, float)):
        return float(expiration)

    if isinstance(expiration, str):
        text = expiration.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            expiration = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Invalid ISO-8601 expiration: {expiration!r}") from e

    if expiration.tzinfo is None:
        expiration = expiration.replace(tzinfo=timezone.utc)
    return expiration.timestamp()


def expiration_to_epoch_hours(expiration: Expiration) -> int:
    """Expiration as signed in StarkEx: whole hours, rounded up, plus a one-week buffer."""
    hours = math.ceil(iso_to_epoch_seconds(expiration) / 3600)
    return hours + ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS


def get_asset_resolution_exponent(asset: str) -> int:
    try:
        return SYNTHETIC_ASSET_RESOLUTION_EXPONENT[enum_value(asset)]
    except KeyError:
        raise ValueError(f"Unknown synthetic asset: {asset}") from None


def get_synthetic_asset_id(asset: str) -> int:
    """
    Encode a synthetic asset id.

    "BTC" with resolution 1e10 -> int("0x4254432d3130000000000000000000", 16)
    """
    label = f"{enum_value(asset)}-{get_asset_resolution_exponent(asset)}".encode("ascii")
    return int.from_bytes(label.ljust(SYNTHETIC_ASSET_ID_BYTES, b"\x00"), "big")


def get_collateral_asset_id(network_id: int) -> int:
    try:
        return COLLATERAL_ASSET_ID_BY_NETWORK_ID[network_id]
    except KeyError:
        raise ValueError(f"No {COLLATERAL_ASSET.value} asset id for network {network_id}") from None


def serialize_signature(r: int, s: int) -> str:
    """Serialise (r, s) as 128 hex characters without prefix."""
    return f"{r:064x}{s:064x}"


def deserialize_signature(signature: str) -> Tuple[int, int]:
    value = signature[2:] if signature.startswith("0x") else signature
    if len(value) != 128:
        raise ValueError(f"Invalid signature length: {len(value)}")
    return int(value[:64], 16), int(value[64:], 16)


def key_to_int(key: Union[str, int]) -> int:
    """Accept a key as int or hex string (with or without 0x)."""
    if isinstance(key, int):
        return key
    return int_from_hex(key)


def private_key_to_public_key_hex(private_key: Union[str, int]) -> str:
    """Derive the STARK public key (x coordinate) as a 0x-prefixed hex string."""
    return hex(private_to_stark_key(key_to_int(private_key)))
