"""
Canonical StarkEx value for a collateral withdrawal.
"""

from dataclasses import dataclass
from typing import Optional

from starknet_py.hash.utils import pedersen_hash

from dydx_client.common import COLLATERAL_ASSET, enum_value

from .constants import (
    COLLATERAL_ASSET_RESOLUTION_EXPONENT,
    WITHDRAWAL_FIELD_BIT_LENGTHS,
    WITHDRAWAL_PADDING_BITS,
    WITHDRAWAL_PREFIX,
)
from .helpers import (
    Expiration,
    HumanAmount,
    expiration_to_epoch_hours,
    get_collateral_asset_id,
    nonce_from_client_id,
    to_quantums_exact,
)
from .signable import Signable


@dataclass(frozen=True)
class StarkwareWithdrawal:
    """Withdrawal fields exactly as they enter the StarkEx hash."""

    asset_id: int
    position_id: int
    nonce: int
    quantums_amount: int
    expiration_epoch_hours: int


class SignableWithdrawal(Signable):
    """Withdrawal of collateral to be signed with the STARK key of the account."""

    def __init__(
        self,
        network_id: int,
        position_id: int,
        human_amount: HumanAmount,
        client_id: str,
        expiration: Expiration,
        asset: str = COLLATERAL_ASSET,
        stark_key: Optional[str] = None,
    ):
        if enum_value(asset) != COLLATERAL_ASSET.value:
            raise ValueError(f"Only {COLLATERAL_ASSET.value} can be withdrawn, got {enum_value(asset)}")

        message = StarkwareWithdrawal(
            asset_id=get_collateral_asset_id(network_id),
            position_id=int(position_id),
            nonce=nonce_from_client_id(client_id),
            quantums_amount=to_quantums_exact(human_amount, COLLATERAL_ASSET_RESOLUTION_EXPONENT),
            expiration_epoch_hours=expiration_to_epoch_hours(expiration),
        )
        for name, bits in WITHDRAWAL_FIELD_BIT_LENGTHS.items():
            value = getattr(message, name)
            if not 0 <= value < 1 << bits:
                raise ValueError(f"Withdrawal field {name} out of range: {value}")

        super().__init__(network_id, message, public_key=stark_key)
        self.client_id = client_id

    def _calculate_hash(self) -> int:
        withdrawal: StarkwareWithdrawal = self._message

        packed = WITHDRAWAL_PREFIX
        packed <<= WITHDRAWAL_FIELD_BIT_LENGTHS["position_id"]
        packed += withdrawal.position_id
        packed <<= WITHDRAWAL_FIELD_BIT_LENGTHS["nonce"]
        packed += withdrawal.nonce
        packed <<= WITHDRAWAL_FIELD_BIT_LENGTHS["quantums_amount"]
        packed += withdrawal.quantums_amount
        packed <<= WITHDRAWAL_FIELD_BIT_LENGTHS["expiration_epoch_hours"]
        packed += withdrawal.expiration_epoch_hours
        packed <<= WITHDRAWAL_PADDING_BITS

        return pedersen_hash(withdrawal.asset_id, packed)
