"""
Canonical StarkEx value for a perpetual limit order with fees.
"""

from dataclasses import dataclass
from typing import Optional

from starknet_py.hash.utils import pedersen_hash

from dydx_client.common import OrderSide, enum_value, market_to_asset

from .constants import (
    COLLATERAL_ASSET_RESOLUTION_EXPONENT,
    ORDER_FIELD_BIT_LENGTHS,
    ORDER_PADDING_BITS,
    ORDER_PREFIX,
    ORDER_TYPE_LIMIT_WITH_FEES,
)
from .helpers import (
    Expiration,
    HumanAmount,
    expiration_to_epoch_hours,
    get_asset_resolution_exponent,
    get_collateral_asset_id,
    get_synthetic_asset_id,
    nonce_from_client_id,
    to_decimal,
    to_quantums_exact,
    to_quantums_round_down,
    to_quantums_round_up,
)
from .signable import Signable


@dataclass(frozen=True)
class StarkwareOrder:
    """Order fields exactly as they enter the StarkEx hash."""

    order_type: str
    asset_id_synthetic: int
    asset_id_collateral: int
    asset_id_fee: int
    quantums_amount_synthetic: int
    quantums_amount_collateral: int
    quantums_amount_fee: int
    is_buying_synthetic: bool
    position_id: int
    nonce: int
    expiration_epoch_hours: int


class SignableOrder(Signable):
    """
    Order to be signed with the STARK key of the account.

    Buy orders sell collateral for the synthetic asset and round the collateral
    amount up; sell orders round it down. The fee is always rounded up.
    """

    def __init__(
        self,
        network_id: int,
        market: str,
        side: str,
        position_id: int,
        human_size: HumanAmount,
        human_price: HumanAmount,
        limit_fee: HumanAmount,
        client_id: str,
        expiration: Expiration,
        stark_key: Optional[str] = None,
    ):
        synthetic_asset = market_to_asset(market)
        synthetic_resolution = get_asset_resolution_exponent(synthetic_asset)
        side = enum_value(side)
        if side not in (OrderSide.BUY.value, OrderSide.SELL.value):
            raise ValueError(f"Invalid order side: {side}")
        is_buying_synthetic = side == OrderSide.BUY.value

        quantums_amount_synthetic = to_quantums_exact(human_size, synthetic_resolution)

        human_cost = to_decimal(human_size) * to_decimal(human_price)
        if is_buying_synthetic:
            quantums_amount_collateral = to_quantums_round_up(human_cost, COLLATERAL_ASSET_RESOLUTION_EXPONENT)
        else:
            quantums_amount_collateral = to_quantums_round_down(human_cost, COLLATERAL_ASSET_RESOLUTION_EXPONENT)

        human_fee = to_decimal(limit_fee) * human_cost
        quantums_amount_fee = to_quantums_round_up(human_fee, COLLATERAL_ASSET_RESOLUTION_EXPONENT)

        collateral_asset_id = get_collateral_asset_id(network_id)
        message = StarkwareOrder(
            order_type=ORDER_TYPE_LIMIT_WITH_FEES,
            asset_id_synthetic=get_synthetic_asset_id(synthetic_asset),
            asset_id_collateral=collateral_asset_id,
            asset_id_fee=collateral_asset_id,
            quantums_amount_synthetic=quantums_amount_synthetic,
            quantums_amount_collateral=quantums_amount_collateral,
            quantums_amount_fee=quantums_amount_fee,
            is_buying_synthetic=is_buying_synthetic,
            position_id=int(position_id),
            nonce=nonce_from_client_id(client_id),
            expiration_epoch_hours=expiration_to_epoch_hours(expiration),
        )
        _check_bounds(message)
        super().__init__(network_id, message, public_key=stark_key)
        self.client_id = client_id

    def _calculate_hash(self) -> int:
        order: StarkwareOrder = self._message

        if order.is_buying_synthetic:
            asset_id_sell = order.asset_id_collateral
            asset_id_buy = order.asset_id_synthetic
            quantums_amount_sell = order.quantums_amount_collateral
            quantums_amount_buy = order.quantums_amount_synthetic
        else:
            asset_id_sell = order.asset_id_synthetic
            asset_id_buy = order.asset_id_collateral
            quantums_amount_sell = order.quantums_amount_synthetic
            quantums_amount_buy = order.quantums_amount_collateral

        amount_bits = ORDER_FIELD_BIT_LENGTHS["quantums_amount"]
        position_bits = ORDER_FIELD_BIT_LENGTHS["position_id"]

        part_1 = quantums_amount_sell
        part_1 <<= amount_bits
        part_1 += quantums_amount_buy
        part_1 <<= amount_bits
        part_1 += order.quantums_amount_fee
        part_1 <<= ORDER_FIELD_BIT_LENGTHS["nonce"]
        part_1 += order.nonce

        # Vault ids for sell, buy and fee are the same position
        part_2 = ORDER_PREFIX
        for _ in range(3):
            part_2 <<= position_bits
            part_2 += order.position_id
        part_2 <<= ORDER_FIELD_BIT_LENGTHS["expiration_epoch_hours"]
        part_2 += order.expiration_epoch_hours
        part_2 <<= ORDER_PADDING_BITS

        assets_hash = pedersen_hash(pedersen_hash(asset_id_sell, asset_id_buy), order.asset_id_fee)
        return pedersen_hash(pedersen_hash(assets_hash, part_1), part_2)


def _check_bounds(order: StarkwareOrder) -> None:
    fields = {
        "asset_id_synthetic": order.asset_id_synthetic,
        "asset_id_collateral": order.asset_id_collateral,
        "asset_id_fee": order.asset_id_fee,
        "quantums_amount": max(
            order.quantums_amount_synthetic,
            order.quantums_amount_collateral,
            order.quantums_amount_fee,
        ),
        "nonce": order.nonce,
        "position_id": order.position_id,
        "expiration_epoch_hours": order.expiration_epoch_hours,
    }
    for name, value in fields.items():
        if not 0 <= value < 1 << ORDER_FIELD_BIT_LENGTHS[name]:
            raise ValueError(f"Order field {name} out of range: {value}")
