"""
Tests for key pairs and request parameter models.
"""

from datetime import datetime

import pytest

from dydx_client.base_models import ApiKeyPair, OrderParams, StarkKeyPair, WithdrawalParams
from dydx_client.common import OrderSide, OrderType


class TestKeyPairs:
    def test_from_hex_and_int_agree(self, stark_private_key):
        from_hex = StarkKeyPair.from_private_key(stark_private_key)
        from_int = StarkKeyPair.from_private_key(int(stark_private_key, 16))

        assert from_hex == from_int
        assert from_hex.public_key.startswith("0x")

    def test_same_kind_pair_is_returned_as_is(self, api_private_key):
        api_keys = ApiKeyPair.from_private_key(api_private_key)
        assert ApiKeyPair.from_private_key(api_keys) is api_keys

    def test_pair_of_other_kind_is_rejected(self, api_private_key, stark_private_key):
        with pytest.raises(TypeError):
            StarkKeyPair.from_private_key(ApiKeyPair.from_private_key(api_private_key))
        with pytest.raises(TypeError):
            ApiKeyPair.from_private_key(StarkKeyPair.from_private_key(stark_private_key))

    def test_private_key_not_in_repr(self, stark_private_key):
        pair = StarkKeyPair.from_private_key(stark_private_key)
        assert pair.private_key not in repr(pair)


class TestParamsWire:
    def test_order_wire_uses_camel_case_and_drops_unset(self):
        params = OrderParams(
            market="BTC-USD",
            side=OrderSide.SELL,
            type=OrderType.LIMIT,
            size="1",
            price="30000",
            limit_fee="0.001",
            expiration="2030-01-01T00:00:00.000Z",
            time_in_force="GTT",
        )
        assert params.to_wire(client_id="9") == {
            "market": "BTC-USD",
            "side": "SELL",
            "type": "LIMIT",
            "size": "1",
            "price": "30000",
            "limitFee": "0.001",
            "expiration": "2030-01-01T00:00:00.000Z",
            "postOnly": False,
            "timeInForce": "GTT",
            "clientId": "9",
        }

    def test_datetime_expiration_rendered_as_utc_iso(self):
        params = WithdrawalParams(amount="5", asset="USDC", expiration=datetime(2030, 1, 1, 12, 30))
        assert params.to_wire()["expiration"] == "2030-01-01T12:30:00.000Z"
