"""
Tests for client utilities: query paths, timestamps and identifiers.
"""

import re
import uuid
from datetime import datetime, timedelta, timezone

from dydx_client.common import Market, OrderSide
from dydx_client.client.utils import (
    generate_client_id,
    generate_query_path,
    get_account_id,
    get_user_id,
    iso_now,
    json_stringify,
    to_iso,
)


class TestGenerateQueryPath:
    def test_empty_params_leave_url_untouched(self):
        assert generate_query_path("orders") == "orders"
        assert generate_query_path("orders", {}) == "orders"
        assert generate_query_path("orders", {"market": None}) == "orders"

    def test_none_values_are_dropped(self):
        path = generate_query_path("orders", {"market": "BTC-USD", "limit": None, "side": "BUY"})
        assert path == "orders?market=BTC-USD&side=BUY"

    def test_values_are_rendered_for_the_wire(self):
        path = generate_query_path(
            "orders",
            {"market": Market.ETH_USD, "side": OrderSide.SELL, "postOnly": True, "limit": 5},
        )
        assert path == "orders?market=ETH-USD&side=SELL&postOnly=true&limit=5"

    def test_false_is_kept(self):
        assert generate_query_path("orders", {"postOnly": False}) == "orders?postOnly=false"


class TestTimestamps:
    def test_to_iso_millisecond_utc(self):
        moment = datetime(2021, 1, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)
        assert to_iso(moment) == "2021-01-01T00:00:00.123Z"

    def test_to_iso_converts_offsets(self):
        moment = datetime(2021, 1, 1, 2, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_iso(moment) == "2021-01-01T00:00:00.000Z"

    def test_iso_now_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", iso_now())


def test_json_stringify_is_compact():
    assert json_stringify({"market": "BTC-USD", "size": "1"}) == '{"market":"BTC-USD","size":"1"}'


class TestIdentifiers:
    def test_client_id_is_numeral_without_leading_zero(self):
        for _ in range(200):
            client_id = generate_client_id()
            assert client_id.isdigit()
            assert not client_id.startswith("0")

    def test_account_id_is_deterministic_and_case_insensitive(self):
        address = "0xAbCdEf0123456789abcdef0123456789ABCDEF01"
        assert get_account_id(address) == get_account_id(address.lower())
        assert get_account_id(address) != get_account_id(address, account_number=1)
        uuid.UUID(get_account_id(address))

    def test_account_id_derivation(self):
        address = "0xabcdef0123456789abcdef0123456789abcdef01"
        namespace = uuid.UUID("0f9da948-a6fb-4c45-9edc-4685c3f3317d")
        user_id = str(uuid.uuid5(namespace, address))
        assert get_user_id(address) == user_id
        assert get_account_id(address) == str(uuid.uuid5(namespace, user_id + "0"))
