"""
Tests for the public module.
"""

import json
from functools import partial

import pytest

from dydx_client.client.modules.public import PublicModule
from networking.http import send_request


@pytest.fixture
def module(host, transport):
    return PublicModule(host, partial(send_request, transport.client()))


class TestPublicModule:
    @pytest.mark.asyncio
    async def test_get_markets(self, module, transport):
        await module.get_markets()
        assert str(transport.last.url) == "https://api.test.dydx/v3/markets"

        await module.get_markets("BTC-USD")
        assert transport.last.url.raw_path == b"/v3/markets?market=BTC-USD"

    @pytest.mark.asyncio
    async def test_requests_are_unauthenticated(self, module, transport):
        await module.get_orderbook("ETH-USD")
        request = transport.last
        assert request.url.raw_path == b"/v3/orderbook/ETH-USD"
        assert "DYDX-SIGNATURE" not in request.headers
        assert "DYDX-API-KEY" not in request.headers

    @pytest.mark.asyncio
    async def test_get_stats(self, module, transport):
        await module.get_stats()
        assert transport.last.url.raw_path == b"/v3/stats"

        await module.get_stats("BTC-USD", days=7)
        assert transport.last.url.raw_path == b"/v3/stats/BTC-USD?days=7"

    @pytest.mark.asyncio
    async def test_get_candles(self, module, transport):
        await module.get_candles("BTC-USD", resolution="1HOUR", limit=50)
        assert transport.last.url.raw_path == b"/v3/candles/BTC-USD?resolution=1HOUR&limit=50"

    @pytest.mark.asyncio
    async def test_history_endpoints(self, module, transport):
        await module.get_trades("BTC-USD", starting_before_or_at="2021-01-01")
        assert transport.last.url.raw_path == b"/v3/trades/BTC-USD?startingBeforeOrAt=2021-01-01"

        await module.get_historical_funding("BTC-USD")
        assert transport.last.url.raw_path == b"/v3/historical-funding/BTC-USD"

    @pytest.mark.asyncio
    async def test_get_fast_withdrawal(self, module, transport):
        await module.get_fast_withdrawal(credit_asset="USDC", credit_amount="100")
        assert transport.last.url.raw_path == b"/v3/fast-withdrawals?creditAsset=USDC&creditAmount=100"

    @pytest.mark.asyncio
    async def test_user_lookups(self, module, transport):
        transport.response_json = {"exists": True}
        result = await module.check_if_user_exists("0xabc")
        assert result == {"exists": True}
        assert transport.last.url.raw_path == b"/v3/users/exists?ethereumAddress=0xabc"

        await module.check_if_username_exists("trader")
        assert transport.last.url.raw_path == b"/v3/usernames?username=trader"

    @pytest.mark.asyncio
    async def test_verify_email(self, module, transport):
        await module.verify_email("token-1")
        assert transport.last.method == "PUT"
        assert transport.last.url.raw_path == b"/v3/emails/verify-email"
        assert json.loads(transport.last.content) == {"token": "token-1"}

    @pytest.mark.asyncio
    async def test_time_and_config(self, module, transport):
        await module.get_time()
        assert transport.last.url.raw_path == b"/v3/time"
        await module.get_config()
        assert transport.last.url.raw_path == b"/v3/config"
