"""
Public module for the dYdX client.

Unauthenticated market data and lookups.
"""

from typing import Any, Awaitable, Callable, Optional

from dydx_client.common import API_VERSION_PREFIX, RequestMethod
from dydx_client.client.utils.helpers import generate_query_path, json_stringify
from helpers.unified_logger import get_client_logger


class PublicModule:
    """
    Public endpoints (no credentials).

    Handles:
    - Markets, orderbooks, stats, trades and candles
    - Historical funding and fast-withdrawal liquidity
    - User / username existence checks
    - Server time, exchange config and email verification
    """

    def __init__(
        self,
        host: str,
        send_request_fn: Callable[..., Awaitable[Any]],
        logger: Optional[Any] = None,
    ):
        """
        Initialize public module.

        Args:
            host: API base URL without trailing slash
            send_request_fn: Coroutine function (method, url, headers=..., body=...)
            logger: Logger instance
        """
        self.host = host
        self._send_request = send_request_fn
        self.logger = logger or get_client_logger("public")

    async def _get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        request_path = generate_query_path(f"{API_VERSION_PREFIX}/{endpoint}", params)
        return await self._send_request(RequestMethod.GET.value, f"{self.host}{request_path}")

    async def _put(self, endpoint: str, data: dict) -> Any:
        return await self._send_request(
            RequestMethod.PUT.value,
            f"{self.host}{API_VERSION_PREFIX}/{endpoint}",
            body=json_stringify(data),
        )

    # ========================================================================
    # USERS
    # ========================================================================

    async def check_if_user_exists(self, ethereum_address: str) -> Any:
        return await self._get("users/exists", {"ethereumAddress": ethereum_address})

    async def check_if_username_exists(self, username: str) -> Any:
        return await self._get("usernames", {"username": username})

    async def verify_email(self, token: str) -> Any:
        return await self._put("emails/verify-email", {"token": token})

    # ========================================================================
    # MARKETS
    # ========================================================================

    async def get_markets(self, market: Optional[str] = None) -> Any:
        """All markets, or a single one when ``market`` is given."""
        return await self._get("markets", {"market": market})

    async def get_orderbook(self, market: str) -> Any:
        return await self._get(f"orderbook/{market}")

    async def get_stats(self, market: Optional[str] = None, days: Optional[int] = None) -> Any:
        """
        Market statistics over ``days`` (1, 7 or 30).

        Without a market, statistics for every market are returned.
        """
        endpoint = f"stats/{market}" if market else "stats"
        return await self._get(endpoint, {"days": days})

    async def get_trades(self, market: str, starting_before_or_at: Optional[str] = None) -> Any:
        return await self._get(f"trades/{market}", {"startingBeforeOrAt": starting_before_or_at})

    async def get_historical_funding(self, market: str, effective_before_or_at: Optional[str] = None) -> Any:
        return await self._get(f"historical-funding/{market}", {"effectiveBeforeOrAt": effective_before_or_at})

    async def get_candles(
        self,
        market: str,
        resolution: Optional[str] = None,
        from_iso: Optional[str] = None,
        to_iso: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Any:
        return await self._get(
            f"candles/{market}",
            {
                "resolution": resolution,
                "fromISO": from_iso,
                "toISO": to_iso,
                "limit": limit,
            },
        )

    async def get_fast_withdrawal(
        self,
        credit_asset: Optional[str] = None,
        credit_amount: Optional[str] = None,
        debit_amount: Optional[str] = None,
    ) -> Any:
        return await self._get(
            "fast-withdrawals",
            {
                "creditAsset": credit_asset,
                "creditAmount": credit_amount,
                "debitAmount": debit_amount,
            },
        )

    # ========================================================================
    # EXCHANGE
    # ========================================================================

    async def get_time(self) -> Any:
        return await self._get("time")

    async def get_config(self) -> Any:
        return await self._get("config")
