"""
Private module for the dYdX client.

API-key authenticated account, order, position, fill, transfer and funding
endpoints, plus locally signed orders and withdrawals.
"""

from typing import Any, Awaitable, Callable, Coroutine, Dict, Optional, Union

from dydx_client.base_models import (
    ApiKeyPair,
    MissingStarkKeyError,
    OrderParams,
    StarkKeyPair,
    WithdrawalParams,
)
from dydx_client.common import (
    API_VERSION_PREFIX,
    HEADER_API_KEY,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
    AccountAction,
    RequestMethod,
    enum_value,
)
from dydx_client.client.utils.helpers import generate_query_path, iso_now, json_stringify
from dydx_client.client.utils.ids import generate_client_id, get_account_id
from dydx_client.starkex import SignableApiRequest, SignableOrder, SignableWithdrawal
from helpers.unified_logger import get_client_logger


class PrivateModule:
    """
    Private endpoints (DYDX-API-KEY / DYDX-SIGNATURE / DYDX-TIMESTAMP).

    Handles:
    - Request signing with the API key pair
    - Users, accounts and registration
    - Orders (create / cancel / query), positions and fills
    - Transfers: deposits, withdrawals, funding payments
    """

    def __init__(
        self,
        host: str,
        network_id: int,
        api_key_pair: ApiKeyPair,
        send_request_fn: Callable[..., Awaitable[Any]],
        stark_key_pair: Optional[StarkKeyPair] = None,
        logger: Optional[Any] = None,
    ):
        """
        Initialize private module.

        Args:
            host: API base URL without trailing slash
            network_id: Ethereum network id (selects StarkEx asset ids)
            api_key_pair: Key pair authenticating every request
            send_request_fn: Coroutine function (method, url, headers=..., body=...)
            stark_key_pair: Key pair signing orders and withdrawals (optional)
            logger: Logger instance
        """
        self.host = host
        self.network_id = network_id
        self.api_key_pair = api_key_pair
        self.stark_key_pair = stark_key_pair
        self._send_request = send_request_fn
        self.logger = logger or get_client_logger("private")

    # ========================================================================
    # SIGNING & DISPATCH
    # ========================================================================

    def sign(
        self,
        request_path: str,
        method: str,
        iso_timestamp: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Sign a request with the API private key.

        Args:
            request_path: Path including the ``/v3`` prefix and any query string
            method: HTTP method
            iso_timestamp: Value sent in DYDX-TIMESTAMP
            data: Request body (serialised exactly as it is sent)

        Returns:
            Hex signature for the DYDX-SIGNATURE header
        """
        body = json_stringify(data) if data is not None else ""
        return SignableApiRequest(
            network_id=self.network_id,
            request_path=request_path,
            method=method,
            expires_at=iso_timestamp,
            body=body,
            public_key=self.api_key_pair.public_key,
        ).sign(self.api_key_pair.private_key)

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one signed request and return the parsed response.

        For GET / DELETE, ``endpoint`` already carries its query string.
        """
        method = enum_value(method)
        request_path = f"{API_VERSION_PREFIX}/{endpoint}"
        timestamp = iso_now()
        signature = self.sign(request_path, method, timestamp, data)

        headers = {
            HEADER_SIGNATURE: signature,
            HEADER_API_KEY: self.api_key_pair.public_key,
            HEADER_TIMESTAMP: timestamp,
        }
        body = json_stringify(data) if data is not None else None
        return await self._send_request(method, f"{self.host}{request_path}", headers=headers, body=body)

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(RequestMethod.GET, generate_query_path(endpoint, params))

    async def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        return await self.request(RequestMethod.POST, endpoint, data)

    async def put(self, endpoint: str, data: Dict[str, Any]) -> Any:
        return await self.request(RequestMethod.PUT, endpoint, data)

    async def delete(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(RequestMethod.DELETE, generate_query_path(endpoint, params))

    # ========================================================================
    # USERS & ACCOUNTS
    # ========================================================================

    async def get_registration(self) -> Any:
        return await self.get("registration")

    async def get_user(self) -> Any:
        return await self.get("users")

    async def update_user(
        self,
        email: Optional[str] = None,
        username: Optional[str] = None,
        user_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Update only the given fields; omitted ones are left out of the body."""
        data: Dict[str, Any] = {}
        if email is not None:
            data["email"] = email
        if username is not None:
            data["username"] = username
        if user_data is not None:
            data["userData"] = json_stringify(user_data)
        return await self.put("users", data)

    async def create_account(self, stark_key: str) -> Any:
        return await self.post("accounts", {"starkKey": stark_key})

    async def get_account(self, ethereum_address: str) -> Any:
        """Account 0 of ``ethereum_address``; the id is derived locally."""
        return await self.get(f"accounts/{get_account_id(ethereum_address)}")

    async def get_accounts(self) -> Any:
        return await self.get("accounts")

    # ========================================================================
    # POSITIONS & ORDERS
    # ========================================================================

    async def get_positions(
        self,
        market: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None,
        created_before_or_at: Optional[str] = None,
    ) -> Any:
        return await self.get(
            "positions",
            {
                "market": market,
                "status": status,
                "limit": limit,
                "createdBeforeOrAt": created_before_or_at,
            },
        )

    async def get_orders(
        self,
        market: Optional[str] = None,
        status: Optional[str] = None,
        side: Optional[str] = None,
        order_type: Optional[str] = None,
        limit: Optional[int] = None,
        created_before_or_at: Optional[str] = None,
    ) -> Any:
        return await self.get(
            "orders",
            {
                "market": market,
                "status": status,
                "side": side,
                "type": order_type,
                "limit": limit,
                "createdBeforeOrAt": created_before_or_at,
            },
        )

    async def get_order_by_id(self, order_id: str) -> Any:
        return await self.get(f"orders/{order_id}")

    async def get_order_by_client_id(self, client_id: str) -> Any:
        return await self.get(f"orders/client/{client_id}")

    def create_order(self, params: OrderParams, position_id: int) -> Coroutine[Any, Any, Any]:
        """
        Post a new order, signing it with the STARK key unless a signature is given.

        Signing happens before the coroutine is returned, so a missing STARK
        key raises here without touching the network.

        Raises:
            MissingStarkKeyError: No signature given and no STARK key configured
        """
        client_id = params.client_id or generate_client_id()
        signature = params.signature
        if not signature:
            stark_key_pair = self._require_stark_key("create_order")
            signature = SignableOrder(
                network_id=self.network_id,
                market=params.market,
                side=params.side,
                position_id=position_id,
                human_size=params.size,
                human_price=params.price,
                limit_fee=params.limit_fee,
                client_id=client_id,
                expiration=params.expiration,
                stark_key=stark_key_pair.public_key,
            ).sign(stark_key_pair.private_key)
            self.logger.debug(f"Signed order {client_id} on {enum_value(params.market)}")

        return self.post("orders", params.to_wire(client_id=client_id, signature=signature))

    async def cancel_order(self, order_id: str) -> Any:
        return await self.delete(f"orders/{order_id}")

    async def cancel_all_orders(self, market: Optional[str] = None) -> Any:
        """Cancel open orders, in every market unless ``market`` is given."""
        return await self.delete("orders", {"market": market})

    async def get_fills(
        self,
        market: Optional[str] = None,
        order_id: Optional[str] = None,
        limit: Optional[int] = None,
        created_before_or_at: Optional[str] = None,
    ) -> Any:
        return await self.get(
            "fills",
            {
                "market": market,
                "orderId": order_id,
                "limit": limit,
                "createdBeforeOrAt": created_before_or_at,
            },
        )

    # ========================================================================
    # TRANSFERS & FUNDING
    # ========================================================================

    async def get_transfers(
        self,
        transfer_type: Optional[Union[AccountAction, str]] = None,
        limit: Optional[int] = None,
        created_before_or_at: Optional[str] = None,
    ) -> Any:
        return await self.get(
            "transfers",
            {
                "type": transfer_type,
                "limit": limit,
                "createdBeforeOrAt": created_before_or_at,
            },
        )

    def create_withdrawal(self, params: WithdrawalParams, position_id: int) -> Coroutine[Any, Any, Any]:
        """
        Post a slow withdrawal, signing it with the STARK key unless a signature is given.

        Raises:
            MissingStarkKeyError: No signature given and no STARK key configured
        """
        client_id = params.client_id or generate_client_id()
        signature = params.signature
        if not signature:
            stark_key_pair = self._require_stark_key("create_withdrawal")
            signature = SignableWithdrawal(
                network_id=self.network_id,
                position_id=position_id,
                human_amount=params.amount,
                client_id=client_id,
                expiration=params.expiration,
                asset=params.asset,
                stark_key=stark_key_pair.public_key,
            ).sign(stark_key_pair.private_key)
            self.logger.debug(f"Signed withdrawal {client_id}")

        return self.post("withdrawals", params.to_wire(client_id=client_id, signature=signature))

    async def create_deposit(self, amount: str, asset: str, from_address: str) -> Any:
        return await self.post(
            "deposits",
            {
                "amount": amount,
                "asset": enum_value(asset),
                "fromAddress": from_address,
            },
        )

    async def get_funding_payments(
        self,
        market: Optional[str] = None,
        limit: Optional[int] = None,
        effective_before_or_at: Optional[str] = None,
    ) -> Any:
        return await self.get(
            "funding",
            {
                "market": market,
                "limit": limit,
                "effectiveBeforeOrAt": effective_before_or_at,
            },
        )

    def _require_stark_key(self, operation: str) -> StarkKeyPair:
        if self.stark_key_pair is None:
            raise MissingStarkKeyError(
                f"{operation} requires a signature or a STARK private key (stark_private_key)"
            )
        return self.stark_key_pair
