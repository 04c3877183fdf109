"""
API key management for the dYdX client.

Requests are authenticated with an EIP-712 signature from the Ethereum key
that owns the account instead of the API key pair.
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from dydx_client.common import (
    API_VERSION_PREFIX,
    HEADER_ETHEREUM_ADDRESS,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
    RequestMethod,
    enum_value,
)
from dydx_client.client.utils.helpers import generate_query_path, iso_now, json_stringify
from dydx_client.eth_signing import EthSigner, add_signature_type, build_private_action
from helpers.unified_logger import get_client_logger


class KeysModule:
    """
    Ethereum-key authenticated endpoints.

    Handles:
    - Listing API keys
    - Registering and deleting API keys
    """

    def __init__(
        self,
        host: str,
        network_id: int,
        signer: EthSigner,
        send_request_fn: Callable[..., Awaitable[Any]],
        logger: Optional[Any] = None,
    ):
        self.host = host
        self.network_id = network_id
        self.signer = signer
        self._send_request = send_request_fn
        self.logger = logger or get_client_logger("keys")

    async def sign(
        self,
        request_path: str,
        method: str,
        iso_timestamp: str,
        ethereum_address: str,
        body: str = "",
    ) -> str:
        typed_data = build_private_action(self.network_id, method, request_path, body, iso_timestamp)
        return add_signature_type(await self.signer.sign(typed_data, ethereum_address))

    async def request(
        self,
        method: str,
        endpoint: str,
        ethereum_address: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        method = enum_value(method)
        request_path = f"{API_VERSION_PREFIX}/{endpoint}"
        timestamp = iso_now()
        body = json_stringify(data) if data is not None else ""

        headers = {
            HEADER_SIGNATURE: await self.sign(request_path, method, timestamp, ethereum_address, body),
            HEADER_ETHEREUM_ADDRESS: ethereum_address,
            HEADER_TIMESTAMP: timestamp,
        }
        return await self._send_request(method, f"{self.host}{request_path}", headers=headers, body=body or None)

    async def get_api_keys(self, ethereum_address: str) -> Any:
        return await self.request(RequestMethod.GET, "api-keys", ethereum_address)

    async def register_api_key(self, api_public_key: str, ethereum_address: str) -> Any:
        self.logger.info(f"Registering API key {api_public_key} for {ethereum_address}")
        return await self.request(RequestMethod.POST, "api-keys", ethereum_address, {"apiKey": api_public_key})

    async def delete_api_key(self, api_public_key: str, ethereum_address: str) -> Any:
        self.logger.info(f"Deleting API key {api_public_key} for {ethereum_address}")
        return await self.request(
            RequestMethod.DELETE,
            generate_query_path("api-keys", {"apiKey": api_public_key}),
            ethereum_address,
        )
