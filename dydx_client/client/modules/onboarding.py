"""
Onboarding module for the dYdX client.

Creates users and derives STARK keys from Ethereum signatures.
"""

from typing import Any, Awaitable, Callable, Optional

from web3 import Web3

from dydx_client.base_models import StarkKeyPair
from dydx_client.common import (
    API_VERSION_PREFIX,
    HEADER_ETHEREUM_ADDRESS,
    HEADER_SIGNATURE,
    RequestMethod,
)
from dydx_client.client.utils.helpers import json_stringify
from dydx_client.eth_signing import (
    ONBOARDING_ACTION,
    STARK_KEY_ACTION,
    EthSigner,
    add_signature_type,
    build_off_chain_action,
)
from helpers.unified_logger import get_client_logger

# Keccak output is shifted down to 251 bits to land below the curve order.
STARK_KEY_DERIVATION_SHIFT = 5


class OnboardingModule:
    """
    Onboarding endpoints.

    Handles:
    - User creation signed with the owning Ethereum key
    - Deterministic STARK key derivation
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
        self.logger = logger or get_client_logger("onboarding")

    async def create_user(
        self,
        stark_key: str,
        stark_key_y_coordinate: str,
        ethereum_address: str,
        referred_by_affiliate_link: Optional[str] = None,
        country: Optional[str] = None,
    ) -> Any:
        """
        Onboard ``ethereum_address`` with its STARK public key.

        Args:
            stark_key: STARK public key (x coordinate, hex)
            stark_key_y_coordinate: y coordinate of the STARK public key (hex)
            ethereum_address: Address signing the onboarding action
            referred_by_affiliate_link: Optional affiliate link
            country: Optional ISO 3166-1 alpha-2 country code

        Returns:
            Server response containing the user, account and API key
        """
        data = {
            "starkKey": stark_key,
            "starkKeyYCoordinate": stark_key_y_coordinate,
        }
        if referred_by_affiliate_link is not None:
            data["referredByAffiliateLink"] = referred_by_affiliate_link
        if country is not None:
            data["country"] = country

        typed_data = build_off_chain_action(self.network_id, ONBOARDING_ACTION)
        signature = add_signature_type(await self.signer.sign(typed_data, ethereum_address))

        self.logger.info(f"Onboarding {ethereum_address}")
        return await self._send_request(
            RequestMethod.POST.value,
            f"{self.host}{API_VERSION_PREFIX}/onboarding",
            headers={
                HEADER_SIGNATURE: signature,
                HEADER_ETHEREUM_ADDRESS: ethereum_address,
            },
            body=json_stringify(data),
        )

    async def derive_stark_key(self, ethereum_address: str) -> StarkKeyPair:
        """
        Derive the STARK key pair of ``ethereum_address``.

        The same address and network always yield the same key pair, since
        the action signature is deterministic.
        """
        typed_data = build_off_chain_action(self.network_id, STARK_KEY_ACTION)
        signature = await self.signer.sign(typed_data, ethereum_address)
        hashed = Web3.keccak(hexstr=signature)
        private_key = int.from_bytes(hashed, "big") >> STARK_KEY_DERIVATION_SHIFT
        return StarkKeyPair.from_private_key(private_key)
