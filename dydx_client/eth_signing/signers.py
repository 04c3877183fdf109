"""
Ethereum signers for EIP-712 typed data.

``SignWithKey`` signs locally with eth_account; ``SignWithWeb3`` asks the
connected node (eth_signTypedData) to sign with one of its accounts.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from eth_account import Account
from eth_account.messages import encode_typed_data
from web3 import AsyncWeb3


class EthSigner(ABC):
    """Signs typed data on behalf of an Ethereum address."""

    @abstractmethod
    async def sign(self, typed_data: Dict[str, Any], address: str) -> str:
        """Return the 65-byte signature as 0x-prefixed hex."""
        pass


class SignWithKey(EthSigner):
    def __init__(self, private_key: str):
        self._account = Account.from_key(private_key)

    @property
    def address(self) -> str:
        return self._account.address

    async def sign(self, typed_data: Dict[str, Any], address: str) -> str:
        if address.lower() != self.address.lower():
            raise ValueError(f"Signer key does not belong to {address}")
        signed = self._account.sign_message(encode_typed_data(full_message=typed_data))
        return AsyncWeb3.to_hex(signed.signature)


class SignWithWeb3(EthSigner):
    def __init__(self, web3: AsyncWeb3):
        self.web3 = web3

    async def sign(self, typed_data: Dict[str, Any], address: str) -> str:
        signature = await self.web3.eth.sign_typed_data(AsyncWeb3.to_checksum_address(address), typed_data)
        return AsyncWeb3.to_hex(signature)
