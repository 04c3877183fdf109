"""
On-chain module for the dYdX client.

Balances, collateral allowances and deposits into the StarkEx perpetual
contract, through web3.
"""

from decimal import Decimal
from typing import Any, Optional

from eth_account import Account
from web3 import AsyncWeb3

from dydx_client.common import (
    COLLATERAL_TOKEN_ADDRESS,
    COLLATERAL_TOKEN_DECIMALS,
    MAX_UINT_AMOUNT,
    STARKWARE_PERPETUALS_CONTRACT,
)
from dydx_client.starkex.constants import COLLATERAL_ASSET_RESOLUTION_EXPONENT
from dydx_client.starkex.helpers import (
    HumanAmount,
    get_collateral_asset_id,
    key_to_int,
    to_quantums_exact,
)
from helpers.unified_logger import get_client_logger

ABI_ERC20 = [
    {
        "constant": True,
        "inputs": [{"name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "type": "function",
    },
]

ABI_STARKWARE_PERPETUALS = [
    {
        "inputs": [
            {"name": "starkKey", "type": "uint256"},
            {"name": "assetType", "type": "uint256"},
            {"name": "vaultId", "type": "uint256"},
            {"name": "quantizedAmount", "type": "uint256"},
        ],
        "name": "deposit",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]


class EthModule:
    """
    Ethereum contract calls.

    Handles:
    - ETH and ERC20 balances
    - Collateral allowance for the perpetual contract
    - Deposits of collateral into a position

    Transactions are signed locally when an Ethereum private key is set,
    otherwise they are sent through the node (eth_sendTransaction).
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        network_id: int,
        eth_private_key: Optional[str] = None,
        logger: Optional[Any] = None,
    ):
        self.web3 = web3
        self.network_id = network_id
        self._account = Account.from_key(eth_private_key) if eth_private_key else None
        self.logger = logger or get_client_logger("eth")

    @property
    def collateral_token_address(self) -> str:
        return COLLATERAL_TOKEN_ADDRESS[self.network_id]

    @property
    def perpetual_contract_address(self) -> str:
        return STARKWARE_PERPETUALS_CONTRACT[self.network_id]

    def _contract(self, address: str, abi: list):
        return self.web3.eth.contract(address=AsyncWeb3.to_checksum_address(address), abi=abi)

    async def _token_decimals(self, token_address: Optional[str]) -> int:
        if token_address is None or token_address.lower() == self.collateral_token_address.lower():
            return COLLATERAL_TOKEN_DECIMALS
        return await self._contract(token_address, ABI_ERC20).functions.decimals().call()

    async def _send_transaction(self, function_call, sender: str) -> str:
        sender = AsyncWeb3.to_checksum_address(sender)
        if self._account is None:
            tx_hash = await function_call.transact({"from": sender})
            return AsyncWeb3.to_hex(tx_hash)

        if sender != self._account.address:
            raise ValueError(f"Configured Ethereum key does not belong to {sender}")

        tx = await function_call.build_transaction({
            "from": sender,
            "nonce": await self.web3.eth.get_transaction_count(sender),
            "chainId": self.network_id,
        })
        signed = self._account.sign_transaction(tx)
        tx_hash = await self.web3.eth.send_raw_transaction(signed.raw_transaction)
        return AsyncWeb3.to_hex(tx_hash)

    # ========================================================================
    # BALANCES
    # ========================================================================

    async def get_eth_balance(self, owner: str) -> Decimal:
        """ETH balance of ``owner`` in ether."""
        wei = await self.web3.eth.get_balance(AsyncWeb3.to_checksum_address(owner))
        return Decimal(AsyncWeb3.from_wei(wei, "ether"))

    async def get_token_balance(self, owner: str, token_address: Optional[str] = None) -> Decimal:
        """ERC20 balance of ``owner`` in human units; defaults to the collateral token."""
        token = self._contract(token_address or self.collateral_token_address, ABI_ERC20)
        raw = await token.functions.balanceOf(AsyncWeb3.to_checksum_address(owner)).call()
        return Decimal(raw).scaleb(-await self._token_decimals(token_address))

    # ========================================================================
    # ALLOWANCES
    # ========================================================================

    async def get_token_allowance(
        self,
        owner: str,
        spender: Optional[str] = None,
        token_address: Optional[str] = None,
    ) -> Decimal:
        token = self._contract(token_address or self.collateral_token_address, ABI_ERC20)
        raw = await token.functions.allowance(
            AsyncWeb3.to_checksum_address(owner),
            AsyncWeb3.to_checksum_address(spender or self.perpetual_contract_address),
        ).call()
        return Decimal(raw).scaleb(-await self._token_decimals(token_address))

    async def set_token_allowance(
        self,
        amount: Optional[HumanAmount],
        sender: str,
        spender: Optional[str] = None,
        token_address: Optional[str] = None,
    ) -> str:
        """
        Approve ``spender`` for ``amount`` tokens (unlimited when ``amount`` is None).

        Returns:
            Transaction hash
        """
        if amount is None:
            raw_amount = MAX_UINT_AMOUNT
        else:
            raw_amount = to_quantums_exact(amount, await self._token_decimals(token_address))

        token = self._contract(token_address or self.collateral_token_address, ABI_ERC20)
        call = token.functions.approve(
            AsyncWeb3.to_checksum_address(spender or self.perpetual_contract_address),
            raw_amount,
        )
        tx_hash = await self._send_transaction(call, sender)
        self.logger.info(f"Approval sent: {tx_hash}")
        return tx_hash

    # ========================================================================
    # DEPOSITS
    # ========================================================================

    async def deposit_to_exchange(
        self,
        position_id: int,
        human_amount: HumanAmount,
        stark_public_key: str,
        sender: str,
    ) -> str:
        """
        Deposit collateral into the position (vault) ``position_id``.

        Returns:
            Transaction hash
        """
        quantized_amount = to_quantums_exact(human_amount, COLLATERAL_ASSET_RESOLUTION_EXPONENT)
        contract = self._contract(self.perpetual_contract_address, ABI_STARKWARE_PERPETUALS)
        call = contract.functions.deposit(
            key_to_int(stark_public_key),
            get_collateral_asset_id(self.network_id),
            int(position_id),
            quantized_amount,
        )
        tx_hash = await self._send_transaction(call, sender)
        self.logger.info(f"Deposit of {human_amount} sent to position {position_id}: {tx_hash}")
        return tx_hash
