"""
dYdX v3 client implementation.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

import httpx
from web3 import AsyncHTTPProvider, AsyncWeb3

from dydx_client.base_models import (
    ApiKeyPair,
    StarkKeyPair,
    is_placeholder,
    validate_credentials,
)
from dydx_client.common import NETWORK_ID_MAINNET
from dydx_client.config import DydxSettings
from dydx_client.eth_signing import EthSigner, SignWithKey, SignWithWeb3
from helpers.unified_logger import get_client_logger
from networking.http import create_httpx_client, send_request

from .modules.eth import EthModule
from .modules.keys import KeysModule
from .modules.not_supported import NotSupportedModule
from .modules.onboarding import OnboardingModule
from .modules.private import PrivateModule
from .modules.public import PublicModule


class ModuleKind(str, Enum):
    PRIVATE = "private"
    KEYS = "keys"
    ONBOARDING = "onboarding"
    ETH = "eth"


_MODULE_CLASSES = {
    ModuleKind.PRIVATE: PrivateModule,
    ModuleKind.KEYS: KeysModule,
    ModuleKind.ONBOARDING: OnboardingModule,
    ModuleKind.ETH: EthModule,
}

_MODULE_REQUIREMENTS = {
    ModuleKind.PRIVATE: "api_private_key",
    ModuleKind.KEYS: "web3_provider",
    ModuleKind.ONBOARDING: "web3_provider",
    ModuleKind.ETH: "web3_provider",
}


class DydxClient:
    """
    dYdX v3 client.

    The public module is always available. The other modules are built on
    first access; a module whose credential is missing is replaced by a stub
    that raises ``ModuleNotSupportedError`` on every call.
    """

    def __init__(
        self,
        host: str,
        *,
        network_id: int = NETWORK_ID_MAINNET,
        api_timeout: Optional[float] = None,
        api_private_key: Optional[Union[str, int, ApiKeyPair]] = None,
        stark_private_key: Optional[Union[str, int, StarkKeyPair]] = None,
        web3_provider: Optional[Union[str, AsyncWeb3, Any]] = None,
        eth_private_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        proxy_url: Optional[str] = None,
    ):
        """
        Initialize dYdX client.

        Args:
            host: API base URL (e.g. https://api.dydx.exchange)
            network_id: Ethereum network id (1 mainnet, 3 ropsten)
            api_timeout: HTTP timeout in seconds (httpx default when omitted)
            api_private_key: API private key or ApiKeyPair; enables the private module
            stark_private_key: STARK private key or StarkKeyPair; signs orders and withdrawals
            web3_provider: RPC URL, provider or AsyncWeb3; enables keys, onboarding and eth
            eth_private_key: Ethereum private key for local signing (node signs otherwise)
            http_client: Pre-built AsyncClient (owned by the caller)
            proxy_url: Optional HTTP proxy
        """
        self.host = host.rstrip("/")
        self.network_id = network_id
        self.api_timeout = api_timeout
        self.proxy_url = proxy_url
        self.logger = get_client_logger()

        self._api_private_key = api_private_key
        self._eth_private_key = eth_private_key
        self.stark_key_pair: Optional[StarkKeyPair] = (
            StarkKeyPair.from_private_key(stark_private_key) if stark_private_key else None
        )
        self.web3: Optional[AsyncWeb3] = self._build_web3(web3_provider) if web3_provider else None

        self._http_client = http_client
        self._owns_http_client = http_client is None

        self._public = PublicModule(self.host, self._send_request, logger=get_client_logger("public"))
        self._modules: Dict[ModuleKind, Any] = {}

    @classmethod
    def from_settings(cls, settings: Optional[DydxSettings] = None, **overrides: Any) -> "DydxClient":
        """
        Build a client from ``DydxSettings`` (environment / .env by default).

        Placeholder or empty credentials are treated as absent.

        Raises:
            MissingCredentialsError: If the host is missing or a placeholder
        """
        settings = settings or DydxSettings()
        validate_credentials("DYDX_HOST", settings.host)

        def credential(value: Optional[str]) -> Optional[str]:
            return None if is_placeholder(value) else value

        kwargs: Dict[str, Any] = {
            "network_id": settings.network_id,
            "api_timeout": settings.api_timeout,
            "api_private_key": credential(settings.api_private_key),
            "stark_private_key": credential(settings.stark_private_key),
            "eth_private_key": credential(settings.eth_private_key),
            "web3_provider": credential(settings.web3_provider_url),
            "proxy_url": credential(settings.proxy_url),
        }
        kwargs.update(overrides)
        return cls(settings.host, **kwargs)

    @staticmethod
    def _build_web3(provider: Union[str, AsyncWeb3, Any]) -> AsyncWeb3:
        if isinstance(provider, AsyncWeb3):
            return provider
        if isinstance(provider, str):
            provider = AsyncHTTPProvider(provider)
        return AsyncWeb3(provider)

    # ========================================================================
    # MODULES
    # ========================================================================

    @property
    def public(self) -> PublicModule:
        return self._public

    @property
    def private(self) -> Union[PrivateModule, NotSupportedModule]:
        return self._get_module(ModuleKind.PRIVATE)

    @property
    def keys(self) -> Union[KeysModule, NotSupportedModule]:
        return self._get_module(ModuleKind.KEYS)

    @property
    def onboarding(self) -> Union[OnboardingModule, NotSupportedModule]:
        return self._get_module(ModuleKind.ONBOARDING)

    @property
    def eth(self) -> Union[EthModule, NotSupportedModule]:
        return self._get_module(ModuleKind.ETH)

    def _get_module(self, kind: ModuleKind) -> Any:
        """Return the module for ``kind``, building it on first access."""
        module = self._modules.get(kind)
        if module is None:
            module = self._build_module(kind)
            self._modules[kind] = module
        return module

    def _build_module(self, kind: ModuleKind) -> Any:
        logger = get_client_logger(kind.value)

        if kind is ModuleKind.PRIVATE:
            if not self._api_private_key:
                return self._not_supported(kind)
            return PrivateModule(
                host=self.host,
                network_id=self.network_id,
                api_key_pair=ApiKeyPair.from_private_key(self._api_private_key),
                send_request_fn=self._send_request,
                stark_key_pair=self.stark_key_pair,
                logger=logger,
            )

        if self.web3 is None:
            return self._not_supported(kind)

        if kind is ModuleKind.ETH:
            return EthModule(self.web3, self.network_id, eth_private_key=self._eth_private_key, logger=logger)

        module_cls = _MODULE_CLASSES[kind]
        return module_cls(
            host=self.host,
            network_id=self.network_id,
            signer=self._build_signer(),
            send_request_fn=self._send_request,
            logger=logger,
        )

    def _not_supported(self, kind: ModuleKind) -> NotSupportedModule:
        requirement = _MODULE_REQUIREMENTS[kind]
        self.logger.debug(f"{kind.value} module disabled: no {requirement}")
        return NotSupportedModule(kind.value, _MODULE_CLASSES[kind], requirement)

    def _build_signer(self) -> EthSigner:
        if self._eth_private_key:
            return SignWithKey(self._eth_private_key)
        return SignWithWeb3(self.web3)

    # ========================================================================
    # HTTP
    # ========================================================================

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = create_httpx_client(self.proxy_url, timeout=self.api_timeout)
        return self._http_client

    async def _send_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> Any:
        return await send_request(self.http_client, method, url, headers=headers, body=body)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "DydxClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
