"""
Tests for the DydxClient facade: capability gating, memoisation and the
HTTP client lifecycle.
"""

import httpx
import pytest
from web3 import AsyncHTTPProvider, AsyncWeb3

from dydx_client import DydxClient, ModuleKind
from dydx_client.base_models import ModuleNotSupportedError
from dydx_client.client.modules import (
    EthModule,
    KeysModule,
    NotSupportedModule,
    OnboardingModule,
    PrivateModule,
    PublicModule,
)
from dydx_client.eth_signing import SignWithKey, SignWithWeb3

LOCAL_NODE = "http://localhost:8545"


class TestCapabilityGating:
    def test_public_module_always_present(self, host):
        client = DydxClient(host)
        assert isinstance(client.public, PublicModule)

    @pytest.mark.parametrize("kind", list(ModuleKind))
    def test_missing_credentials_yield_stub(self, host, kind):
        client = DydxClient(host)
        module = getattr(client, kind.value)
        assert isinstance(module, NotSupportedModule)

    def test_empty_credentials_yield_stub(self, host):
        client = DydxClient(host, api_private_key="", stark_private_key="", web3_provider="")

        assert client.stark_key_pair is None
        assert client.web3 is None
        for kind in ModuleKind:
            assert isinstance(getattr(client, kind.value), NotSupportedModule)
        with pytest.raises(ModuleNotSupportedError):
            client.private.get_user()

    def test_stub_raises_on_every_call(self, host, transport):
        client = DydxClient(host, http_client=transport.client())

        for _ in range(2):
            with pytest.raises(ModuleNotSupportedError):
                client.private.get_user()
            with pytest.raises(ModuleNotSupportedError):
                client.private.create_order(None, position_id=1)
            with pytest.raises(ModuleNotSupportedError):
                client.keys.register_api_key("0x1", "0x2")
            with pytest.raises(ModuleNotSupportedError):
                client.eth.get_eth_balance("0x2")
        assert transport.requests == []

    def test_stub_only_mirrors_real_operations(self, host):
        client = DydxClient(host)
        with pytest.raises(AttributeError):
            client.private.no_such_operation
        with pytest.raises(AttributeError):
            client.private._require_stark_key

    def test_modules_are_memoised(self, host, api_private_key):
        gated = DydxClient(host)
        assert gated.private is gated.private
        assert gated.onboarding is gated.onboarding

        client = DydxClient(host, api_private_key=api_private_key)
        assert isinstance(client.private, PrivateModule)
        assert client.private is client.private

    def test_private_module_receives_stark_key(self, host, api_private_key, stark_private_key):
        client = DydxClient(host, api_private_key=api_private_key, stark_private_key=stark_private_key)
        assert client.private.stark_key_pair == client.stark_key_pair
        assert client.stark_key_pair is not None

    def test_construction_failures_are_not_memoised(self, host):
        client = DydxClient(host, api_private_key="not-a-key")
        for _ in range(2):
            with pytest.raises(ValueError):
                client.private
        assert ModuleKind.PRIVATE not in client._modules

    def test_web3_provider_enables_eth_modules(self, host):
        client = DydxClient(host, web3_provider=LOCAL_NODE)

        assert isinstance(client.web3, AsyncWeb3)
        assert isinstance(client.keys, KeysModule)
        assert isinstance(client.onboarding, OnboardingModule)
        assert isinstance(client.eth, EthModule)
        assert isinstance(client.keys.signer, SignWithWeb3)
        assert isinstance(client.private, NotSupportedModule)

    def test_eth_private_key_signs_locally(self, host, eth_private_key):
        client = DydxClient(host, web3_provider=LOCAL_NODE, eth_private_key=eth_private_key)
        assert isinstance(client.onboarding.signer, SignWithKey)

    def test_existing_web3_instance_is_reused(self, host):
        web3 = AsyncWeb3(AsyncHTTPProvider(LOCAL_NODE))
        client = DydxClient(host, web3_provider=web3)
        assert client.web3 is web3


class TestHttpLifecycle:
    def test_host_trailing_slash_is_stripped(self):
        assert DydxClient("https://api.test.dydx/").host == "https://api.test.dydx"

    @pytest.mark.asyncio
    async def test_http_client_created_lazily_and_closed(self, host):
        client = DydxClient(host, api_timeout=5)
        assert client._http_client is None

        http_client = client.http_client
        assert isinstance(http_client, httpx.AsyncClient)
        assert client.http_client is http_client

        await client.close()
        assert http_client.is_closed
        assert client._http_client is None

    @pytest.mark.asyncio
    async def test_injected_http_client_is_not_closed(self, host, transport):
        http_client = transport.client()
        async with DydxClient(host, http_client=http_client) as client:
            await client.public.get_time()

        assert not http_client.is_closed
        assert transport.last.url.raw_path == b"/v3/time"
