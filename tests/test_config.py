"""
Tests for settings loading and client construction from settings.
"""

import pytest

from dydx_client import DydxClient, DydxSettings
from dydx_client.base_models import MissingCredentialsError, validate_credentials
from dydx_client.client.modules import NotSupportedModule, PrivateModule


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "DYDX_HOST",
        "DYDX_NETWORK_ID",
        "DYDX_API_TIMEOUT",
        "DYDX_API_PRIVATE_KEY",
        "DYDX_STARK_PRIVATE_KEY",
        "DYDX_ETH_PRIVATE_KEY",
        "DYDX_WEB3_PROVIDER_URL",
        "DYDX_PROXY_URL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDydxSettings:
    def test_defaults(self):
        settings = DydxSettings(_env_file=None)
        assert settings.host == "https://api.dydx.exchange"
        assert settings.network_id == 1
        assert settings.api_private_key is None

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("DYDX_HOST", "https://api.stage.dydx.exchange/")
        monkeypatch.setenv("DYDX_NETWORK_ID", "3")
        monkeypatch.setenv("DYDX_API_TIMEOUT", "2.5")

        settings = DydxSettings(_env_file=None)

        assert settings.host == "https://api.stage.dydx.exchange"
        assert settings.network_id == 3
        assert settings.api_timeout == 2.5


class TestFromSettings:
    def test_credentials_enable_private_module(self, api_private_key):
        settings = DydxSettings(_env_file=None, api_private_key=api_private_key, network_id=3)
        client = DydxClient.from_settings(settings)

        assert client.network_id == 3
        assert isinstance(client.private, PrivateModule)

    def test_placeholders_are_treated_as_absent(self):
        settings = DydxSettings(
            _env_file=None,
            api_private_key="your_api_private_key_here",
            stark_private_key="",
        )
        client = DydxClient.from_settings(settings)

        assert isinstance(client.private, NotSupportedModule)
        assert client.stark_key_pair is None
        assert client.web3 is None

    def test_placeholder_host_is_rejected(self):
        with pytest.raises(MissingCredentialsError):
            DydxClient.from_settings(DydxSettings(_env_file=None, host="PLACEHOLDER"))

    def test_overrides_win(self, transport):
        http_client = transport.client()
        client = DydxClient.from_settings(DydxSettings(_env_file=None), http_client=http_client)
        assert client.http_client is http_client


def test_validate_credentials():
    validate_credentials("DYDX_HOST", "https://api.dydx.exchange")
    with pytest.raises(MissingCredentialsError):
        validate_credentials("DYDX_HOST", None)
    with pytest.raises(MissingCredentialsError):
        validate_credentials("DYDX_API_PRIVATE_KEY", "placeholder")
