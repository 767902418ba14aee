"""Tests for ClientConfig and its builder."""

import dataclasses

import httpx
import pytest

from zebedee_client.config import (
    DEFAULT_API_KEY,
    DEFAULT_BASE_URL,
    ClientConfig,
    OAuthConfig,
)


class TestDefaults:
    def test_default_values(self):
        config = ClientConfig()
        assert config.base_url == "https://api.zebedee.io"
        assert config.api_key == DEFAULT_API_KEY
        assert config.oauth is None
        assert config.http_client is None

    def test_builder_defaults_match(self):
        assert ClientConfig.builder().build() == ClientConfig()


class TestBuilder:
    def test_fluent_chain(self):
        config = (
            ClientConfig.builder()
            .with_base_url("https://sandbox.zebedee.io")
            .with_api_key("my-key")
            .with_timeout(5.0)
            .build()
        )
        assert config.base_url == "https://sandbox.zebedee.io"
        assert config.api_key == "my-key"
        assert config.timeout == 5.0

    def test_trailing_slash_stripped(self):
        config = ClientConfig.builder().with_base_url("https://api.zebedee.io/").build()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.url("/v0/wallet") == "https://api.zebedee.io/v0/wallet"

    def test_with_oauth(self):
        config = (
            ClientConfig.builder()
            .with_oauth("cid", "secret", "https://example.com/cb", "state", "user,wallet")
            .build()
        )
        assert config.oauth == OAuthConfig(
            client_id="cid",
            secret="secret",
            redirect_uri="https://example.com/cb",
            state="state",
            scope="user,wallet",
        )

    def test_with_http_client(self):
        http_client = httpx.AsyncClient()
        config = ClientConfig.builder().with_http_client(http_client).build()
        assert config.http_client is http_client

    def test_builds_are_independent(self):
        builder = ClientConfig.builder().with_api_key("first")
        first = builder.build()
        second = builder.with_api_key("second").build()
        assert first.api_key == "first"
        assert second.api_key == "second"


class TestImmutability:
    def test_frozen(self):
        config = ClientConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"  # type: ignore

    def test_replace_shares_transport(self):
        http_client = httpx.AsyncClient()
        config = ClientConfig.builder().with_http_client(http_client).build()
        copy = dataclasses.replace(config, api_key="other")
        assert copy.http_client is http_client

    def test_repr_hides_secrets(self):
        config = (
            ClientConfig.builder()
            .with_api_key("super-secret-key")
            .with_oauth("cid", "oauth-secret", "https://example.com/cb", "state", "user")
            .build()
        )
        text = repr(config)
        assert "super-secret-key" not in text
        assert "oauth-secret" not in text
        assert "cid" in text


class TestHeaders:
    def test_attach_standard_headers(self):
        config = ClientConfig.builder().with_api_key("my-key").build()
        request = httpx.Request("GET", "https://api.zebedee.io/v0/wallet")

        result = config.attach_standard_headers(request)

        assert result.headers["Content-Type"] == "application/json"
        assert result.headers["apikey"] == "my-key"

    def test_overrides_existing_content_type(self):
        config = ClientConfig()
        request = httpx.Request("POST", "https://x", headers={"Content-Type": "text/plain"})
        config.attach_standard_headers(request)
        assert request.headers["content-type"] == "application/json"
        assert request.headers["apikey"] == "errornotset"


class TestFromEnv:
    def test_reads_api_key_and_base_url(self, monkeypatch):
        monkeypatch.setenv("ZBD_API_KEY", "env-key")
        monkeypatch.setenv("ZBD_ENV", "https://sandbox.zebedee.io/")
        config = ClientConfig.from_env()
        assert config.api_key == "env-key"
        assert config.base_url == "https://sandbox.zebedee.io"

    def test_unset_falls_back_to_defaults(self, monkeypatch):
        monkeypatch.delenv("ZBD_API_KEY", raising=False)
        monkeypatch.delenv("ZBD_ENV", raising=False)
        assert ClientConfig.from_env() == ClientConfig()

    def test_placeholders_skipped(self, monkeypatch):
        monkeypatch.setenv("ZBD_API_KEY", "${ZBD_API_KEY}")
        monkeypatch.setenv("ZBD_ENV", "${ZBD_ENV}")
        config = ClientConfig.from_env()
        assert config.api_key == DEFAULT_API_KEY
        assert config.base_url == DEFAULT_BASE_URL
