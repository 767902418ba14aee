"""Client configuration: base URL, project API key and OAuth app settings.

Build once and share; a ``ClientConfig`` is immutable.

    config = (
        ClientConfig.builder()
        .with_api_key(os.environ["ZBD_API_KEY"])
        .with_oauth(client_id, secret, "https://example.com/callback", state, "user,wallet")
        .build()
    )

``ClientConfig.from_env()`` reads ``ZBD_API_KEY`` and ``ZBD_ENV`` (base URL).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

import httpx

DEFAULT_BASE_URL = "https://api.zebedee.io"
DEFAULT_API_KEY = "errornotset"
DEFAULT_TIMEOUT = 60.0

API_KEY_HEADER = "apikey"
USER_TOKEN_HEADER = "usertoken"


@dataclass(frozen=True)
class OAuthConfig:
    """Login with ZBD application settings.

    client_id, secret and state are 36-character identifiers and
    redirect_uri must be a URL; these rules are checked when an OAuth
    operation runs (see ``validation.validate_oauth_config``).
    """

    client_id: str
    secret: str
    redirect_uri: str
    state: str
    scope: str

    def __repr__(self) -> str:
        return (
            f"OAuthConfig(client_id={self.client_id!r}, secret='***', "
            f"redirect_uri={self.redirect_uri!r}, state={self.state!r}, "
            f"scope={self.scope!r})"
        )


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings shared by every call of a ``ZebedeeClient``.

    Args:
        base_url: ZEBEDEE REST API root, without a trailing slash.
        api_key: Project API key sent in the ``apikey`` header.
        oauth: Login with ZBD settings, or None when OAuth is not used.
        http_client: Caller-owned transport. If None, the client creates
            (and closes) its own ``httpx.AsyncClient``.
        timeout: Request timeout for a client-created transport.
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str = DEFAULT_API_KEY
    oauth: OAuthConfig | None = None
    http_client: httpx.AsyncClient | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, api_key='***', "
            f"oauth={self.oauth!r}, timeout={self.timeout!r})"
        )

    @staticmethod
    def builder() -> ClientConfigBuilder:
        return ClientConfigBuilder()

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from ``ZBD_API_KEY`` and ``ZBD_ENV``.

        Unset variables and unexpanded placeholders such as
        ``${ZBD_API_KEY}`` fall back to the defaults.
        """
        builder = cls.builder()
        api_key = os.environ.get("ZBD_API_KEY", "")
        if _is_real_value(api_key):
            builder.with_api_key(api_key)
        base_url = os.environ.get("ZBD_ENV", "")
        if _is_real_value(base_url):
            builder.with_base_url(base_url)
        return builder.build()

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def attach_standard_headers(self, request: httpx.Request) -> httpx.Request:
        """Set the JSON content type and the project API key on ``request``."""
        request.headers["Content-Type"] = "application/json"
        request.headers[API_KEY_HEADER] = self.api_key
        return request


class ClientConfigBuilder:
    """Fluent builder for ``ClientConfig``; each ``with_*`` returns the builder."""

    def __init__(self) -> None:
        self._config = ClientConfig()

    def with_base_url(self, url: str) -> ClientConfigBuilder:
        self._config = replace(self._config, base_url=url)
        return self

    def with_api_key(self, key: str) -> ClientConfigBuilder:
        self._config = replace(self._config, api_key=key)
        return self

    def with_oauth(
        self,
        client_id: str,
        secret: str,
        redirect_uri: str,
        state: str,
        scope: str,
    ) -> ClientConfigBuilder:
        oauth = OAuthConfig(
            client_id=client_id,
            secret=secret,
            redirect_uri=redirect_uri,
            state=state,
            scope=scope,
        )
        self._config = replace(self._config, oauth=oauth)
        return self

    def with_http_client(self, http_client: httpx.AsyncClient) -> ClientConfigBuilder:
        self._config = replace(self._config, http_client=http_client)
        return self

    def with_timeout(self, timeout: float) -> ClientConfigBuilder:
        self._config = replace(self._config, timeout=timeout)
        return self

    def build(self) -> ClientConfig:
        return replace(self._config, base_url=self._config.base_url.rstrip("/"))


def _is_real_value(val: str | None) -> bool:
    """Check if an env var value is a real setting (not a placeholder)."""
    if not val:
        return False
    return not val.startswith("${")
