"""Shared mock transport and client factory."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from zebedee_client import ClientConfig, ZebedeeClient

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://api.zebedee.test"


class RecordingTransport(httpx.AsyncBaseTransport):
    """Answers every request with one canned response and records requests."""

    def __init__(
        self,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        error: Exception | None = None,
    ):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., ZebedeeClient]:
    """Build a ZebedeeClient wired to a mock transport."""

    def factory(transport: httpx.AsyncBaseTransport, oauth: tuple | None = None) -> ZebedeeClient:
        builder = (
            ClientConfig.builder()
            .with_base_url(TEST_BASE_URL)
            .with_api_key(TEST_API_KEY)
        )
        if oauth is not None:
            builder.with_oauth(*oauth)
        return ZebedeeClient(builder.build(), transport=transport)

    return factory
