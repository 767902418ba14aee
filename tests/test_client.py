"""End-to-end tests for ZebedeeClient against a mocked transport."""

from __future__ import annotations

import httpx
import pytest

from conftest import RecordingTransport
from zebedee_client import ClientConfig, ZebedeeClient
from zebedee_client.exceptions import (
    ApiError,
    ErrorKind,
    MalformedResponseError,
    PayloadValidationError,
    TransportError,
    ZebedeeError,
)
from zebedee_client.models import Charge, GamertagPayment

CHARGE_DATA = {
    "id": "abc",
    "unit": "sats",
    "amount": "1000",
    "createdAt": "2023-03-01T12:00:00.000Z",
    "internalId": "",
    "callbackUrl": "",
    "description": "x",
    "expiresAt": "2023-03-01T12:05:00.000Z",
    "confirmedAt": None,
    "status": "pending",
    "invoice": {"request": "lnbc10u1ptest", "uri": "lightning:lnbc10u1ptest"},
}


class TestCreateChargeScenarios:
    @pytest.mark.asyncio
    async def test_success(self, make_client):
        transport = RecordingTransport(
            200, json={"success": True, "data": CHARGE_DATA, "message": None}
        )
        charge = Charge(amount="1000", description="x", internal_id="", callback_url="")

        async with make_client(transport) as zbd:
            result = await zbd.create_charge(charge)

        assert result.success is True
        assert result.data.id == "abc"
        assert result.data.invoice.request == "lnbc10u1ptest"

        request = transport.last
        assert request.method == "POST"
        assert request.url == "https://api.zebedee.test/v0/charges"
        assert transport.last_json() == {
            "expiresIn": 300,
            "amount": "1000",
            "description": "x",
            "internalId": "",
            "callbackUrl": "",
        }

    @pytest.mark.asyncio
    async def test_api_error(self, make_client):
        transport = RecordingTransport(
            402, json={"success": False, "message": "Insufficient balance"}
        )

        async with make_client(transport) as zbd:
            with pytest.raises(ApiError) as exc_info:
                await zbd.create_charge(Charge(amount="1000"))

        assert exc_info.value.message == "Insufficient balance"
        assert exc_info.value.status_code == 402

    @pytest.mark.asyncio
    async def test_not_json(self, make_client):
        transport = RecordingTransport(200, text="not json")

        async with make_client(transport) as zbd:
            with pytest.raises(MalformedResponseError) as exc_info:
                await zbd.create_charge(Charge(amount="1000"))

        assert exc_info.value.body == "not json"


class TestHeaders:
    @pytest.mark.asyncio
    async def test_api_key_and_content_type(self, make_client):
        transport = RecordingTransport(200, json={"success": True, "data": None})

        async with make_client(transport) as zbd:
            await zbd.get_wallet_details()

        headers = transport.last.headers
        assert headers["apikey"] == "test-api-key"
        assert headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_btc_usd_sent_without_api_key(self, make_client):
        transport = RecordingTransport(
            200,
            json={
                "success": True,
                "data": {"btcUsdPrice": "27000", "btcUsdTimestamp": "1683000000"},
            },
        )

        async with make_client(transport) as zbd:
            result = await zbd.get_btc_usd()

        assert result.data.btc_usd_price == "27000"
        assert "apikey" not in transport.last.headers
        assert transport.last.headers["content-type"] == "application/json"


class TestTransport:
    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self, make_client):
        transport = RecordingTransport(error=httpx.ConnectError("connection refused"))

        async with make_client(transport) as zbd:
            with pytest.raises(TransportError) as exc_info:
                await zbd.get_wallet_details()

        err = exc_info.value
        assert err.kind is ErrorKind.TRANSPORT
        assert err.method == "GET"
        assert err.url == "https://api.zebedee.test/v0/wallet"
        assert "connection refused" in str(err)
        assert isinstance(err.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self, make_client):
        transport = RecordingTransport(error=httpx.ReadTimeout("timed out"))

        async with make_client(transport) as zbd:
            with pytest.raises(TransportError):
                await zbd.get_charges()

        assert len(transport.requests) == 1  # never retried

    @pytest.mark.asyncio
    async def test_all_failures_share_base_class(self, make_client):
        transport = RecordingTransport(500, json={"success": False})

        async with make_client(transport) as zbd:
            with pytest.raises(ZebedeeError):
                await zbd.get_payments()

        assert len(transport.requests) == 1


class TestErrorKinds:
    def test_base_error_has_no_kind(self):
        assert ZebedeeError("boom").kind is None

    def test_each_raised_error_has_a_kind(self):
        assert TransportError("GET", "https://x", "down").kind is ErrorKind.TRANSPORT
        assert PayloadValidationError([]).kind is ErrorKind.VALIDATION
        assert MalformedResponseError.kind is ErrorKind.MALFORMED_RESPONSE
        assert ApiError.kind is ErrorKind.API


class TestLocalValidation:
    @pytest.mark.asyncio
    async def test_empty_gamertag_never_sent(self, make_client):
        transport = RecordingTransport(200, json={"success": True, "data": None})

        async with make_client(transport) as zbd:
            with pytest.raises(PayloadValidationError) as exc_info:
                await zbd.pay_gamertag(GamertagPayment(gamertag="", amount="1000"))

        assert [v.field for v in exc_info.value.violations] == ["gamertag"]
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_short_amount_never_sent(self, make_client):
        transport = RecordingTransport(200, json={"success": True, "data": None})

        async with make_client(transport) as zbd:
            with pytest.raises(PayloadValidationError):
                await zbd.fetch_charge_from_gamertag(
                    GamertagPayment(gamertag="santos", amount="100")
                )

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_invalid_ln_address_never_sent(self, make_client):
        transport = RecordingTransport(200, json={"success": True, "data": None})

        async with make_client(transport) as zbd:
            with pytest.raises(PayloadValidationError) as exc_info:
                await zbd.validate_ln_address("not-an-address")

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert transport.requests == []


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_injected_http_client_not_closed(self):
        transport = RecordingTransport(200, json={"success": True, "data": None})
        http_client = httpx.AsyncClient(transport=transport)
        config = ClientConfig.builder().with_http_client(http_client).build()

        async with ZebedeeClient(config) as zbd:
            await zbd.get_prod_ips()

        assert not http_client.is_closed
        assert transport.last.url == "https://api.zebedee.io/v0/prod-ips"
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self, make_client):
        transport = RecordingTransport(200, json={"success": True, "data": None})
        zbd = make_client(transport)

        await zbd.get_prod_ips()
        owned = zbd._client
        await zbd.aclose()

        assert owned is not None and owned.is_closed
        assert zbd._client is None

    @pytest.mark.asyncio
    async def test_shared_config_across_clients(self):
        transport = RecordingTransport(200, json={"success": True, "data": None})
        config = ClientConfig.builder().with_api_key("shared").build()

        async with ZebedeeClient(config, transport=transport) as a, ZebedeeClient(
            config, transport=transport
        ) as b:
            await a.get_wallet_details()
            await b.get_wallet_details()

        assert [r.headers["apikey"] for r in transport.requests] == ["shared", "shared"]

    def test_default_config(self):
        zbd = ZebedeeClient()
        assert zbd.config == ClientConfig()

    def test_httpx_kwargs_rejected_with_injected_client(self):
        config = ClientConfig.builder().with_http_client(httpx.AsyncClient()).build()
        with pytest.raises(ValueError, match="transport"):
            ZebedeeClient(config, transport=RecordingTransport())


class TestTimeout:
    @pytest.mark.asyncio
    async def test_default_timeout_on_created_client(self):
        zbd = ZebedeeClient(ClientConfig())
        assert zbd._ensure_client().timeout == httpx.Timeout(60.0)
        await zbd.aclose()

    @pytest.mark.asyncio
    async def test_configured_timeout_on_created_client(self):
        zbd = ZebedeeClient(ClientConfig.builder().with_timeout(5.0).build())
        assert zbd._ensure_client().timeout == httpx.Timeout(5.0)
        await zbd.aclose()

    @pytest.mark.asyncio
    async def test_explicit_timeout_kwarg_wins(self):
        zbd = ZebedeeClient(ClientConfig(), timeout=2.0)
        assert zbd._ensure_client().timeout == httpx.Timeout(2.0)
        await zbd.aclose()

    @pytest.mark.asyncio
    async def test_injected_client_keeps_own_timeout(self):
        http_client = httpx.AsyncClient(timeout=7.0)
        config = (
            ClientConfig.builder().with_http_client(http_client).with_timeout(5.0).build()
        )

        zbd = ZebedeeClient(config)

        assert zbd._ensure_client() is http_client
        assert zbd._ensure_client().timeout == httpx.Timeout(7.0)
        await http_client.aclose()
