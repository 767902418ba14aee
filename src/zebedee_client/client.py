"""Async client for the ZEBEDEE Lightning payments REST API.

Each method maps one provider endpoint to a typed request and response.
All of them share the same pipeline: build the URL, attach headers, send,
then hand the response to ``parse_response``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from zebedee_client.config import USER_TOKEN_HEADER, ClientConfig
from zebedee_client.exceptions import TransportError
from zebedee_client.models.charges import Charge, FetchChargesResponse, FetchOneChargeResponse
from zebedee_client.models.common import ZbdModel
from zebedee_client.models.email import EmailPaymentRequest, EmailPaymentResponse
from zebedee_client.models.gamertag import (
    GamertagChargeResponse,
    GamertagPayment,
    GamertagPayResponse,
    GamertagTxResponse,
    GamertagUserIdResponse,
    IdFromGamertagResponse,
)
from zebedee_client.models.internal_transfer import InternalTransfer, InternalTransferResponse
from zebedee_client.models.keysend import Keysend, KeysendResponse
from zebedee_client.models.ln_address import (
    FetchLnChargeResponse,
    LnAddress,
    LnFetchCharge,
    LnPayment,
    PayLnAddressResponse,
    ValidateLnAddressResponse,
)
from zebedee_client.models.oauth import (
    FetchAccessTokenResponse,
    FetchRefreshBody,
    FetchRefreshResponse,
    FetchTokenBody,
    UserDataResponse,
    UserWalletDataResponse,
)
from zebedee_client.models.payments import (
    FetchOnePaymentResponse,
    FetchPaymentsResponse,
    Payment,
    PaymentInvoiceResponse,
)
from zebedee_client.models.utilities import (
    BtcToUsdResponse,
    ProdIpsResponse,
    SupportedIpResponse,
)
from zebedee_client.models.wallet import WalletInfoResponse
from zebedee_client.models.withdrawal_requests import (
    CreateWithdrawalResponse,
    FetchOneWithdrawalResponse,
    FetchWithdrawalsResponse,
    WithdrawalRequest,
)
from zebedee_client.response import parse_response
from zebedee_client.validation import (
    ensure_valid,
    validate_email_payment,
    validate_gamertag_payment,
    validate_ln_address,
    validate_oauth_config,
    validate_path_segment,
    validate_refresh_request,
    validate_token_request,
    validate_url,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _segment(field: str, value: str) -> str:
    """Percent-encode a path parameter so it stays a single path segment.

    Raises:
        PayloadValidationError: ``value`` is empty, ``.`` or ``..``.
    """
    ensure_valid(validate_path_segment(field, value))
    return quote(value, safe="@")


class ZebedeeClient:
    """Async ZEBEDEE API client.

    Usage:
        config = ClientConfig.builder().with_api_key("...").build()
        async with ZebedeeClient(config) as zbd:
            charge = await zbd.create_charge(Charge(amount="1000", description="coffee"))
            print(charge.data.invoice.request)

    Every method raises a ``ZebedeeError`` subclass on failure:
    ``TransportError``, ``MalformedResponseError``, ``ApiError`` or
    ``PayloadValidationError`` (raised before anything is sent).
    """

    def __init__(self, config: ClientConfig | None = None, **httpx_kwargs: Any):
        """
        Args:
            config: Connection settings. Defaults to ``ClientConfig()``.
            **httpx_kwargs: Additional kwargs passed to httpx.AsyncClient when
                the config does not carry its own ``http_client``.

        Raises:
            ValueError: ``httpx_kwargs`` were given together with a config
                that already carries an ``http_client``.
        """
        if config is not None and config.http_client is not None and httpx_kwargs:
            raise ValueError(
                "httpx kwargs cannot be combined with an injected http_client: "
                f"{sorted(httpx_kwargs)}"
            )
        self._config = config or ClientConfig()
        self._httpx_kwargs = httpx_kwargs
        self._client: httpx.AsyncClient | None = self._config.http_client
        self._owns_client = self._config.http_client is None

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> ZebedeeClient:
        self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs = {"timeout": self._config.timeout, **self._httpx_kwargs}
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def aclose(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

    # -- request pipeline ---------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        *,
        body: ZbdModel | None = None,
        api_key: bool = True,
        user_token: str | None = None,
    ) -> httpx.Response:
        client = self._ensure_client()
        url = self._config.url(path)
        request = client.build_request(
            method, url, json=body.to_payload() if body is not None else None
        )
        if api_key:
            request = self._config.attach_standard_headers(request)
        else:
            request.headers["Content-Type"] = "application/json"
        if user_token is not None:
            request.headers[USER_TOKEN_HEADER] = user_token

        logger.debug("ZBD %s %s", method, path)
        try:
            response = await client.send(request)
        except httpx.HTTPError as e:
            logger.debug("ZBD %s %s failed: %s", method, path, e)
            raise TransportError(method, url, str(e) or type(e).__name__) from e
        logger.debug("ZBD response: %s %d", path, response.status_code)
        return response

    async def _call(
        self,
        model: type[ModelT],
        method: str,
        path: str,
        **kwargs: Any,
    ) -> ModelT:
        response = await self._send(method, path, **kwargs)
        return parse_response(response, model)

    # -- wallet -------------------------------------------------------------

    async def get_wallet_details(self) -> WalletInfoResponse:
        """Retrieve the total balance of the Project Wallet."""
        return await self._call(WalletInfoResponse, "GET", "/v0/wallet")

    async def internal_transfer(self, transfer: InternalTransfer) -> InternalTransferResponse:
        """Transfer funds between two Project Wallets you own."""
        return await self._call(
            InternalTransferResponse, "POST", "/v0/internal-transfer", body=transfer
        )

    # -- charges ------------------------------------------------------------

    async def create_charge(self, charge: Charge) -> FetchOneChargeResponse:
        """Create a single-use, fixed-amount Lightning payment request."""
        return await self._call(FetchOneChargeResponse, "POST", "/v0/charges", body=charge)

    async def get_charges(self) -> FetchChargesResponse:
        return await self._call(FetchChargesResponse, "GET", "/v0/charges")

    async def get_charge(self, charge_id: str) -> FetchOneChargeResponse:
        return await self._call(
            FetchOneChargeResponse,
            "GET",
            f"/v0/charges/{_segment('charge_id', charge_id)}",
        )

    # -- payments -----------------------------------------------------------

    async def keysend(self, payment: Keysend) -> KeysendResponse:
        """Pay a node public key directly, without a payment request."""
        return await self._call(KeysendResponse, "POST", "/v0/keysend-payment", body=payment)

    async def pay_invoice(self, payment: Payment) -> PaymentInvoiceResponse:
        """Pay a BOLT11 payment request."""
        return await self._call(PaymentInvoiceResponse, "POST", "/v0/payments", body=payment)

    async def get_payments(self) -> FetchPaymentsResponse:
        return await self._call(FetchPaymentsResponse, "GET", "/v0/payments")

    async def get_payment(self, payment_id: str) -> FetchOnePaymentResponse:
        return await self._call(
            FetchOnePaymentResponse,
            "GET",
            f"/v0/payments/{_segment('payment_id', payment_id)}",
        )

    async def pay_email(self, payment: EmailPaymentRequest) -> EmailPaymentResponse:
        """Send sats to an email address.

        The result's ``data.kind`` is ``EXISTING_ACCOUNT`` when the email
        belongs to a ZBD account, or ``VOUCHER`` when a voucher was issued.
        """
        ensure_valid(validate_email_payment(payment))
        return await self._call(
            EmailPaymentResponse, "POST", "/v0/email/send-payment", body=payment
        )

    # -- gamertag -----------------------------------------------------------

    async def pay_gamertag(self, payment: GamertagPayment) -> GamertagPayResponse:
        """Send sats to a ZBD Gamertag."""
        ensure_valid(validate_gamertag_payment(payment))
        return await self._call(
            GamertagPayResponse, "POST", "/v0/gamertag/send-payment", body=payment
        )

    async def fetch_charge_from_gamertag(
        self, payment: GamertagPayment
    ) -> GamertagChargeResponse:
        """Create a BOLT11 invoice that pays the given Gamertag."""
        ensure_valid(validate_gamertag_payment(payment))
        return await self._call(
            GamertagChargeResponse, "POST", "/v0/gamertag/charges", body=payment
        )

    async def get_gamertag_tx(self, transaction_id: str) -> GamertagTxResponse:
        """Status and fees of a payment sent to a Gamertag."""
        return await self._call(
            GamertagTxResponse,
            "GET",
            f"/v0/gamertag/transaction/{_segment('transaction_id', transaction_id)}",
        )

    async def get_userid_by_gamertag(self, gamertag: str) -> IdFromGamertagResponse:
        return await self._call(
            IdFromGamertagResponse,
            "GET",
            f"/v0/user-id/gamertag/{_segment('gamertag', gamertag)}",
        )

    async def get_gamertag_by_userid(self, user_id: str) -> GamertagUserIdResponse:
        return await self._call(
            GamertagUserIdResponse,
            "GET",
            f"/v0/gamertag/user-id/{_segment('user_id', user_id)}",
        )

    # -- lightning address --------------------------------------------------

    async def pay_ln_address(self, payment: LnPayment) -> PayLnAddressResponse:
        """Send sats to a Lightning Address."""
        return await self._call(
            PayLnAddressResponse, "POST", "/v0/ln-address/send-payment", body=payment
        )

    async def fetch_charge_ln_address(self, charge: LnFetchCharge) -> FetchLnChargeResponse:
        """Create a payment request for a Lightning Address."""
        return await self._call(
            FetchLnChargeResponse, "POST", "/v0/ln-address/fetch-charge", body=charge
        )

    async def validate_ln_address(self, address: LnAddress | str) -> ValidateLnAddressResponse:
        """Ask the provider whether ``address`` is a live Lightning Address.

        The address must look like an email; otherwise no request is sent.
        """
        if isinstance(address, str):
            address = LnAddress(address=address)
        ensure_valid(validate_ln_address(address))
        return await self._call(
            ValidateLnAddressResponse,
            "GET",
            f"/v0/ln-address/validate/{_segment('address', address.address)}",
        )

    # -- withdrawal requests ------------------------------------------------

    async def create_withdrawal_request(
        self, withdrawal: WithdrawalRequest
    ) -> CreateWithdrawalResponse:
        """Create a QR code the holder can scan to withdraw funds."""
        return await self._call(
            CreateWithdrawalResponse, "POST", "/v0/withdrawal-requests", body=withdrawal
        )

    async def get_withdrawal_requests(self) -> FetchWithdrawalsResponse:
        return await self._call(FetchWithdrawalsResponse, "GET", "/v0/withdrawal-requests")

    async def get_withdrawal_request(self, withdrawal_id: str) -> FetchOneWithdrawalResponse:
        return await self._call(
            FetchOneWithdrawalResponse,
            "GET",
            f"/v0/withdrawal-requests/{_segment('withdrawal_id', withdrawal_id)}",
        )

    # -- utilities ----------------------------------------------------------

    async def get_is_supported_region_by_ip(self, ip: str) -> SupportedIpResponse:
        """Check whether requests from ``ip`` come from a supported region."""
        return await self._call(
            SupportedIpResponse, "GET", f"/v0/is-supported-region/{_segment('ip', ip)}"
        )

    async def get_prod_ips(self) -> ProdIpsResponse:
        """IP addresses ZEBEDEE sends production callbacks from."""
        return await self._call(ProdIpsResponse, "GET", "/v0/prod-ips")

    async def get_btc_usd(self) -> BtcToUsdResponse:
        """Latest BTC/USD price. Public endpoint, sent without the API key."""
        return await self._call(BtcToUsdResponse, "GET", "/v0/btcusd", api_key=False)

    # -- Login with ZBD (OAuth2 + PKCE) -------------------------------------

    def create_auth_url(self, challenge: str) -> str:
        """Build the authorization URL the user opens to grant access.

        Args:
            challenge: ``PKCE.challenge`` of the pair whose verifier will be
                passed to ``fetch_token``.
        """
        oauth = self._config.oauth
        ensure_valid(validate_oauth_config(oauth))
        params = [
            ("client_id", oauth.client_id),
            ("response_type", "code"),
            ("redirect_uri", oauth.redirect_uri),
            ("code_challenge_method", "S256"),
            ("code_challenge", challenge),
            ("scope", oauth.scope),
            ("state", oauth.state),
        ]
        url = str(httpx.URL(self._config.url("/v1/oauth2/authorize"), params=params))
        ensure_valid(validate_url("url", url))
        return url

    async def fetch_token(self, code: str, verifier: str) -> FetchAccessTokenResponse:
        """Exchange an authorization code and PKCE verifier for tokens."""
        oauth = self._config.oauth
        ensure_valid(validate_oauth_config(oauth))
        body = FetchTokenBody(
            client_id=oauth.client_id,
            client_secret=oauth.secret,
            code=code,
            code_verifier=verifier,
            redirect_uri=oauth.redirect_uri,
        )
        ensure_valid(validate_token_request(body))
        return await self._call(
            FetchAccessTokenResponse, "POST", "/v1/oauth2/token", body=body, api_key=False
        )

    async def refresh_token(self, refresh_token: str) -> FetchRefreshResponse:
        """Get a new access token for a user from their refresh token."""
        oauth = self._config.oauth
        ensure_valid(validate_oauth_config(oauth))
        body = FetchRefreshBody(
            client_id=oauth.client_id,
            client_secret=oauth.secret,
            refresh_token=refresh_token,
            redirect_uri=oauth.redirect_uri,
        )
        ensure_valid(validate_refresh_request(body))
        return await self._call(
            FetchRefreshResponse, "POST", "/v1/oauth2/token", body=body, api_key=False
        )

    async def fetch_user_data(self, token: str) -> UserDataResponse:
        """Profile of the ZBD user who granted ``token``."""
        return await self._call(UserDataResponse, "GET", "/v1/oauth2/user", user_token=token)

    async def fetch_user_wallet_data(self, token: str) -> UserWalletDataResponse:
        """Wallet balance and limits of the ZBD user who granted ``token``."""
        return await self._call(
            UserWalletDataResponse, "GET", "/v1/oauth2/wallet", user_token=token
        )
