"""Local payload checks run before a request is sent.

Each ``validate_*`` function is pure: it returns the list of violated rules
(empty when the payload is fine) and never touches the network.
``ensure_valid`` turns a non-empty list into ``PayloadValidationError``.
"""

from __future__ import annotations

from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter, ValidationError

from zebedee_client.config import OAuthConfig
from zebedee_client.exceptions import PayloadValidationError, Violation
from zebedee_client.models.email import EmailPaymentRequest
from zebedee_client.models.gamertag import GamertagPayment
from zebedee_client.models.ln_address import LnAddress
from zebedee_client.models.oauth import FetchRefreshBody, FetchTokenBody
from zebedee_client.pkce import PKCE_LENGTH

OAUTH_ID_LENGTH = 36
MIN_GAMERTAG_AMOUNT_LENGTH = 4

_URL = TypeAdapter(AnyUrl)


def _exact_length(field: str, value: str, length: int) -> list[Violation]:
    if len(value) != length:
        return [Violation(field, f"must be exactly {length} characters, got {len(value)}")]
    return []


def _min_length(field: str, value: str, length: int) -> list[Violation]:
    if len(value) < length:
        return [Violation(field, f"must be at least {length} characters, got {len(value)}")]
    return []


def _email(field: str, value: str) -> list[Violation]:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        return [Violation(field, f"not a valid address: {e}")]
    return []


def validate_url(field: str, value: str) -> list[Violation]:
    try:
        _URL.validate_python(value)
    except ValidationError:
        return [Violation(field, f"not a valid URL: {value!r}")]
    return []


def validate_path_segment(field: str, value: str) -> list[Violation]:
    """Reject path parameters that would resolve to a different route."""
    if value in ("", ".", ".."):
        return [Violation(field, f"not a usable path segment: {value!r}")]
    return []


def validate_gamertag_payment(payment: GamertagPayment) -> list[Violation]:
    return _min_length("gamertag", payment.gamertag, 1) + _min_length(
        "amount", payment.amount, MIN_GAMERTAG_AMOUNT_LENGTH
    )


def validate_ln_address(address: LnAddress) -> list[Violation]:
    return _email("address", address.address)


def validate_email_payment(payment: EmailPaymentRequest) -> list[Violation]:
    return _email("email", payment.email)


def validate_oauth_config(oauth: Optional[OAuthConfig]) -> list[Violation]:
    """Check the OAuth application settings used by Login with ZBD."""
    if oauth is None:
        return [Violation("oauth", "OAuth settings are not configured")]
    return (
        _exact_length("client_id", oauth.client_id, OAUTH_ID_LENGTH)
        + _exact_length("secret", oauth.secret, OAUTH_ID_LENGTH)
        + validate_url("redirect_uri", oauth.redirect_uri)
        + _exact_length("state", oauth.state, OAUTH_ID_LENGTH)
    )


def validate_token_request(body: FetchTokenBody) -> list[Violation]:
    return (
        _exact_length("client_id", body.client_id, OAUTH_ID_LENGTH)
        + _exact_length("client_secret", body.client_secret, OAUTH_ID_LENGTH)
        + _exact_length("code", body.code, OAUTH_ID_LENGTH)
        + _exact_length("code_verifier", body.code_verifier, PKCE_LENGTH)
        + _min_length("grant_type", body.grant_type, 1)
        + validate_url("redirect_uri", body.redirect_uri)
    )


def validate_refresh_request(body: FetchRefreshBody) -> list[Violation]:
    return (
        _exact_length("client_id", body.client_id, OAUTH_ID_LENGTH)
        + _exact_length("client_secret", body.client_secret, OAUTH_ID_LENGTH)
        + _exact_length("refresh_token", body.refresh_token, OAUTH_ID_LENGTH)
        + _min_length("grant_type", body.grant_type, 1)
        + validate_url("redirect_uri", body.redirect_uri)
    )


def ensure_valid(violations: list[Violation]) -> None:
    """Raise ``PayloadValidationError`` if any rule was violated."""
    if violations:
        raise PayloadValidationError(violations)
