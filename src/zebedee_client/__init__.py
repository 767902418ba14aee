"""zebedee-client: typed async client for the ZEBEDEE Lightning API.

Usage:
    from zebedee_client import Charge, ClientConfig, ZebedeeClient

    config = ClientConfig.builder().with_api_key("your-api-key").build()

    async with ZebedeeClient(config) as zbd:
        charge = await zbd.create_charge(Charge(amount="10000", description="coffee"))
        print(charge.data.invoice.request)

Login with ZBD:
    pkce = PKCE.generate()
    url = zbd.create_auth_url(pkce.challenge)
    # ...user approves, the redirect carries ?code=...
    tokens = await zbd.fetch_token(code, pkce.verifier)
"""

import logging

from zebedee_client.client import ZebedeeClient
from zebedee_client.config import ClientConfig, ClientConfigBuilder, OAuthConfig
from zebedee_client.exceptions import (
    ApiError,
    ErrorKind,
    MalformedResponseError,
    PayloadValidationError,
    TransportError,
    Violation,
    ZebedeeError,
)
from zebedee_client.models import *  # noqa: F401,F403
from zebedee_client.models import __all__ as _models_all
from zebedee_client.pkce import PKCE
from zebedee_client.response import ApiErrorBody, StdResponse, parse_response

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Client
    "ZebedeeClient",
    # Configuration
    "ClientConfig",
    "ClientConfigBuilder",
    "OAuthConfig",
    # Responses
    "StdResponse",
    "ApiErrorBody",
    "parse_response",
    # PKCE
    "PKCE",
    # Exceptions
    "ZebedeeError",
    "ErrorKind",
    "TransportError",
    "MalformedResponseError",
    "ApiError",
    "PayloadValidationError",
    "Violation",
    *_models_all,
]
