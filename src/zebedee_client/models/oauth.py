"""Login with ZBD: OAuth2 token bodies and user-scoped responses."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from zebedee_client.models.common import ZbdModel
from zebedee_client.response import StdResponse


class FetchTokenBody(ZbdModel):
    """Body for exchanging an authorization code for tokens."""

    client_id: str
    client_secret: str
    code: str
    code_verifier: str
    grant_type: str = "authorization_code"
    redirect_uri: str


class FetchRefreshBody(ZbdModel):
    """Body for exchanging a refresh token for a new access token."""

    client_id: str
    client_secret: str
    refresh_token: str
    grant_type: str = "refresh_token"
    redirect_uri: str


class FetchAccessTokenResponse(ZbdModel):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
    refresh_token_expires_in: int
    scope: str


class FetchRefreshResponse(ZbdModel):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
    scope: str


class ZBDUserData(ZbdModel):
    id: str
    email: str
    gamertag: str
    image: Optional[str] = None
    is_verified: bool = Field(alias="isVerified")
    lightning_address: str = Field(alias="lightningAddress")
    public_bio: str = Field(alias="publicBio")
    public_static_charge: str = Field(alias="publicStaticCharge")


class ZBDUserWalletDataLimits(ZbdModel):
    daily: str
    max_credit: str = Field(alias="maxCredit")
    monthly: str
    weekly: str


class ZBDUserWalletData(ZbdModel):
    balance: str
    remaining_amount_limits: ZBDUserWalletDataLimits = Field(alias="remainingAmountLimits")


UserDataResponse = StdResponse[ZBDUserData]
UserWalletDataResponse = StdResponse[ZBDUserWalletData]
