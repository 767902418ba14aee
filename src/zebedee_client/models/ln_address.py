"""Lightning Address payments, charges and validation."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import DEFAULT_DESCRIPTION, ZbdModel
from zebedee_client.response import StdResponse


class LnAddress(ZbdModel):
    """A Lightning Address to validate, e.g. ``andre@zbd.gg``."""

    address: str


class LnPayment(ZbdModel):
    """Request body for paying a Lightning Address."""

    ln_address: str = Field(default="", alias="lnAddress")
    amount: str = ""
    comment: str = DEFAULT_DESCRIPTION


class LnFetchCharge(ZbdModel):
    """Request body for creating a charge against a Lightning Address."""

    ln_address: str = Field(default="", alias="lnaddress")
    amount: str = ""
    description: str = DEFAULT_DESCRIPTION


class LnPayerData(ZbdModel):
    name: dict[str, bool]
    identifier: dict[str, bool]


class LnValidateMetadata(ZbdModel):
    min_sendable: int = Field(alias="minSendable")
    max_sendable: int = Field(alias="maxSendable")
    comment_allowed: int = Field(alias="commentAllowed")
    tag: str
    metadata: str
    callback: str
    payer_data: LnPayerData = Field(alias="payerData")
    disposable: bool


class LnValidateData(ZbdModel):
    valid: bool
    metadata: LnValidateMetadata


class LnInvoice(ZbdModel):
    uri: str
    request: str


class LnFetchChargeData(ZbdModel):
    ln_address: str = Field(alias="lnaddress")
    amount: str
    invoice: LnInvoice


class LnSendPaymentData(ZbdModel):
    id: str
    fee: Optional[str] = None
    unit: str
    amount: str
    preimage: Optional[str] = None
    status: str
    invoice: str
    wallet_id: str = Field(alias="walletId")
    transaction_id: str = Field(alias="transactionId")
    created_at: datetime = Field(alias="createdAt")
    processed_at: datetime = Field(alias="processedAt")
    callback_url: Optional[str] = Field(default=None, alias="callbackURL")
    internal_id: Optional[str] = Field(default=None, alias="internalId")


PayLnAddressResponse = StdResponse[Optional[LnSendPaymentData]]
FetchLnChargeResponse = StdResponse[Optional[LnFetchChargeData]]
ValidateLnAddressResponse = StdResponse[Optional[LnValidateData]]
