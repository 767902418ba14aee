"""Payments to ZBD Gamertags and Gamertag lookups."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import DEFAULT_DESCRIPTION, ZbdModel
from zebedee_client.response import StdResponse


class GamertagPayment(ZbdModel):
    """Request body for paying a Gamertag or fetching a charge for one.

    Checked by ``validate_gamertag_payment`` before it is sent.
    """

    gamertag: str = ""
    amount: str = ""
    description: str = DEFAULT_DESCRIPTION


class GamertagPaymentData(ZbdModel):
    receiver_id: str = Field(alias="receiverId")
    transaction_id: str = Field(alias="transactionId")
    amount: str
    comment: str
    settled_at: Optional[datetime] = Field(default=None, alias="settledAt")
    status: Optional[str] = None
    id: Optional[str] = None


class GamertagChargeData(ZbdModel):
    invoice_request: str = Field(alias="invoiceRequest")
    invoice_expires_at: datetime = Field(alias="invoiceExpiresAt")
    unit: str
    created_at: datetime = Field(alias="createdAt")
    status: str
    internal_id: Optional[str] = Field(default=None, alias="internalId")
    amount: str
    description: str


class GamertagTxData(ZbdModel):
    id: str
    receiver_id: str = Field(alias="receiverId")
    amount: str
    fee: str
    unit: str
    processed_at: Optional[datetime] = Field(default=None, alias="processedAt")
    confirmed_at: Optional[datetime] = Field(default=None, alias="confirmedAt")
    comment: str
    status: str


class IdFromGamertagData(ZbdModel):
    id: str


GamertagPayResponse = StdResponse[GamertagPaymentData]
GamertagChargeResponse = StdResponse[Optional[GamertagChargeData]]
GamertagTxResponse = StdResponse[Optional[GamertagTxData]]
IdFromGamertagResponse = StdResponse[Optional[IdFromGamertagData]]
GamertagUserIdResponse = StdResponse[Optional[dict[str, str]]]
