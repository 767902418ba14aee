"""Charges: single-use, fixed-amount Lightning payment requests."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import DEFAULT_DESCRIPTION, ZbdModel
from zebedee_client.response import StdResponse


class InvoiceData(ZbdModel):
    request: str
    uri: str


class ChargesData(ZbdModel):
    id: str
    unit: str
    amount: str
    created_at: datetime = Field(alias="createdAt")
    internal_id: str = Field(alias="internalId")
    callback_url: str = Field(alias="callbackUrl")
    description: str
    expires_at: datetime = Field(alias="expiresAt")
    confirmed_at: Optional[datetime] = Field(default=None, alias="confirmedAt")
    status: str
    invoice: InvoiceData


class Charge(ZbdModel):
    """Request body for creating a charge."""

    expires_in: int = Field(default=300, alias="expiresIn")
    amount: str = "0"
    description: str = DEFAULT_DESCRIPTION
    internal_id: str = Field(default="", alias="internalId")
    callback_url: str = Field(default="", alias="callbackUrl")


FetchChargesResponse = StdResponse[Optional[list[ChargesData]]]
FetchOneChargeResponse = StdResponse[Optional[ChargesData]]
