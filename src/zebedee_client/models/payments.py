"""Payments of BOLT11 invoices."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import DEFAULT_DESCRIPTION, ZbdModel
from zebedee_client.response import StdResponse


class PaymentsData(ZbdModel):
    id: str
    fee: Optional[str] = None
    unit: str
    amount: str
    invoice: Optional[str] = None
    preimage: Optional[str] = None
    internal_id: Optional[str] = Field(default=None, alias="internalId")
    processed_at: Optional[datetime] = Field(default=None, alias="processedAt")
    confirmed_at: Optional[datetime] = Field(default=None, alias="confirmedAt")
    description: str
    status: str


class Payment(ZbdModel):
    """Request body for paying a BOLT11 invoice."""

    description: str = DEFAULT_DESCRIPTION
    internal_id: str = Field(default="", alias="internalId")
    invoice: str = ""


PaymentInvoiceResponse = StdResponse[Optional[PaymentsData]]
FetchPaymentsResponse = StdResponse[Optional[list[PaymentsData]]]
FetchOnePaymentResponse = StdResponse[Optional[PaymentsData]]
