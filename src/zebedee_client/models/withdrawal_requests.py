"""Withdrawal requests: Lightning QR codes that you receive funds through.

Charges are payment requests someone else pays; withdrawal requests are the
opposite, a QR code the holder scans to pull funds out of the wallet.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import DEFAULT_DESCRIPTION, ZbdModel
from zebedee_client.response import StdResponse


class WithdrawalInvoiceData(ZbdModel):
    request: str
    fast_request: str = Field(alias="fastRequest")
    uri: str
    fast_uri: str = Field(alias="fastUri")


class WithdrawalRequestsData(ZbdModel):
    id: str
    unit: str
    amount: str
    created_at: datetime = Field(alias="createdAt")
    expires_at: datetime = Field(alias="expiresAt")
    internal_id: str = Field(alias="internalId")
    description: str
    callback_url: str = Field(alias="callbackUrl")
    status: str
    invoice: WithdrawalInvoiceData


class WithdrawalRequest(ZbdModel):
    """Request body for creating a withdrawal request."""

    expires_in: int = Field(default=300, alias="expiresIn")
    amount: str = "0"
    description: str = DEFAULT_DESCRIPTION
    internal_id: str = Field(default="", alias="internalId")
    callback_url: str = Field(default="", alias="callbackUrl")


CreateWithdrawalResponse = StdResponse[Optional[WithdrawalRequestsData]]
FetchWithdrawalsResponse = StdResponse[Optional[list[WithdrawalRequestsData]]]
FetchOneWithdrawalResponse = StdResponse[Optional[WithdrawalRequestsData]]
