"""Keysend: pay a node public key without a payment request."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import ZbdModel
from zebedee_client.response import StdResponse


class TlvRecord(ZbdModel):
    """Custom TLV record attached to a keysend payment; ``value`` is hex."""

    record_type: int = Field(alias="type")
    value: str


class Keysend(ZbdModel):
    """Request body for a keysend payment."""

    amount: str = ""
    pubkey: str = ""
    tlv_records: list[TlvRecord] = Field(default_factory=list)
    metadata: str = ""
    callback_url: str = Field(default="", alias="callbackUrl")


class KeysendTx(ZbdModel):
    id: str
    wallet_id: str = Field(alias="walletId")
    tx_type: Optional[str] = Field(default=None, alias="type")
    total_amount: str = Field(alias="totalAmount")
    fee: str
    amount: str
    description: Optional[str] = None
    status: str
    confirmed_at: Optional[datetime] = Field(default=None, alias="confirmedAt")


class KeysendData(ZbdModel):
    keysend_id: str = Field(alias="keysendId")
    payment_id: str = Field(alias="paymentId")
    transaction: KeysendTx


KeysendResponse = StdResponse[Optional[KeysendData]]
