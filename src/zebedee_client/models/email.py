"""Payments to an email address.

The provider answers ``/v0/email/send-payment`` with one of two shapes and
no tag field. If the email belongs to an existing ZBD account the sats are
credited to it (``EmailPaymentData``); otherwise a voucher is issued to the
email (``VoucherData``). ``EmailPaymentResponse`` tries the shapes in that
order and keeps the first that validates; ``result.kind`` tells them apart.
"""

from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import Field

from zebedee_client.models.common import EmailPaymentKind, ZbdModel
from zebedee_client.models.voucher import VoucherData
from zebedee_client.response import StdResponse


class EmailPaymentRequest(ZbdModel):
    """Request body for paying an email address.

    ``amount`` is in millisatoshis; ``comment`` is at most 150 characters.
    """

    email: str
    amount: str
    comment: str = ""


class EmailPaymentData(ZbdModel):
    id: str
    status: str
    amount: str
    comment: str
    receiver_id: str = Field(alias="receiverId")
    sender_tx_id: str = Field(alias="senderTxId")
    settled_at: datetime = Field(alias="settledAt")
    transaction_id: str = Field(alias="transactionId")

    @property
    def kind(self) -> EmailPaymentKind:
        return EmailPaymentKind.EXISTING_ACCOUNT


EmailPaymentResult = Union[EmailPaymentData, VoucherData]


class EmailPaymentResponse(StdResponse[EmailPaymentResult]):
    data: EmailPaymentResult = Field(union_mode="left_to_right")
