"""ZBD vouchers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import EmailPaymentKind, UnitType, ZbdModel


class VoucherData(ZbdModel):
    amount: str
    code: str
    created_at: datetime = Field(alias="createdAt")
    create_transaction_id: str = Field(alias="createTransactionId")
    description: str
    fee: Optional[str] = None
    id: str
    unit: UnitType
    wallet_id: str = Field(alias="walletId")

    @property
    def kind(self) -> EmailPaymentKind:
        return EmailPaymentKind.VOUCHER
