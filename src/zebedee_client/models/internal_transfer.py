"""Transfers between two Project Wallets owned by the same account."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from zebedee_client.models.common import ZbdModel
from zebedee_client.response import StdResponse


class InternalTransfer(ZbdModel):
    amount: str
    receiver_wallet_id: str = Field(alias="receiverWalletId")


class InternalTransferData(ZbdModel):
    id: str
    status: str
    amount: str
    sender_wallet_id: str = Field(alias="senderWalletId")
    receiver_wallet_id: str = Field(alias="receiverWalletId")
    user_id: str = Field(alias="userId")
    send_tx_id: str = Field(alias="sendTxId")
    receive_tx_id: str = Field(alias="receiveTxId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


InternalTransferResponse = StdResponse[InternalTransferData]
