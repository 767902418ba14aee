from __future__ import annotations

from typing import Optional

from zebedee_client.models.common import ZbdModel
from zebedee_client.response import StdResponse


class WalletData(ZbdModel):
    unit: str
    balance: str


WalletInfoResponse = StdResponse[Optional[WalletData]]
