"""Region support, production IP allowlist and BTC/USD price."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from zebedee_client.models.common import ZbdModel
from zebedee_client.response import StdResponse


class BtcUsdData(ZbdModel):
    btc_usd_price: str = Field(alias="btcUsdPrice")
    btc_usd_timestamp: str = Field(alias="btcUsdTimestamp")


class IpData(ZbdModel):
    ips: list[str]


class RegionIpData(ZbdModel):
    ip_address: str = Field(alias="ipAddress")
    is_supported: bool = Field(alias="isSupported")
    ip_country: str = Field(alias="ipCountry")
    ip_region: str = Field(alias="ipRegion")


SupportedIpResponse = StdResponse[Optional[RegionIpData]]
ProdIpsResponse = StdResponse[Optional[IpData]]
BtcToUsdResponse = StdResponse[Optional[BtcUsdData]]
