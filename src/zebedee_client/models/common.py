"""Shared building blocks for ZEBEDEE wire models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

DEFAULT_DESCRIPTION = "using zebedee python sdk"


class ZbdModel(BaseModel):
    """Base for every wire model.

    Fields use snake_case in Python and declare the provider's name with
    ``Field(alias=...)``. Either name is accepted on input, unknown keys
    are ignored, and ``to_payload`` emits the provider's names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class UnitType(str, enum.Enum):
    MSATS = "msats"
    SATS = "sats"


class EmailPaymentKind(str, enum.Enum):
    """Which shape an email payment result came back in."""

    EXISTING_ACCOUNT = "existing_account"
    VOUCHER = "voucher"
