"""Validated shapes for data crossing the app boundary."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RemoteMenuItem(BaseModel):
    """One record of the remote `menu` array."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    price: Decimal
    description: str = ""
    image: str = ""
    category: str = Field(min_length=1)


class UserProfile(BaseModel):
    """Saved user profile, as written by the profile screen."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    version: Literal[1] = 1
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: str = ""
    phone_number: str = Field("", alias="phoneNumber")
    order_statuses: bool = Field(False, alias="orderStatuses")
    password_changes: bool = Field(False, alias="passwordChanges")
    special_offers: bool = Field(False, alias="specialOffers")
    newsletter: bool = False
    image: str = ""

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()
