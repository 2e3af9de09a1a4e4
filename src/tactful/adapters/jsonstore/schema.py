"""Pydantic models describing the JSON contact document."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

PhoneType = Literal["mobile", "work", "home"]


class ContactBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NamePayload(ContactBaseModel):
    first: str
    last: str


class PhoneNumberPayload(ContactBaseModel):
    number: str
    type: PhoneType


class AddressPayload(ContactBaseModel):
    street: str
    number: str
    locality: str
    postal_code: str
    country: str


class ContactPayload(ContactBaseModel):
    """One entry of the contact document.

    Optional members are ``None`` when absent; empty ``phone``/``email`` lists
    are stored as ``None`` so that ``exclude_none`` drops them on output.
    """

    name: NamePayload
    bday: str | None = None
    phone: list[PhoneNumberPayload] | None = Field(default=None)
    email: list[str] | None = Field(default=None)
    address: AddressPayload | None = None

    @property
    def display_name(self) -> str:
        return f"{self.name.first} {self.name.last}"


ContactDocument = TypeAdapter(list[ContactPayload])


__all__ = [
    "AddressPayload",
    "ContactBaseModel",
    "ContactDocument",
    "ContactPayload",
    "NamePayload",
    "PhoneNumberPayload",
    "PhoneType",
]
