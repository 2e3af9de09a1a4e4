"""Translate between the JSON contact document and domain contacts."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from tactful.domain.model import (
    Address,
    Contact,
    ContactDecodeError,
    MalformedDocument,
    Name,
    PartialDate,
    PhoneNumber,
    PhoneNumberType,
    TactfulError,
    country_from_alpha2,
)

from .schema import (
    AddressPayload,
    ContactDocument,
    ContactPayload,
    NamePayload,
    PhoneNumberPayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


log = getLogger(__name__)

JSON_INDENT = 2


# ---------------------------------------------------------------- JSON -> domain


def parse_contact_document(document: str | bytes) -> list[ContactPayload]:
    try:
        return ContactDocument.validate_json(document)
    except ValidationError as exc:
        raise MalformedDocument(f"Malformed contact document: {exc}") from exc


def translate_contact(payload: ContactPayload) -> Contact:
    """Build a domain contact, attributing any validation failure to the contact."""

    try:
        return Contact(
            name=Name(first=payload.name.first, last=payload.name.last),
            birthday=(
                PartialDate.from_json_repr(payload.bday) if payload.bday is not None else None
            ),
            phone_numbers=tuple(
                PhoneNumber(number=phone.number, kind=PhoneNumberType(phone.type))
                for phone in payload.phone or ()
            ),
            email_addresses=tuple(payload.email or ()),
            address=_translate_address(payload.address) if payload.address else None,
        )
    except TactfulError as exc:
        raise ContactDecodeError(payload.display_name) from exc


def _translate_address(payload: AddressPayload) -> Address:
    return Address(
        street=payload.street,
        number=payload.number,
        locality=payload.locality,
        postal_code=payload.postal_code,
        country=country_from_alpha2(payload.country),
    )


def contacts_from_json(document: str | bytes) -> list[Contact]:
    """Decode a whole contact document; the first invalid contact aborts decoding."""

    payloads = parse_contact_document(document)
    contacts = [translate_contact(payload) for payload in payloads]
    log.debug("Decoded %d contacts from JSON", len(contacts))
    return contacts


# ---------------------------------------------------------------- domain -> JSON


def build_contact_payload(contact: Contact) -> ContactPayload:
    return ContactPayload(
        name=NamePayload(first=contact.name.first, last=contact.name.last),
        bday=contact.birthday.to_json_repr() if contact.birthday is not None else None,
        phone=[
            PhoneNumberPayload(number=phone.number, type=phone.kind.value)
            for phone in contact.phone_numbers
        ]
        or None,
        email=list(contact.email_addresses) or None,
        address=(
            AddressPayload(
                street=contact.address.street,
                number=contact.address.number,
                locality=contact.address.locality,
                postal_code=contact.address.postal_code,
                country=contact.address.country.alpha2,
            )
            if contact.address is not None
            else None
        ),
    )


def contacts_to_json(contacts: Iterable[Contact], *, pretty: bool = True) -> str:
    payloads = [build_contact_payload(contact) for contact in contacts]
    encoded = ContactDocument.dump_json(
        payloads,
        indent=JSON_INDENT if pretty else None,
        exclude_none=True,
    )
    return encoded.decode("utf-8")


__all__ = [
    "build_contact_payload",
    "contacts_from_json",
    "contacts_to_json",
    "parse_contact_document",
    "translate_contact",
]
