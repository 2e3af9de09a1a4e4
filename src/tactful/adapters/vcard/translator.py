"""Translate domain contacts into vCard 4.0 content lines."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from tactful.domain.model import ContactEncodeError, PhoneNumberType, TactfulError

from .contentline import render_contentline, structured_value

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tactful.domain.model import Address, Contact


log = getLogger(__name__)

VCARD_VERSION: Final[str] = "4.0"

TEL_TYPES: Final[dict[PhoneNumberType, str]] = {
    PhoneNumberType.MOBILE: "cell",
    PhoneNumberType.HOME: "home",
    PhoneNumberType.WORK: "work",
}


def _address_value(address: Address) -> str:
    return structured_value(
        (
            "",
            "",
            f"{address.street} {address.number}",
            address.locality,
            "",
            address.postal_code,
            address.country.name,
        )
    )


def contact_to_contentlines(contact: Contact) -> list[str]:
    """Render one contact as serialised content lines in a fixed property order."""

    name = structured_value((contact.name.last, contact.name.first, "", "", ""))
    lines = [
        render_contentline("BEGIN", "VCARD"),
        render_contentline("VERSION", VCARD_VERSION),
        render_contentline("N", name),
    ]
    lines.extend(
        render_contentline(
            "TEL",
            f"tel:{phone.digits}",
            params=(("VALUE", "uri"), ("TYPE", TEL_TYPES[phone.kind])),
        )
        for phone in contact.phone_numbers
    )
    lines.extend(render_contentline("EMAIL", email) for email in contact.email_addresses)
    if contact.address is not None:
        lines.append(render_contentline("ADR", _address_value(contact.address)))
    if contact.birthday is not None:
        lines.append(render_contentline("BDAY", contact.birthday.to_vcard_repr()))
    lines.append(render_contentline("END", "VCARD"))
    return lines


def contacts_to_vcard(contacts: Iterable[Contact]) -> str:
    """Serialise all contacts; a single failing contact aborts the export."""

    rendered: list[str] = []
    count = 0
    for contact in contacts:
        try:
            rendered.extend(contact_to_contentlines(contact))
        except TactfulError as exc:
            raise ContactEncodeError(contact.display_name, "vCard") from exc
        count += 1
    log.debug("Serialised %d contacts to vCard", count)
    return "".join(rendered)


__all__ = ["TEL_TYPES", "VCARD_VERSION", "contact_to_contentlines", "contacts_to_vcard"]
