"""JSON contact document adapter package."""

from __future__ import annotations

from .schema import ContactDocument, ContactPayload
from .store import CONTACTS_FILENAME, ContactStore
from .translator import (
    build_contact_payload,
    contacts_from_json,
    contacts_to_json,
    translate_contact,
)

__all__ = [
    "CONTACTS_FILENAME",
    "ContactDocument",
    "ContactPayload",
    "ContactStore",
    "build_contact_payload",
    "contacts_from_json",
    "contacts_to_json",
    "translate_contact",
]
