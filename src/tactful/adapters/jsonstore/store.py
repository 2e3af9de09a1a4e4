"""Read-only contact store backed by a JSON file."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from tactful.config.storage import CONTACTS_FILENAME
from tactful.domain.model import Contact, StoreUnavailable

from .translator import contacts_from_json

if TYPE_CHECKING:
    from collections.abc import Iterator


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContactStore:
    """The contacts of a store directory, in file order."""

    contacts: tuple[Contact, ...]

    @classmethod
    def from_path(cls, store_path: Path | str) -> ContactStore:
        """Load ``contacts.json`` from the store directory at ``store_path``."""

        contacts_path = Path(store_path).expanduser() / CONTACTS_FILENAME
        try:
            document = contacts_path.read_bytes()
        except OSError as exc:
            raise StoreUnavailable(f"Failed to open contact store at {contacts_path}") from exc

        contacts = contacts_from_json(document)
        log.info("Loaded %d contacts from %s", len(contacts), contacts_path)
        return cls(contacts=tuple(contacts))

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts)

    def __len__(self) -> int:
        return len(self.contacts)

    def find(self, first: str, last: str) -> Contact | None:
        for contact in self.contacts:
            if contact.name.first == first and contact.name.last == last:
                return contact
        return None


__all__ = ["CONTACTS_FILENAME", "ContactStore"]
