from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tactful.adapters.jsonstore import ContactStore
from tactful.domain.model import ContactDecodeError, PartialDate, StoreUnavailable

if TYPE_CHECKING:
    from pathlib import Path


def test_store_loads_contacts_in_file_order(sample_store: Path) -> None:
    store = ContactStore.from_path(sample_store)

    assert len(store) == 5
    assert [contact.display_name for contact in store] == [
        "Ada Lovelace",
        "Grace Hopper",
        "Alan Turing",
        "Leap Day",
        "No Birthday",
    ]


def test_store_find_is_linear_lookup_by_name(sample_store: Path) -> None:
    store = ContactStore.from_path(sample_store)

    grace = store.find("Grace", "Hopper")

    assert grace is not None
    assert grace.birthday == PartialDate(None, 12, 9)
    assert store.find("Grace", "Kelly") is None


def test_store_accepts_string_paths(sample_store: Path) -> None:
    store = ContactStore.from_path(str(sample_store))

    assert store.contacts[0].address is not None
    assert store.contacts[0].address.country.alpha2 == "GB"


def test_missing_store_raises_store_unavailable(tmp_path: Path) -> None:
    with pytest.raises(StoreUnavailable, match="contacts.json") as excinfo:
        ContactStore.from_path(tmp_path / "nowhere")

    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_invalid_contact_aborts_loading(tmp_path: Path) -> None:
    (tmp_path / "contacts.json").write_text(
        '[{"name": {"first": "Bad", "last": "Phone"}, '
        '"phone": [{"number": "abc", "type": "home"}]}]',
        encoding="utf-8",
    )

    with pytest.raises(ContactDecodeError, match="Bad Phone"):
        ContactStore.from_path(tmp_path)
