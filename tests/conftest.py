from __future__ import annotations

import shutil
from datetime import date
from typing import TYPE_CHECKING

import pytest

from tactful.domain.model import (
    Address,
    Contact,
    Name,
    PartialDate,
    PhoneNumber,
    PhoneNumberType,
    country_from_alpha2,
)
from tests.helpers.contacts import DATA_DIR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_store(tmp_path: Path) -> Path:
    """A store directory holding a copy of ``tests/data/contacts.json``."""

    store = tmp_path / "store"
    store.mkdir()
    shutil.copy(DATA_DIR / "contacts.json", store / "contacts.json")
    return store


@pytest.fixture
def full_contact() -> Contact:
    return Contact(
        name=Name(first="Jane", last="Doe"),
        birthday=PartialDate(year=1990, month=5, day=17),
        phone_numbers=(
            PhoneNumber("+1 555 123", PhoneNumberType.MOBILE),
            PhoneNumber("030 1234567", PhoneNumberType.WORK),
        ),
        email_addresses=("jane@example.com",),
        address=Address(
            street="Main Street",
            number="5",
            locality="Springfield",
            postal_code="12345",
            country=country_from_alpha2("US"),
        ),
    )


@pytest.fixture
def bare_contact() -> Contact:
    return Contact(name=Name(first="John", last="Roe"))


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 6, 1)
