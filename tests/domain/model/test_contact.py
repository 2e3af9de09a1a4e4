from __future__ import annotations

import pytest

from tactful.domain.model import (
    COUNTRY_NAMES,
    Contact,
    Country,
    InvalidPhoneNumber,
    Name,
    PhoneNumber,
    PhoneNumberType,
    UnknownCountryCode,
    country_from_alpha2,
)


@pytest.mark.parametrize("number", ["+1 555 123", "0301234567", " 0 3 0 ", "+", "7"])
def test_phone_number_accepts_digits_with_optional_plus(number: str) -> None:
    phone = PhoneNumber(number, PhoneNumberType.HOME)

    assert phone.number == number


@pytest.mark.parametrize("number", ["", "   ", "555-123", "abc", "1+2", "++1", "(030) 123", "١٢٣"])
def test_phone_number_rejects_invalid_numbers(number: str) -> None:
    with pytest.raises(InvalidPhoneNumber):
        PhoneNumber(number, PhoneNumberType.MOBILE)


def test_phone_number_digits_strip_all_whitespace() -> None:
    phone = PhoneNumber("+49 30\t1234 567")

    assert phone.digits == "+49301234567"
    assert phone.kind is PhoneNumberType.MOBILE


def test_country_lookup_is_case_insensitive() -> None:
    country = country_from_alpha2("de")

    assert country == Country(alpha2="DE", name="Germany")


def test_country_lookup_rejects_unknown_codes() -> None:
    with pytest.raises(UnknownCountryCode):
        country_from_alpha2("XX")
    with pytest.raises(UnknownCountryCode):
        country_from_alpha2("DEU")


def test_country_table_covers_every_alpha2_code() -> None:
    assert len(COUNTRY_NAMES) == 249
    assert all(len(code) == 2 and code.isupper() for code in COUNTRY_NAMES)


def test_country_rejects_mismatched_name() -> None:
    with pytest.raises(UnknownCountryCode):
        Country(alpha2="DE", name="France")


def test_contact_defaults_and_display_name() -> None:
    contact = Contact(name=Name(first="Ada", last="Lovelace"))

    assert contact.display_name == "Ada Lovelace"
    assert contact.birthday is None
    assert contact.phone_numbers == ()
    assert contact.email_addresses == ()
    assert contact.address is None


def test_contact_stores_sequences_as_tuples() -> None:
    contact = Contact(
        name=Name(first="Ada", last="Lovelace"),
        email_addresses=["ada@example.org"],  # type: ignore[arg-type]
    )

    assert contact.email_addresses == ("ada@example.org",)
