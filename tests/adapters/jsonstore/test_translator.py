"""Translator tests for the JSON contact document."""

from __future__ import annotations

import json

import pytest

from tactful.adapters.jsonstore import contacts_from_json, contacts_to_json
from tactful.domain.model import (
    Contact,
    ContactDecodeError,
    InvalidDate,
    InvalidPhoneNumber,
    MalformedDocument,
    Name,
    PartialDate,
    PhoneNumberType,
    UnknownCountryCode,
)


def test_round_trip_preserves_contacts_and_order(
    full_contact: Contact, bare_contact: Contact
) -> None:
    contacts = [full_contact, bare_contact]

    pretty = contacts_from_json(contacts_to_json(contacts))
    compact = contacts_from_json(contacts_to_json(contacts, pretty=False))

    assert pretty == contacts
    assert compact == contacts


def test_encoding_omits_absent_and_empty_fields(bare_contact: Contact) -> None:
    document = json.loads(contacts_to_json([bare_contact]))

    assert document == [{"name": {"first": "John", "last": "Roe"}}]


def test_encoding_writes_all_fields(full_contact: Contact) -> None:
    (document,) = json.loads(contacts_to_json([full_contact]))

    assert document == {
        "name": {"first": "Jane", "last": "Doe"},
        "bday": "1990-05-17",
        "phone": [
            {"number": "+1 555 123", "type": "mobile"},
            {"number": "030 1234567", "type": "work"},
        ],
        "email": ["jane@example.com"],
        "address": {
            "street": "Main Street",
            "number": "5",
            "locality": "Springfield",
            "postal_code": "12345",
            "country": "US",
        },
    }


def test_compact_and_pretty_layout(bare_contact: Contact) -> None:
    compact = contacts_to_json([bare_contact], pretty=False)
    pretty = contacts_to_json([bare_contact])

    assert compact == '[{"name":{"first":"John","last":"Roe"}}]'
    assert pretty.startswith("[\n  {")


def test_decoding_tolerates_missing_optional_fields() -> None:
    contacts = contacts_from_json(
        '[{"name": {"first": "A", "last": "B"}, "phone": null, "bday": "--"}]'
    )

    assert contacts == [Contact(name=Name(first="A", last="B"), birthday=PartialDate())]


def test_decoding_maps_phone_types_and_partial_dates() -> None:
    (contact,) = contacts_from_json(
        """[{"name": {"first": "A", "last": "B"},
             "bday": "-03-09",
             "phone": [{"number": "+49 30 1", "type": "home"}],
             "extra": "ignored"}]"""
    )

    assert contact.birthday == PartialDate(None, 3, 9)
    assert contact.phone_numbers[0].kind is PhoneNumberType.HOME
    assert contact.phone_numbers[0].number == "+49 30 1"


def test_decoding_resolves_country_codes() -> None:
    (contact,) = contacts_from_json(
        """[{"name": {"first": "A", "last": "B"},
             "address": {"street": "Rue", "number": "1", "locality": "Paris",
                         "postal_code": "75001", "country": "FR"}}]"""
    )

    assert contact.address is not None
    assert contact.address.country.name == "France"


@pytest.mark.parametrize(
    ("entry", "cause"),
    [
        ('"bday": "1990-13-01"', InvalidDate),
        ('"bday": "1990-01"', InvalidDate),
        ('"phone": [{"number": "555-123", "type": "work"}]', InvalidPhoneNumber),
        (
            '"address": {"street": "s", "number": "1", "locality": "l",'
            ' "postal_code": "p", "country": "XX"}',
            UnknownCountryCode,
        ),
    ],
)
def test_decoding_errors_name_the_contact(entry: str, cause: type[Exception]) -> None:
    document = f'[{{"name": {{"first": "Broken", "last": "Record"}}, {entry}}}]'

    with pytest.raises(ContactDecodeError, match="Broken Record") as excinfo:
        contacts_from_json(document)

    assert isinstance(excinfo.value.__cause__, cause)
    assert excinfo.value.display_name == "Broken Record"


@pytest.mark.parametrize(
    "document",
    [
        "not json",
        '{"name": {"first": "A", "last": "B"}}',
        '[{"bday": "--"}]',
        '[{"name": {"first": "A", "last": "B"}, "phone": [{"number": "1", "type": "fax"}]}]',
        '[{"name": {"first": "A", "last": "B"}, "email": "a@example.com"}]',
    ],
)
def test_structural_errors_raise_malformed_document(document: str) -> None:
    with pytest.raises(MalformedDocument):
        contacts_from_json(document)


def test_first_invalid_contact_aborts_decoding() -> None:
    document = """[
        {"name": {"first": "Good", "last": "One"}},
        {"name": {"first": "Bad", "last": "One"}, "bday": "x--"},
        {"name": {"first": "Good", "last": "Two"}}
    ]"""

    with pytest.raises(ContactDecodeError, match="Bad One"):
        contacts_from_json(document)
