"""Contact aggregate and its value objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from tactful.domain.model.countries import Country  # noqa: TC001
from tactful.domain.model.enums import PhoneNumberType
from tactful.domain.model.errors import InvalidPhoneNumber
from tactful.domain.model.primitives import PartialDate  # noqa: TC001


def strip_whitespace(value: str) -> str:
    return "".join(value.split())


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    """A phone number as entered by the user.

    ``number`` keeps the original spelling (including spaces); validation runs on
    the whitespace-free form, which must be an optional leading ``+`` followed
    by ASCII digits.
    """

    number: str
    kind: PhoneNumberType = PhoneNumberType.MOBILE

    def __post_init__(self) -> None:
        digits = self.digits
        if not digits:
            raise InvalidPhoneNumber("Phone number is empty")
        head, tail = digits[0], digits[1:]
        if not (head == "+" or _is_ascii_digits(head)):
            raise InvalidPhoneNumber(
                f"Phone number {self.number!r} must start with a digit or '+'"
            )
        if tail and not _is_ascii_digits(tail):
            raise InvalidPhoneNumber(f"Phone number {self.number!r} contains non-digit characters")

    @property
    def digits(self) -> str:
        return strip_whitespace(self.number)


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


@dataclass(frozen=True, slots=True)
class Name:
    first: str
    last: str

    @property
    def display_name(self) -> str:
        return f"{self.first} {self.last}"


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    number: str
    locality: str
    postal_code: str
    country: Country


@dataclass(frozen=True, kw_only=True)
class Contact:
    name: Name
    birthday: PartialDate | None = None
    phone_numbers: tuple[PhoneNumber, ...] = field(default_factory=tuple)
    email_addresses: tuple[str, ...] = field(default_factory=tuple)
    address: Address | None = None

    def __post_init__(self) -> None:
        # accept any sequence, store immutably
        object.__setattr__(self, "phone_numbers", tuple(self.phone_numbers))
        object.__setattr__(self, "email_addresses", tuple(self.email_addresses))

    @property
    def display_name(self) -> str:
        return self.name.display_name


__all__ = ["Address", "Contact", "Name", "PhoneNumber", "strip_whitespace"]
