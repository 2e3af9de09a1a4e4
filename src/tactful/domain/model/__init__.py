"""Public domain model surface."""

from __future__ import annotations

from tactful.domain.model.contact import Address, Contact, Name, PhoneNumber
from tactful.domain.model.countries import (
    COUNTRY_NAMES,
    Country,
    CountryCode,
    country_from_alpha2,
)
from tactful.domain.model.enums import PhoneNumberType
from tactful.domain.model.errors import (
    ContactDecodeError,
    ContactEncodeError,
    ContactError,
    InvalidDate,
    InvalidPhoneNumber,
    LineEncodingError,
    MalformedDocument,
    StoreUnavailable,
    TactfulError,
    UnknownCountryCode,
    UnrepresentableDate,
)
from tactful.domain.model.primitives import PartialDate, is_leap_year, max_days_in_month

__all__ = [  # noqa: RUF022
    # contact
    "Address",
    "Contact",
    "Name",
    "PhoneNumber",
    "PhoneNumberType",
    # primitives
    "PartialDate",
    "is_leap_year",
    "max_days_in_month",
    # countries
    "COUNTRY_NAMES",
    "Country",
    "CountryCode",
    "country_from_alpha2",
    # errors
    "ContactDecodeError",
    "ContactEncodeError",
    "ContactError",
    "InvalidDate",
    "InvalidPhoneNumber",
    "LineEncodingError",
    "MalformedDocument",
    "StoreUnavailable",
    "TactfulError",
    "UnknownCountryCode",
    "UnrepresentableDate",
]
