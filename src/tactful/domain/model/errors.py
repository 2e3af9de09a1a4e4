"""Domain error definitions.

Every failure raised while loading or rendering contacts derives from
``TactfulError``. Value-level errors double as ``ValueError`` so callers that
only care about "bad input" can catch the builtin.
"""

from __future__ import annotations


class TactfulError(Exception):
    """Base class for all errors raised by tactful."""


class InvalidDate(TactfulError, ValueError):
    """Raised when a partial date is out of range or cannot be parsed."""


class UnrepresentableDate(TactfulError, ValueError):
    """Raised when a valid partial date has no vCard 4.0 encoding."""


class InvalidPhoneNumber(TactfulError, ValueError):
    """Raised when a phone number is empty or contains non-digit characters."""


class UnknownCountryCode(TactfulError, ValueError):
    """Raised when a country code is not an ISO 3166-1 alpha-2 code."""


class LineEncodingError(TactfulError, ValueError):
    """Raised when a value cannot be placed on a vCard content line."""


class MalformedDocument(TactfulError, ValueError):
    """Raised when a contact document does not have the expected structure."""


class StoreUnavailable(TactfulError, OSError):
    """Raised when the contact store cannot be opened or read."""


class ContactError(TactfulError):
    """A failure attributed to a single contact.

    The underlying cause is chained via ``raise ... from``.
    """

    def __init__(self, display_name: str, message: str) -> None:
        super().__init__(message)
        self.display_name = display_name


class ContactDecodeError(ContactError):
    """Raised when a stored contact cannot be turned into a domain object."""

    def __init__(self, display_name: str) -> None:
        super().__init__(display_name, f"Failed to decode contact '{display_name}'")


class ContactEncodeError(ContactError):
    """Raised when a contact cannot be serialised to an output format."""

    def __init__(self, display_name: str, format_name: str) -> None:
        super().__init__(
            display_name, f"Failed to serialise contact '{display_name}' to {format_name}"
        )
        self.format_name = format_name


__all__ = [
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
