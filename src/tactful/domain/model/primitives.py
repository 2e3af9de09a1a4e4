"""Domain primitives: partial dates and their textual encodings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from tactful.domain.model.errors import InvalidDate, UnrepresentableDate

if TYPE_CHECKING:
    from datetime import date

MAX_YEAR: Final[int] = 0xFFFF
MAX_VCARD_YEAR: Final[int] = 9999

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def max_days_in_month(month: int, year: int | None = None) -> int:
    """Return the number of days in ``month``.

    February has 29 days when the year is unknown so that a birthday on the
    29th stays representable.
    """

    if not 1 <= month <= 12:
        raise InvalidDate(f"Invalid month {month}")
    if month == 2 and (year is None or is_leap_year(year)):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, slots=True)
class PartialDate:
    """A calendar date where any of year, month and day may be unknown.

    Instances are validated on construction; holding a ``PartialDate`` means
    holding a valid one.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_date(cls, value: date) -> PartialDate:
        return cls(year=value.year, month=value.month, day=value.day)

    def validate(self) -> None:
        if self.year is not None and not 0 <= self.year <= MAX_YEAR:
            raise InvalidDate(f"Invalid year {self.year}")
        if self.month is not None and not 1 <= self.month <= 12:
            raise InvalidDate(f"Invalid month {self.month}")
        if self.day is not None:
            limit = max_days_in_month(self.month, self.year) if self.month is not None else 31
            if not 1 <= self.day <= limit:
                raise InvalidDate(f"Invalid day {self.day} for month {self.month}")

    # ------------------------------------------------------------------ JSON

    def to_json_repr(self) -> str:
        """Render as ``YYYY-MM-DD`` with empty slots for unknown components.

        The two separators are always present, e.g. ``-03-09`` or ``1990--``.
        """

        year = "" if self.year is None else str(self.year)
        month = "" if self.month is None else f"{self.month:02}"
        day = "" if self.day is None else f"{self.day:02}"
        return f"{year}-{month}-{day}"

    @classmethod
    def from_json_repr(cls, text: str) -> PartialDate:
        components = text.split("-")
        if len(components) != 3:
            raise InvalidDate(
                f"Expected 3 '-'-separated components in date {text!r}, got {len(components)}"
            )
        year, month, day = (_parse_component(component, text) for component in components)
        return cls(year=year, month=month, day=day)

    # ----------------------------------------------------------------- vCard

    def to_vcard_repr(self) -> str:
        """Render using the reduced-accuracy forms vCard 4.0 allows for BDAY."""

        year, month, day = self.year, self.month, self.day
        if year is not None and year > MAX_VCARD_YEAR:
            raise UnrepresentableDate(f"Year {year} does not fit into four digits")

        if year is None:
            if month is None and day is not None:
                return f"---{day:02}"
            if month is not None and day is None:
                return f"--{month:02}"
            if month is not None and day is not None:
                return f"--{month:02}{day:02}"
        elif month is not None:
            if day is None:
                return f"{year:04}-{month:02}"
            return f"{year:04}{month:02}{day:02}"
        elif day is None:
            return f"{year:04}"

        raise UnrepresentableDate(
            f"Date {self.to_json_repr()!r} cannot be represented in vCard 4.0"
        )


def _parse_component(component: str, text: str) -> int | None:
    if not component:
        return None
    # str.isdigit accepts non-ASCII digits; only plain decimals are allowed here
    if not (component.isascii() and component.isdigit()):
        raise InvalidDate(f"Invalid date component {component!r} in {text!r}")
    value = int(component)
    if value > MAX_YEAR:
        raise InvalidDate(f"Date component {component!r} in {text!r} is out of range")
    return value


__all__ = ["MAX_VCARD_YEAR", "MAX_YEAR", "PartialDate", "is_leap_year", "max_days_in_month"]
