"""Project partial birth dates onto upcoming calendar dates and events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Final, NamedTuple, Protocol

from tactful.domain.model import is_leap_year, max_days_in_month

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tactful.domain.model import Contact, PartialDate

CALENDAR_YEARS_AHEAD: Final[int] = 10


class Clock(Protocol):
    def __call__(self) -> date: ...


def system_today() -> date:
    return date.today()


class ProjectedDate(NamedTuple):
    """A projected birthday occurrence.

    Not validated: a 29 February birthday projected onto a non-leap year is
    kept as is and shows up as ``YYYY-02-29``.
    """

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04}-{self.month:02}-{self.day:02}"


def project_next_birthday(birthday: PartialDate, today: date) -> ProjectedDate | None:
    """Return the next occurrence of ``birthday`` on or after ``today``.

    Returns ``None`` when month or day of the birthday are unknown.
    """

    if birthday.month is None or birthday.day is None:
        return None
    year = today.year
    if (birthday.month, birthday.day) < (today.month, today.day):
        year += 1
    return ProjectedDate(year, birthday.month, birthday.day)


def next_birthdays(
    contacts: Iterable[Contact], today: date
) -> list[tuple[ProjectedDate, Contact]]:
    """List the next birthday of every contact, in chronological order.

    Contacts without a known birth month and day are left out. Contacts sharing
    a date keep their input order.
    """

    projected: list[tuple[ProjectedDate, Contact]] = []
    for contact in contacts:
        if contact.birthday is None:
            continue
        occurrence = project_next_birthday(contact.birthday, today)
        if occurrence is not None:
            projected.append((occurrence, contact))
    projected.sort(key=lambda item: item[0])
    return projected


@dataclass(frozen=True, slots=True)
class BirthdayEvent:
    contact: Contact
    date: date
    age: int | None = None
    recurring: bool = False

    @property
    def summary(self) -> str:
        if self.age is None:
            return f"{self.contact.display_name}'s birthday"
        return f"{self.contact.display_name}'s {_ordinal(self.age)} birthday"


def _ordinal(value: int) -> str:
    if 10 <= value % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
    return f"{value}{suffix}"


def _occurs_in(year: int, month: int, day: int) -> bool:
    return day <= max_days_in_month(month, year)


def contact_birthday_events(contact: Contact, today: date) -> list[BirthdayEvent]:
    """Build the calendar events for a single contact.

    With a known birth year every birthday from birth (age 0) up to
    ``today.year + CALENDAR_YEARS_AHEAD`` becomes its own event; years in which
    the date does not exist are skipped. Without a birth year a single event,
    recurring yearly from last year's occurrence, is returned.
    """

    birthday = contact.birthday
    if birthday is None or birthday.month is None or birthday.day is None:
        return []
    month, day = birthday.month, birthday.day

    if birthday.year is None:
        anchor = today.year - 1
        if month == 2 and day == 29:
            while not is_leap_year(anchor):
                anchor -= 1
        return [BirthdayEvent(contact=contact, date=date(anchor, month, day), recurring=True)]

    last_year = today.year + CALENDAR_YEARS_AHEAD
    return [
        BirthdayEvent(contact=contact, date=date(year, month, day), age=year - birthday.year)
        for year in range(max(birthday.year, 1), last_year + 1)
        if _occurs_in(year, month, day)
    ]


def birthday_events(contacts: Iterable[Contact], today: date) -> list[BirthdayEvent]:
    events: list[BirthdayEvent] = []
    for contact in contacts:
        events.extend(contact_birthday_events(contact, today))
    return events


__all__ = [
    "CALENDAR_YEARS_AHEAD",
    "BirthdayEvent",
    "Clock",
    "ProjectedDate",
    "birthday_events",
    "contact_birthday_events",
    "next_birthdays",
    "project_next_birthday",
    "system_today",
]
