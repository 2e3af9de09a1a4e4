"""Translate birthday events into an iCalendar stream."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final
from uuid import NAMESPACE_URL, uuid5

import vobject
from vobject.icalendar import utc

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from vobject.base import Component

    from tactful.domain.birthdays import BirthdayEvent


log = getLogger(__name__)

PRODID: Final[str] = "-//tactful//Birthday Calendar//EN"
YEARLY_RULE: Final[str] = "FREQ=YEARLY"


def event_uid(event: BirthdayEvent) -> str:
    """Stable UID so re-imports update events instead of duplicating them."""

    key = f"tactful:birthday:{event.contact.display_name}:{event.date.isoformat()}"
    return f"{uuid5(NAMESPACE_URL, key)}@tactful"


def _add_event(calendar: Component, event: BirthdayEvent, stamp: datetime) -> None:
    vevent = calendar.add("vevent")
    vevent.add("uid").value = event_uid(event)
    vevent.add("dtstamp").value = stamp
    vevent.add("dtstart").value = event.date
    vevent.add("summary").value = event.summary
    vevent.add("transp").value = "TRANSPARENT"
    if event.recurring:
        vevent.add("rrule").value = YEARLY_RULE


def events_to_icalendar(events: Iterable[BirthdayEvent], *, stamp: datetime) -> str:
    """Render all-day events into a single ``VCALENDAR``.

    ``stamp`` must be timezone aware; it becomes the ``DTSTAMP`` of every event.
    """

    if stamp.tzinfo is None:
        raise ValueError("Calendar stamp must include timezone information")
    utc_stamp = stamp.astimezone(utc)

    calendar = vobject.iCalendar()
    calendar.add("prodid").value = PRODID
    count = 0
    for event in events:
        _add_event(calendar, event, utc_stamp)
        count += 1
    log.debug("Serialised %d birthday events to iCalendar", count)
    return calendar.serialize()


__all__ = ["PRODID", "event_uid", "events_to_icalendar"]
