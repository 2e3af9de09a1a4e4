"""iCalendar export adapter package."""

from __future__ import annotations

from .translator import PRODID, event_uid, events_to_icalendar

__all__ = ["PRODID", "event_uid", "events_to_icalendar"]
