"""Application orchestration entry points."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from tactful.adapters.icalendar import events_to_icalendar
from tactful.adapters.jsonstore import ContactStore, contacts_to_json
from tactful.adapters.vcard import contacts_to_vcard
from tactful.config import get_store_config
from tactful.domain.birthdays import Clock, birthday_events, next_birthdays, system_today

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from tactful.domain.model import Contact


log = getLogger(__name__)


class OutputFormat(StrEnum):
    JSON = "json"
    VCARD = "vcard"

    @classmethod
    def parse(cls, value: str) -> OutputFormat:
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Invalid output format: {value}") from exc


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def load_contact_store(store_path: Path | str | None = None) -> ContactStore:
    """Resolve the store location and load its contacts."""

    config = get_store_config(store_path)
    log.debug("Using contact store at %s", config.resolve_store_path())
    return ContactStore.from_path(config.resolve_store_path())


def render_names(contacts: Iterable[Contact]) -> str:
    return _lines(contact.display_name for contact in contacts)


def render_next_birthdays(contacts: Iterable[Contact], *, clock: Clock = system_today) -> str:
    return _lines(
        f"{occurrence} {contact.display_name}"
        for occurrence, contact in next_birthdays(contacts, clock())
    )


def render_birthday_calendar(
    contacts: Iterable[Contact],
    *,
    clock: Clock = system_today,
    now_provider: Callable[[], datetime] = _utcnow,
) -> str:
    events = birthday_events(contacts, clock())
    log.info("Generated %d birthday events", len(events))
    return events_to_icalendar(events, stamp=now_provider())


def render_export(
    contacts: Iterable[Contact],
    output_format: OutputFormat = OutputFormat.VCARD,
    *,
    pretty: bool = True,
) -> str:
    if output_format is OutputFormat.JSON:
        rendered = contacts_to_json(contacts, pretty=pretty)
        return rendered if rendered.endswith("\n") else f"{rendered}\n"
    return contacts_to_vcard(contacts)


__all__ = [
    "OutputFormat",
    "load_contact_store",
    "render_birthday_calendar",
    "render_export",
    "render_names",
    "render_next_birthdays",
]
