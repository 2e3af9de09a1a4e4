"""Rendering of single vCard content lines.

Lines are serialised by :class:`vobject.base.ContentLine` without a behavior,
which writes ``NAME;PARAM=value:value`` folded at 75 octets and terminated by
CRLF. vobject does not reject control characters, so values are checked here
first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from vobject.base import ContentLine

from tactful.domain.model import LineEncodingError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

LINE_LENGTH: Final[int] = 75

_TAB: Final[str] = "\t"
_COMPONENT_ESCAPES: Final[dict[int, str]] = str.maketrans(
    {"\\": "\\\\", ",": "\\,", ";": "\\;"}
)


def _is_control(char: str) -> bool:
    return (char < " " and char != _TAB) or char == "\x7f"


def ensure_line_value(value: str) -> str:
    """Return ``value`` unchanged, or raise if it cannot appear on a content line."""

    for position, char in enumerate(value):
        if _is_control(char):
            raise LineEncodingError(
                f"Value {value!r} contains control character {char!r} at position {position}"
            )
    return value


def escape_component(value: str) -> str:
    """Escape a component of a structured value (``N``, ``ADR``)."""

    return ensure_line_value(value).translate(_COMPONENT_ESCAPES)


def structured_value(components: Iterable[str]) -> str:
    return ";".join(escape_component(component) for component in components)


def render_contentline(
    name: str,
    value: str,
    params: Sequence[tuple[str, str]] = (),
) -> str:
    line = ContentLine(name, [list(param) for param in params], ensure_line_value(value))
    return line.serialize(lineLength=LINE_LENGTH)


__all__ = [
    "LINE_LENGTH",
    "ensure_line_value",
    "escape_component",
    "render_contentline",
    "structured_value",
]
