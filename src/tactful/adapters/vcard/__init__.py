"""vCard 4.0 export adapter package."""

from __future__ import annotations

from .contentline import ensure_line_value, escape_component, render_contentline
from .translator import contact_to_contentlines, contacts_to_vcard

__all__ = [
    "contact_to_contentlines",
    "contacts_to_vcard",
    "ensure_line_value",
    "escape_component",
    "render_contentline",
]
