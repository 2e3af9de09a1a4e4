"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PhoneNumberType(StrEnum):
    MOBILE = "mobile"
    HOME = "home"
    WORK = "work"
