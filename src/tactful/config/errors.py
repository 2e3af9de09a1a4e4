"""Configuration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(RuntimeError):
    """Raised when the config file or one of its values is unusable.

    ``source`` is the config file the problem was found in, if any.
    """

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        super().__init__(message)
        self.source = source
