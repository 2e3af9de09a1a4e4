"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Send log records to stderr; stdout only carries rendered contacts.

    ``verbose`` lowers the threshold from INFO to DEBUG.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=force,
    )
