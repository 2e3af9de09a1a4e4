from __future__ import annotations

from pathlib import Path
from typing import Final

from tactful.domain.model import Contact, Name, PartialDate

DATA_DIR: Final[Path] = Path(__file__).resolve().parents[1] / "data"


def make_contact(
    first: str,
    last: str = "Tester",
    *,
    birthday: PartialDate | None = None,
) -> Contact:
    return Contact(name=Name(first=first, last=last), birthday=birthday)
