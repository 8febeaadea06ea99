"""Presidential terms used for background shading."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class Term:
    """A date-bounded administration period."""

    president: str
    start: datetime
    end: datetime

    @property
    def label(self) -> str:
        return self.president


# Each term runs from February 1 to January 31, so consecutive terms are contiguous.
TERMS: Tuple[Term, ...] = (
    Term("Clinton", datetime(2000, 2, 1), datetime(2001, 1, 31)),
    Term("Bush", datetime(2001, 2, 1), datetime(2009, 1, 31)),
    Term("Obama", datetime(2009, 2, 1), datetime(2017, 1, 31)),
    Term("Trump", datetime(2017, 2, 1), datetime(2021, 1, 31)),
)

__all__ = ["TERMS", "Term"]
