"""Birth date and gender helpers shared by the personal-ID schemes."""

from __future__ import annotations

import calendar
import datetime
import random
from enum import Enum
from typing import Optional, Tuple

# Birth years drawn when the caller does not ask for one
DEFAULT_YEARS: Tuple[int, int] = (1940, 2010)


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["Gender"]:
        """``"male"``/``"m"`` → MALE, ``"female"``/``"f"`` → FEMALE, anything else → None."""
        key = (label or "").strip().lower()
        if key in ("male", "m"):
            return cls.MALE
        if key in ("female", "f"):
            return cls.FEMALE
        return None


def pick_gender(wanted: Optional[Gender], rng: random.Random) -> Gender:
    return wanted if wanted is not None else rng.choice((Gender.MALE, Gender.FEMALE))


def pick_year(wanted: Optional[int], min_year: int, max_year: int, rng: random.Random) -> Optional[int]:
    """
    The requested year if the scheme can encode it, else None.
    Without a request, draw from DEFAULT_YEARS clipped to the scheme's range.
    """
    if wanted is not None:
        return wanted if min_year <= wanted <= max_year else None
    lo = max(DEFAULT_YEARS[0], min_year)
    hi = min(DEFAULT_YEARS[1], max_year)
    if lo > hi:
        lo, hi = min_year, max_year
    return rng.randint(lo, hi)


def random_day(year: int, rng: random.Random) -> datetime.date:
    days = 366 if calendar.isleap(year) else 365
    return datetime.date(year, 1, 1) + datetime.timedelta(days=rng.randrange(days))


def to_date(year: int, month: int, day: int) -> Optional[datetime.date]:
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


def format_dob(dob: Optional[datetime.date]) -> Optional[str]:
    return dob.isoformat() if dob else None
