"""
Capability contract of a personal-ID scheme.

A scheme is any object exposing ``country``, ``name``, ``min_year``,
``max_year``, ``generate(options, rng)`` and ``parse(code)``.  Schemes do not
share a base class; each country module stands on its own.

``generate`` returns None when the constraints cannot be encoded (for
example a birth year outside the century range of the format).  ``parse``
returns None only when the code cannot be split into the fixed layout;
otherwise ``valid`` reports the checksum alone and gender/date are decoded
regardless of it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol

from skills.personal_id.date import Gender


@dataclass(frozen=True)
class GenOptions:
    gender: Optional[Gender] = None
    year: Optional[int] = None


@dataclass
class ParsedId:
    code: str
    gender: Optional[str] = None
    dob: Optional[str] = None  # YYYY-MM-DD
    valid: bool = False


class Scheme(Protocol):
    country: str
    name: str
    min_year: int
    max_year: int

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        ...

    def parse(self, code: str) -> Optional[ParsedId]:
        ...
