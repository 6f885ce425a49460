"""
Finland – henkilötunnus (DDMMYYCZZZQ).

C is the century sign: ``+`` for the 1800s, ``-`` (or Y, X, W, V, U since
2023) for the 1900s, ``A`` (or B–F) for the 2000s.  ZZZ is 002–899, odd
for men.  Q indexes ``int(DDMMYYZZZ) % 31`` into a 31-character alphabet.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId

CHECK_CHARS = "0123456789ABCDEFHJKLMNPRSTUVWXY"

CENTURY_SIGNS = {
    "+": 1800,
    "-": 1900, "Y": 1900, "X": 1900, "W": 1900, "V": 1900, "U": 1900,
    "A": 2000, "B": 2000, "C": 2000, "D": 2000, "E": 2000, "F": 2000,
}

_PREFERRED_SIGN = {1800: "+", 1900: "-", 2000: "A"}


def check_char(digits: str) -> str:
    return CHECK_CHARS[int(digits) % 31]


class HenkilotunnusScheme:
    country = "FI"
    name = "Finland"
    min_year = 1800
    max_year = 2099

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        serial = rng.randrange(3 if gender is Gender.MALE else 2, 900, 2)
        digits = f"{dob.day:02d}{dob.month:02d}{year % 100:02d}{serial:03d}"
        sign = _PREFERRED_SIGN[year // 100 * 100]
        return f"{digits[:6]}{sign}{digits[6:]}{check_char(digits)}"

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 11 or code[6] not in CENTURY_SIGNS or code[10] not in CHECK_CHARS:
            return None
        digits = code[:6] + code[7:10]
        if not (digits.isascii() and digits.isdigit()):
            return None
        result = ParsedId(
            code=code,
            gender=(Gender.MALE if int(code[9]) % 2 else Gender.FEMALE).label,
            valid=code[10] == check_char(digits),
        )
        year = CENTURY_SIGNS[code[6]] + int(code[4:6])
        result.dob = format_dob(to_date(year, int(code[2:4]), int(code[0:2])))
        return result


SCHEME = HenkilotunnusScheme()
