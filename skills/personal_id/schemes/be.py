"""
Belgium – Rijksregisternummer / numéro de registre national (YYMMDDSSSCC).

SSS is odd for men.  CC is 97 minus the first nine digits modulo 97; for
births from 2000 on, a 2 is prefixed to those digits first, so the
century is recovered by trying both.  A code whose check number fits
neither century is read as a 1900s birth date.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId


def check_number(digits: str, century: int) -> int:
    base = int(digits) + (2_000_000_000 if century == 2000 else 0)
    return 97 - base % 97


class NationalNumberScheme:
    country = "BE"
    name = "Belgium"
    min_year = 1900
    max_year = 2099

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        serial = rng.randrange(1 if gender is Gender.MALE else 2, 998, 2)
        digits = f"{dob:%y%m%d}{serial:03d}"
        return f"{digits}{check_number(digits, year // 100 * 100):02d}"

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 11 or not (code.isascii() and code.isdigit()):
            return None
        digits, check = code[:9], int(code[9:])
        result = ParsedId(
            code=code,
            gender=(Gender.MALE if int(code[6:9]) % 2 else Gender.FEMALE).label,
        )
        century = next((c for c in (1900, 2000) if check == check_number(digits, c)), None)
        result.valid = century is not None
        dob = to_date((century or 1900) + int(code[0:2]), int(code[2:4]), int(code[4:6]))
        result.dob = format_dob(dob)
        return result


SCHEME = NationalNumberScheme()
