"""
Bulgaria – EGN (YYMMDDSSGC).

Month +20 marks the 1800s, +40 the 2000s.  The ninth digit is even for
men and odd for women.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId
from utils.checksum import weighted_sum

WEIGHTS = (2, 4, 8, 5, 10, 9, 7, 3, 6)

MONTH_OFFSETS = {1800: 20, 1900: 0, 2000: 40}


def check_digit(digits: str) -> int:
    return weighted_sum(digits, WEIGHTS) % 11 % 10


class EgnScheme:
    country = "BG"
    name = "Bulgaria"
    min_year = 1800
    max_year = 2099

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        month = dob.month + MONTH_OFFSETS[year // 100 * 100]
        sex = rng.choice((0, 2, 4, 6, 8) if gender is Gender.MALE else (1, 3, 5, 7, 9))
        body = f"{year % 100:02d}{month:02d}{dob.day:02d}{rng.randint(0, 99):02d}{sex}"
        return body + str(check_digit(body))

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 10 or not (code.isascii() and code.isdigit()):
            return None
        result = ParsedId(
            code=code,
            gender=(Gender.FEMALE if int(code[8]) % 2 else Gender.MALE).label,
            valid=int(code[9]) == check_digit(code[:9]),
        )
        month = int(code[2:4])
        for century, offset in MONTH_OFFSETS.items():
            if 1 <= month - offset <= 12:
                dob = to_date(century + int(code[0:2]), month - offset, int(code[4:6]))
                result.dob = format_dob(dob)
                break
        return result


SCHEME = EgnScheme()
