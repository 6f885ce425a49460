"""
Poland – PESEL (YYMMDDZZZGC).

The century is folded into the month: +80 for the 1800s, +0 for the
1900s, +20/+40/+60 for the 2000s, 2100s and 2200s.  G is odd for men.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId
from utils.checksum import weighted_sum

WEIGHTS = (1, 3, 7, 9, 1, 3, 7, 9, 1, 3)

# century start -> month offset
MONTH_OFFSETS = {1800: 80, 1900: 0, 2000: 20, 2100: 40, 2200: 60}


def check_digit(digits: str) -> int:
    return (10 - weighted_sum(digits, WEIGHTS) % 10) % 10


class PeselScheme:
    country = "PL"
    name = "Poland"
    min_year = 1800
    max_year = 2299

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        month = dob.month + MONTH_OFFSETS[year // 100 * 100]
        sex = rng.choice((1, 3, 5, 7, 9) if gender is Gender.MALE else (0, 2, 4, 6, 8))
        body = f"{year % 100:02d}{month:02d}{dob.day:02d}{rng.randint(0, 999):03d}{sex}"
        return body + str(check_digit(body))

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 11 or not (code.isascii() and code.isdigit()):
            return None
        result = ParsedId(
            code=code,
            gender=(Gender.MALE if int(code[9]) % 2 else Gender.FEMALE).label,
            valid=int(code[10]) == check_digit(code[:10]),
        )
        month = int(code[2:4])
        for century, offset in MONTH_OFFSETS.items():
            if 1 <= month - offset <= 12:
                dob = to_date(century + int(code[0:2]), month - offset, int(code[4:6]))
                result.dob = format_dob(dob)
                break
        return result


SCHEME = PeselScheme()
