"""
Estonia – isikukood (GYYMMDDSSSC).

G folds century and gender: 1/2 = 1800s, 3/4 = 1900s, 5/6 = 2000s,
7/8 = 2100s; odd is male.  SSS is the serial, C the check digit computed
with two weight rounds modulo 11.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId
from utils.checksum import weighted_sum

FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


def check_digit(digits: str) -> int:
    """Check digit of the first ten digits."""
    rem = weighted_sum(digits, FIRST_WEIGHTS) % 11
    if rem == 10:
        rem = weighted_sum(digits, SECOND_WEIGHTS) % 11
        if rem == 10:
            rem = 0
    return rem


class IsikukoodScheme:
    country = "EE"
    name = "Estonia"
    min_year = 1800
    max_year = 2199

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        lead = 2 * ((year - 1800) // 100) + (1 if gender is Gender.MALE else 2)
        body = f"{lead}{dob:%y%m%d}{rng.randint(1, 999):03d}"
        return body + str(check_digit(body))

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 11 or not (code.isascii() and code.isdigit()):
            return None
        result = ParsedId(code=code, valid=int(code[10]) == check_digit(code[:10]))
        lead = int(code[0])
        if 1 <= lead <= 8:
            result.gender = (Gender.MALE if lead % 2 else Gender.FEMALE).label
            year = 1800 + 100 * ((lead - 1) // 2) + int(code[1:3])
            result.dob = format_dob(to_date(year, int(code[3:5]), int(code[5:7])))
        return result


SCHEME = IsikukoodScheme()
