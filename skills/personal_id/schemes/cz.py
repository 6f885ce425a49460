"""
Czech Republic – rodné číslo (YYMMDD/SSSC).

Ten-digit birth numbers, issued since 1954.  Women have 50 added to the
month; from 2004 a further 20 may be added when a day's serials run out
(21–32 men, 71–82 women).  YY below 54 therefore means the 2000s.

The whole number is divisible by 11; when the first nine digits leave
remainder 10 the check digit is 0.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId

FEMALE_OFFSET = 50
OVERFLOW_OFFSET = 20


def check_digit(digits: str) -> int:
    return int(digits) % 11 % 10


class BirthNumberScheme:
    min_year = 1954
    max_year = 2053

    def __init__(self, country: str, name: str) -> None:
        self.country = country
        self.name = name

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        month = dob.month + (FEMALE_OFFSET if gender is Gender.FEMALE else 0)
        body = f"{year % 100:02d}{month:02d}{dob.day:02d}{rng.randint(0, 999):03d}"
        return body + str(check_digit(body))

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 10 or not (code.isascii() and code.isdigit()):
            return None
        result = ParsedId(code=code, valid=int(code[9]) == check_digit(code[:9]))
        month = int(code[2:4])
        gender = Gender.MALE
        if month > FEMALE_OFFSET:
            gender = Gender.FEMALE
            month -= FEMALE_OFFSET
        if month > OVERFLOW_OFFSET:
            month -= OVERFLOW_OFFSET
        if 1 <= month <= 12:
            result.gender = gender.label
            yy = int(code[0:2])
            year = (2000 if yy < 54 else 1900) + yy
            result.dob = format_dob(to_date(year, month, int(code[4:6])))
        return result


SCHEME = BirthNumberScheme("CZ", "Czech Republic")
