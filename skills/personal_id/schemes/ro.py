"""
Romania – CNP (SYYMMDDJJNNNC).

S folds century and gender (1/2 1900s, 3/4 1800s, 5/6 2000s, 7/8 foreign
residents, 9 foreigners); odd is male.  JJ is the county code, NNN the
serial, C the check digit (remainder 10 maps to 1).
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId
from utils.checksum import weighted_sum

WEIGHTS = (2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9)

# 01-40 counties, 41-46 Bucharest sectors, 51/52 Calarasi and Giurgiu
COUNTIES = [f"{n:02d}" for n in range(1, 47)] + ["51", "52"]

# first digit -> century
CENTURIES = {1: 1900, 2: 1900, 3: 1800, 4: 1800, 5: 2000, 6: 2000, 7: 1900, 8: 1900, 9: 1900}

_MALE_LEAD = {1800: 3, 1900: 1, 2000: 5}


def check_digit(digits: str) -> int:
    rem = weighted_sum(digits, WEIGHTS) % 11
    return 1 if rem == 10 else rem


class CnpScheme:
    country = "RO"
    name = "Romania"
    min_year = 1800
    max_year = 2099

    def generate(self, options: GenOptions, rng: random.Random) -> Optional[str]:
        year = pick_year(options.year, self.min_year, self.max_year, rng)
        if year is None:
            return None
        gender = pick_gender(options.gender, rng)
        dob = random_day(year, rng)
        lead = _MALE_LEAD[year // 100 * 100] + (0 if gender is Gender.MALE else 1)
        body = f"{lead}{dob:%y%m%d}{rng.choice(COUNTIES)}{rng.randint(1, 999):03d}"
        return body + str(check_digit(body))

    def parse(self, code: str) -> Optional[ParsedId]:
        if len(code) != 13 or not (code.isascii() and code.isdigit()):
            return None
        result = ParsedId(code=code, valid=int(code[12]) == check_digit(code[:12]))
        lead = int(code[0])
        if lead in CENTURIES:
            if lead != 9:
                result.gender = (Gender.MALE if lead % 2 else Gender.FEMALE).label
            dob = to_date(CENTURIES[lead] + int(code[1:3]), int(code[3:5]), int(code[5:7]))
            result.dob = format_dob(dob)
        return result


SCHEME = CnpScheme()
