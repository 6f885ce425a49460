"""
Lithuania – asmens kodas (GYYMMDDSSSC).

Same layout and check digit as the Estonian isikukood, but G only spans
1–6 (1800s to 2000s).  A leading 9 marks a code issued without a known
birth date; it is reported without gender or date.
"""

from __future__ import annotations

import random
from typing import Optional

from skills.personal_id.date import Gender, format_dob, pick_gender, pick_year, random_day, to_date
from skills.personal_id.scheme import GenOptions, ParsedId
from skills.personal_id.schemes.ee import check_digit


class AsmensKodasScheme:
    country = "LT"
    name = "Lithuania"
    min_year = 1800
    max_year = 2099

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
        if 1 <= lead <= 6:
            century, female = divmod(lead - 1, 2)
            result.gender = (Gender.FEMALE if female else Gender.MALE).label
            year = 1800 + 100 * century + int(code[1:3])
            result.dob = format_dob(to_date(year, int(code[3:5]), int(code[5:7])))
        return result


SCHEME = AsmensKodasScheme()
