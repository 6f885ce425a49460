from __future__ import annotations

import random

import pytest

from skills.personal_id.date import Gender
from skills.personal_id.scheme import GenOptions
from skills.personal_id.schemes import cz, sk


@pytest.fixture(params=[cz.SCHEME, sk.SCHEME], ids=["CZ", "SK"])
def scheme(request):
    return request.param


def test_known_codes(scheme) -> None:
    male = scheme.parse("7103192745")
    assert (male.gender, male.dob, male.valid) == ("Male", "1971-03-19", True)
    female = scheme.parse("8061151230")
    assert (female.gender, female.dob, female.valid) == ("Female", "1980-11-15", True)


def test_wrong_check_digit(scheme) -> None:
    parsed = scheme.parse("7103192746")
    assert parsed.valid is False
    assert parsed.dob == "1971-03-19"


def test_remainder_ten_maps_to_zero() -> None:
    digits = next(f"710319{n:03d}" for n in range(1000) if int(f"710319{n:03d}") % 11 == 10)
    assert cz.check_digit(digits) == 0


def test_overflow_months(scheme) -> None:
    body = "052315123"
    male = scheme.parse(body + str(cz.check_digit(body)))
    assert (male.gender, male.dob) == ("Male", "2005-03-15")
    body = "057315123"
    female = scheme.parse(body + str(cz.check_digit(body)))
    assert (female.gender, female.dob) == ("Female", "2005-03-15")


def test_years_before_1954_not_representable(scheme) -> None:
    assert scheme.generate(GenOptions(year=1953), random.Random(1)) is None
    assert scheme.generate(GenOptions(year=2054), random.Random(1)) is None


def test_female_month_offset(scheme) -> None:
    code = scheme.generate(GenOptions(Gender.FEMALE, 1990), random.Random(3))
    assert 51 <= int(code[2:4]) <= 62
    assert int(code) % 11 == 0 or int(code[:9]) % 11 == 10


def test_malformed(scheme) -> None:
    assert scheme.parse("710319/2745") is None
    assert scheme.parse("710319274") is None


def test_country_codes() -> None:
    assert (cz.SCHEME.country, sk.SCHEME.country) == ("CZ", "SK")
