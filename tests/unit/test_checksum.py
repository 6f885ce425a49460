from __future__ import annotations

from utils.checksum import expand, mod97, weighted_sum


def test_expand_maps_letters_to_base36_values() -> None:
    assert expand("AZ09") == "103509"
    assert expand("de") == "1314"
    assert expand("123") == "123"


def test_mod97_small_values() -> None:
    assert mod97("0") == 0
    assert mod97("97") == 0
    assert mod97("98") == 1
    assert mod97("196") == 2


def test_mod97_matches_big_integer_arithmetic() -> None:
    digits = "3214282912345698765432161182" * 3
    assert mod97(digits) == int(digits) % 97


def test_mod97_of_rearranged_reference_iban_is_one() -> None:
    assert mod97(expand("WEST12345698765432GB82")) == 1


def test_weighted_sum() -> None:
    assert weighted_sum("123", (1, 2, 3)) == 14
    assert weighted_sum("99", (1,)) == 9
