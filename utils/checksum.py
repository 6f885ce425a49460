"""Modular arithmetic shared by the IBAN engine and the personal-ID schemes."""

from __future__ import annotations

from typing import Iterable, Sequence


def expand(code: str) -> str:
    """Replace every letter by its base-36 value (A=10 … Z=35), keep digits."""
    return "".join(str(ord(ch) - 55) if ch.isalpha() else ch for ch in code.upper())


def mod97(digits: str) -> int:
    """Reduce an arbitrarily long decimal string modulo 97."""
    acc = 0
    for ch in digits:
        acc = (acc * 10 + ord(ch) - 48) % 97
    return acc


def weighted_sum(digits: Iterable[str], weights: Sequence[int]) -> int:
    return sum(int(d) * w for d, w in zip(digits, weights))
