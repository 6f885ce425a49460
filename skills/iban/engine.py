"""IBAN generation, validation and formatting."""

from __future__ import annotations

import random
from typing import List, Optional

from skills.iban import catalog
from skills.iban.validator import check_iban
from utils.checksum import expand, mod97
from utils.logger import logger


class GenerationError(ValueError):
    """Raised when no IBAN can be generated for the request."""


class UnsupportedCountryError(GenerationError):
    """Raised when the country has no registered BBAN layout."""


def supported_countries() -> List[str]:
    return catalog.supported_countries()


def check_digits(country: str, bban: str) -> str:
    """ISO 7064 MOD 97-10 check digits for ``country`` + ``bban``."""
    remainder = mod97(expand(bban + country + "00"))
    return f"{98 - remainder:02d}"


def generate_iban(country: Optional[str], rng: random.Random) -> str:
    """
    Generate a random, checksum-valid IBAN.

    Args:
        country: ISO 3166-1 alpha-2 code. ``None`` picks a catalog country at random.
        rng:     Randomness source, owned by the caller.

    Raises:
        UnsupportedCountryError: ``country`` is not in the catalog.
    """
    if country is None:
        country = rng.choice(catalog.supported_countries())
    layout = catalog.layout_for(country)
    if layout is None:
        logger.debug("IBAN generation refused, unsupported country: %r", country)
        raise UnsupportedCountryError(f"Unsupported IBAN country: {country}")

    bban = "".join(
        "".join(rng.choice(seg.charset) for _ in range(seg.length))
        for seg in layout.segments
    )
    return layout.country + check_digits(layout.country, bban) + bban


def validate_iban(code: str) -> bool:
    """True iff ``code`` is a well-formed IBAN of a catalog country with a valid checksum."""
    return check_iban(code).valid


def format_iban(code: str) -> str:
    """Group into blocks of four characters: ``DE89 3704 0044 ...``."""
    return " ".join(code[i:i + 4] for i in range(0, len(code), 4))
