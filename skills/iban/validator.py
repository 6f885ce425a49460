"""IBAN diagnostics: MOD-97 validation (ISO 13616) with a reason for failures."""

from __future__ import annotations

import re
from dataclasses import dataclass

from skills.iban.catalog import layout_for
from utils.checksum import expand, mod97

_IBAN_RE = re.compile(r"^[A-Z]{2}\d{2}[A-Z0-9]+$")
_WS_RE = re.compile(r"\s+")


@dataclass
class ValidationResult:
    valid: bool
    masked: str
    error: str = ""


def normalize_iban(raw: str) -> str:
    """Remove whitespace and upper-case."""
    return _WS_RE.sub("", raw or "").upper()


def mask_iban(iban: str) -> str:
    if len(iban) < 8:
        return iban
    return iban[:4] + "*" * (len(iban) - 8) + iban[-4:]


def check_iban(iban: str) -> ValidationResult:
    """
    Validate an already normalised IBAN.

    Rules are checked in order (length, country, characters, layout,
    checksum); the first failing one is reported in ``error``.
    """
    if not isinstance(iban, str) or len(iban) < 5:
        return ValidationResult(False, mask_iban(iban if isinstance(iban, str) else ""), "IBAN is too short.")
    country = iban[:2]
    if not country.isalpha():
        return ValidationResult(False, mask_iban(iban), "Invalid country code.")
    layout = layout_for(country) if country.isupper() else None
    if layout is None:
        return ValidationResult(False, mask_iban(iban), f"Unsupported country code: {country}")
    if len(iban) != layout.length:
        return ValidationResult(
            False,
            mask_iban(iban),
            f"Wrong IBAN length for {country}: expected {layout.length}, got {len(iban)}.",
        )
    if not _IBAN_RE.match(iban) or not iban.isascii():
        return ValidationResult(False, mask_iban(iban), "IBAN contains invalid characters.")
    if not layout.matches(iban[4:]):
        return ValidationResult(
            False, mask_iban(iban), f"BBAN does not match the {country} account layout."
        )
    if mod97(expand(iban[4:] + iban[:4])) != 1:
        return ValidationResult(False, mask_iban(iban), "IBAN checksum (MOD-97) invalid.")
    return ValidationResult(True, mask_iban(iban))
