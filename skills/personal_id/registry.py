"""Country code → personal-ID scheme lookup."""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Iterable, List, Optional, Tuple

from skills.personal_id.scheme import GenOptions, ParsedId, Scheme
from skills.personal_id.schemes import ALL_SCHEMES
from utils.logger import logger


class Registry:
    """Read-only after construction; safe to share between callers."""

    def __init__(self, schemes: Iterable[Scheme] = ALL_SCHEMES) -> None:
        table = {}
        for scheme in schemes:
            if scheme.country in table:
                raise ValueError(f"Duplicate personal-ID scheme for {scheme.country}")
            table[scheme.country] = scheme
        self._schemes = MappingProxyType(table)

    def __contains__(self, country: object) -> bool:
        return isinstance(country, str) and country.upper() in self._schemes

    def scheme_for(self, country: str) -> Optional[Scheme]:
        return self._schemes.get((country or "").upper())

    def list_countries(self) -> List[Tuple[str, str]]:
        return [(code, self._schemes[code].name) for code in sorted(self._schemes)]

    def generate(self, country: str, options: GenOptions, rng: random.Random) -> Optional[str]:
        scheme = self.scheme_for(country)
        if scheme is None:
            logger.debug("No personal-ID scheme for %r", country)
            return None
        return scheme.generate(options, rng)

    def parse(self, country: str, code: str) -> Optional[ParsedId]:
        scheme = self.scheme_for(country)
        if scheme is None:
            logger.debug("No personal-ID scheme for %r", country)
            return None
        if not isinstance(code, str):
            return None
        return scheme.parse(code)
