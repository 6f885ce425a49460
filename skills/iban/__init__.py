"""
IBAN skill – synthetic IBANs for test fixtures.

Tools:
  iban_list_countries  – countries with a known BBAN layout
  iban_generate        – random, checksum-valid IBANs
  iban_validate        – MOD-97 check with a reason for failures
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

RANDOM_COUNTRY = "Random"


def register_tools(mcp: "FastMCP") -> None:
    """Register all IBAN tools with the given FastMCP instance."""
    from skills.iban.catalog import layout_for
    from skills.iban.engine import (
        UnsupportedCountryError,
        format_iban,
        generate_iban,
        supported_countries,
        validate_iban,
    )
    from skills.iban.validator import check_iban, normalize_iban
    from utils.logger import logger
    from utils.settings import clamp_count, make_rng

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_list_countries() -> str:
        """List the countries IBANs can be generated for, with their IBAN length."""
        lines = [f"{len(supported_countries())} countries:"]
        for cc in supported_countries():
            layout = layout_for(cc)
            lines.append(f"  {cc}  {layout.length:>2}  {layout.name}")
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_generate(country: Optional[str] = "DE", count: int = 5, spaces: bool = True) -> str:
        """
        Generate random IBANs that pass the MOD-97 check.

        Args:
            country: ISO country code (e.g. "DE") or "Random" for a random country per row.
            count:   Number of IBANs (1..TESTDATA_MAX_COUNT).
            spaces:  Group the output in blocks of four characters.
        """
        rng = make_rng()
        count = clamp_count(count)
        wanted = None if not country or country.strip().lower() == RANDOM_COUNTRY.lower() else country.strip()

        rows = []
        for _ in range(count):
            try:
                code = generate_iban(wanted, rng)
            except UnsupportedCountryError as exc:
                logger.info("iban_generate: %s", exc)
                return f"{exc}. Use iban_list_countries for the supported codes."
            valid = validate_iban(code)
            rows.append(f"{format_iban(code) if spaces else code:<42}  {'Yes' if valid else 'No'}")

        logger.debug("iban_generate: %d IBANs for %s", len(rows), wanted or RANDOM_COUNTRY)
        return "\n".join([f"{'IBAN':<42}  Valid", "-" * 50] + rows)

    # ------------------------------------------------------------------

    @mcp.tool()
    def iban_validate(iban: str) -> str:
        """
        Check an IBAN (spaces allowed) against its country layout and the MOD-97 checksum.

        Args:
            iban: The IBAN to check, e.g. "DE89 3704 0044 0532 0130 00".
        """
        code = normalize_iban(iban)
        result = check_iban(code)
        logger.info("iban_validate: %s valid=%s", result.masked, result.valid)
        if result.valid:
            return f"{format_iban(code)}: valid"
        return f"{format_iban(code)}: invalid – {result.error}"
