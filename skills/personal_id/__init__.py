"""
Personal-ID skill – synthetic national identification numbers.

Tools:
  personal_id_list_countries  – registered national formats
  personal_id_generate        – codes for a country, optional gender/birth year
  personal_id_parse           – decode gender, birth date and checksum of a code

Every generated code is re-parsed through the registry so the table shows
what a validator would see.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

ANY_GENDER = "Any"


def _row(code: str, gender: Optional[str], dob: Optional[str], valid: bool) -> str:
    return f"{code:<16} {gender or '':<7} {dob or '':<10}  {'Yes' if valid else 'No'}"


def register_tools(mcp: "FastMCP") -> None:
    """Register all personal-ID tools with the given FastMCP instance."""
    from skills.personal_id.date import Gender
    from skills.personal_id.registry import Registry
    from skills.personal_id.scheme import GenOptions
    from utils.logger import logger
    from utils.settings import clamp_count, make_rng

    registry = Registry()

    def _unknown(country: str) -> str:
        codes = ", ".join(code for code, _ in registry.list_countries())
        return f"No personal-ID format for '{country}'. Supported: {codes}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def personal_id_list_countries() -> str:
        """List the countries with a registered personal-ID format."""
        return "\n".join(f"  {code} - {name}" for code, name in registry.list_countries())

    # ------------------------------------------------------------------

    @mcp.tool()
    def personal_id_generate(
        country: str = "EE",
        count: int = 5,
        gender: str = ANY_GENDER,
        year: Optional[int] = None,
    ) -> str:
        """
        Generate synthetic personal identification numbers.

        Args:
            country: ISO country code, see personal_id_list_countries.
            count:   Number of draws (1..TESTDATA_MAX_COUNT).
            gender:  "Any", "Male" or "Female".
            year:    Birth year; years the national format cannot encode yield no codes.
        """
        if country not in registry:
            return _unknown(country)

        wanted = Gender.from_label(gender)
        if wanted is None and (gender or ANY_GENDER).strip().lower() != ANY_GENDER.lower():
            return f"Unknown gender '{gender}'. Use Any, Male or Female."

        opts = GenOptions(gender=wanted, year=year)
        rng = make_rng()
        count = clamp_count(count)

        rows = []
        for _ in range(count):
            code = registry.generate(country, opts, rng)
            if code is None:
                continue
            parsed = registry.parse(country, code)
            if parsed is None:
                continue
            rows.append(_row(parsed.code, parsed.gender, parsed.dob, parsed.valid))

        logger.debug("personal_id_generate: %d/%d codes for %s", len(rows), count, country)
        if not rows:
            return f"No codes generated for {country.upper()} with gender={gender}, year={year}."
        lines = [f"{'Code':<16} {'Gender':<7} {'Born':<10}  Valid", "-" * 44] + rows
        if len(rows) < count:
            lines.append(f"({count - len(rows)} draws could not satisfy the constraints)")
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def personal_id_parse(country: str, code: str) -> str:
        """
        Decode a personal identification number.

        Args:
            country: ISO country code of the format.
            code:    The number as issued, without spaces.
        """
        if country not in registry:
            return _unknown(country)
        parsed = registry.parse(country, code.strip())
        if parsed is None:
            return f"'{code}' does not have the {country.upper()} personal-ID layout."
        return (
            f"Code:   {parsed.code}\n"
            f"Gender: {parsed.gender or '-'}\n"
            f"Born:   {parsed.dob or '-'}\n"
            f"Valid:  {'Yes' if parsed.valid else 'No'}"
        )
