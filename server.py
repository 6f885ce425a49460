"""
euTestData – MCP server for synthetic EU test identifiers.

Starts a FastMCP server (stdio) and registers all skills.

Skills:
  iban         – checksum-valid IBANs for every registered country
  personal_id  – national personal identification numbers

Usage:
  python server.py                        # starts the MCP server
  claude mcp add euTestData -- python /path/to/server.py

Configuration:
  Copy .env.example to .env and adjust the values.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# Load .env from the project directory before the skill imports
load_dotenv(Path(__file__).parent / ".env", override=False)

mcp = FastMCP(
    "euTestData",
    instructions=(
        "Generates synthetic but checksum-valid EU test identifiers. "
        "Skills: iban (IBAN generation/validation), "
        "personal_id (national ID numbers with birth date and gender). "
        "Generated codes belong to no real person or account."
    ),
)

# ── Register skills ───────────────────────────────────────────────────
from skills.iban import register_tools as _iban  # noqa: E402
from skills.personal_id import register_tools as _personal_id  # noqa: E402

_iban(mcp)
_personal_id(mcp)

# ── Entry point ───────────────────────────────────────────────────────
if __name__ == "__main__":
    mcp.run()
