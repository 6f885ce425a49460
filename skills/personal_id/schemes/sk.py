"""Slovakia – rodné číslo, the Czechoslovak birth number kept after 1993."""

from __future__ import annotations

from skills.personal_id.schemes.cz import BirthNumberScheme

SCHEME = BirthNumberScheme("SK", "Slovakia")
