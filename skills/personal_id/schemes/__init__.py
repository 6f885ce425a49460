"""National personal-ID formats, one module per country."""

from __future__ import annotations

from skills.personal_id.schemes import be, bg, cz, ee, fi, lt, pl, ro, sk

ALL_SCHEMES = (
    be.SCHEME,
    bg.SCHEME,
    cz.SCHEME,
    ee.SCHEME,
    fi.SCHEME,
    lt.SCHEME,
    pl.SCHEME,
    ro.SCHEME,
    sk.SCHEME,
)
