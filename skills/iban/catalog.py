"""
BBAN layouts of the IBAN-participating countries.

Formats use the SWIFT IBAN registry notation: ``<length>!<class>`` per
segment, where ``n`` = digits, ``a`` = upper-case letters and ``c`` =
digits + upper-case letters.  The role string names each segment with one
letter (see ``_ROLES``).
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

ALPHABETS: Dict[str, str] = {
    "n": string.digits,
    "a": string.ascii_uppercase,
    "c": string.digits + string.ascii_uppercase,
}

_ROLES = {
    "B": "bank_code",
    "S": "branch_code",
    "A": "account_number",
    "K": "check_digits",
    "T": "account_type",
    "O": "owner_code",
    "R": "reserved",
    "C": "currency",
}

_SEGMENT_RE = re.compile(r"(\d+)!([nac])")


@dataclass(frozen=True)
class Segment:
    name: str
    length: int
    alphabet: str  # one of "n", "a", "c"

    @property
    def charset(self) -> str:
        return ALPHABETS[self.alphabet]


@dataclass(frozen=True)
class Layout:
    country: str
    name: str
    length: int
    segments: Tuple[Segment, ...]

    def __post_init__(self) -> None:
        bban = sum(s.length for s in self.segments)
        if bban + 4 != self.length:
            raise ValueError(
                f"{self.country}: BBAN segments sum to {bban}, expected {self.length - 4}"
            )

    @property
    def bban_length(self) -> int:
        return self.length - 4

    def matches(self, bban: str) -> bool:
        """True if every BBAN character belongs to its segment's alphabet."""
        if len(bban) != self.bban_length:
            return False
        pos = 0
        for seg in self.segments:
            if any(ch not in seg.charset for ch in bban[pos:pos + seg.length]):
                return False
            pos += seg.length
        return True


def parse_format(fmt: str, roles: str) -> List[Segment]:
    """Turn ``"8!n10!n"`` + ``"BA"`` into segments."""
    parts = _SEGMENT_RE.findall(fmt)
    if not parts or "".join(f"{n}!{c}" for n, c in parts) != fmt:
        raise ValueError(f"Invalid BBAN format: {fmt!r}")
    if len(parts) != len(roles):
        raise ValueError(f"Format {fmt!r} has {len(parts)} segments, roles {roles!r}")
    return [
        Segment(name=_ROLES[role], length=int(n), alphabet=cls)
        for (n, cls), role in zip(parts, roles)
    ]


# country, name, total length, BBAN format, segment roles
_TABLE: List[Tuple[str, str, int, str, str]] = [
    ("AD", "Andorra", 24, "4!n4!n12!c", "BSA"),
    ("AE", "United Arab Emirates", 23, "3!n16!n", "BA"),
    ("AL", "Albania", 28, "8!n16!c", "BA"),
    ("AT", "Austria", 20, "5!n11!n", "BA"),
    ("AZ", "Azerbaijan", 28, "4!a20!c", "BA"),
    ("BA", "Bosnia and Herzegovina", 20, "3!n3!n8!n2!n", "BSAK"),
    ("BE", "Belgium", 16, "3!n7!n2!n", "BAK"),
    ("BG", "Bulgaria", 22, "4!a4!n2!n8!c", "BSTA"),
    ("BH", "Bahrain", 22, "4!a14!c", "BA"),
    ("BR", "Brazil", 29, "8!n5!n10!n1!a1!c", "BSATO"),
    ("BY", "Belarus", 28, "4!c4!n16!c", "BTA"),
    ("CH", "Switzerland", 21, "5!n12!c", "BA"),
    ("CR", "Costa Rica", 22, "4!n14!n", "BA"),
    ("CY", "Cyprus", 28, "3!n5!n16!c", "BSA"),
    ("CZ", "Czech Republic", 24, "4!n6!n10!n", "BSA"),
    ("DE", "Germany", 22, "8!n10!n", "BA"),
    ("DK", "Denmark", 18, "4!n9!n1!n", "BAK"),
    ("DO", "Dominican Republic", 28, "4!c20!n", "BA"),
    ("EE", "Estonia", 20, "2!n2!n11!n1!n", "BSAK"),
    ("EG", "Egypt", 29, "4!n4!n17!n", "BSA"),
    ("ES", "Spain", 24, "4!n4!n1!n1!n10!n", "BSKKA"),
    ("FI", "Finland", 18, "3!n11!n", "BA"),
    ("FO", "Faroe Islands", 18, "4!n9!n1!n", "BAK"),
    ("FR", "France", 27, "5!n5!n11!c2!n", "BSAK"),
    ("GB", "United Kingdom", 22, "4!a6!n8!n", "BSA"),
    ("GE", "Georgia", 22, "2!a16!n", "BA"),
    ("GI", "Gibraltar", 23, "4!a15!c", "BA"),
    ("GL", "Greenland", 18, "4!n9!n1!n", "BAK"),
    ("GR", "Greece", 27, "3!n4!n16!c", "BSA"),
    ("GT", "Guatemala", 28, "4!c20!c", "BA"),
    ("HR", "Croatia", 21, "7!n10!n", "BA"),
    ("HU", "Hungary", 28, "3!n4!n1!n15!n1!n", "BSKAK"),
    ("IE", "Ireland", 22, "4!a6!n8!n", "BSA"),
    ("IL", "Israel", 23, "3!n3!n13!n", "BSA"),
    ("IQ", "Iraq", 23, "4!a3!n12!n", "BSA"),
    ("IS", "Iceland", 26, "4!n2!n6!n10!n", "BTAO"),
    ("IT", "Italy", 27, "1!a5!n5!n12!c", "KBSA"),
    ("JO", "Jordan", 30, "4!a4!n18!c", "BSA"),
    ("KW", "Kuwait", 30, "4!a22!c", "BA"),
    ("KZ", "Kazakhstan", 20, "3!n13!c", "BA"),
    ("LB", "Lebanon", 28, "4!n20!c", "BA"),
    ("LC", "Saint Lucia", 32, "4!a24!c", "BA"),
    ("LI", "Liechtenstein", 21, "5!n12!c", "BA"),
    ("LT", "Lithuania", 20, "5!n11!n", "BA"),
    ("LU", "Luxembourg", 20, "3!n13!c", "BA"),
    ("LV", "Latvia", 21, "4!a13!c", "BA"),
    ("LY", "Libya", 25, "3!n3!n15!n", "BSA"),
    ("MC", "Monaco", 27, "5!n5!n11!c2!n", "BSAK"),
    ("MD", "Moldova", 24, "2!c18!c", "BA"),
    ("ME", "Montenegro", 22, "3!n13!n2!n", "BAK"),
    ("MK", "North Macedonia", 19, "3!n10!c2!n", "BAK"),
    ("MR", "Mauritania", 27, "5!n5!n11!n2!n", "BSAK"),
    ("MT", "Malta", 31, "4!a5!n18!c", "BSA"),
    ("MU", "Mauritius", 30, "4!a2!n2!n12!n3!n3!a", "BBSARC"),
    ("NL", "Netherlands", 18, "4!a10!n", "BA"),
    ("NO", "Norway", 15, "4!n6!n1!n", "BAK"),
    ("PK", "Pakistan", 24, "4!a16!c", "BA"),
    ("PL", "Poland", 28, "8!n16!n", "BA"),
    ("PS", "Palestine", 29, "4!a21!c", "BA"),
    ("PT", "Portugal", 25, "4!n4!n11!n2!n", "BSAK"),
    ("QA", "Qatar", 29, "4!a21!c", "BA"),
    ("RO", "Romania", 24, "4!a16!c", "BA"),
    ("RS", "Serbia", 22, "3!n13!n2!n", "BAK"),
    ("SA", "Saudi Arabia", 24, "2!n18!c", "BA"),
    ("SC", "Seychelles", 31, "4!a2!n2!n16!n3!a", "BBSAC"),
    ("SE", "Sweden", 24, "3!n16!n1!n", "BAK"),
    ("SI", "Slovenia", 19, "5!n8!n2!n", "BAK"),
    ("SK", "Slovakia", 24, "4!n6!n10!n", "BSA"),
    ("SM", "San Marino", 27, "1!a5!n5!n12!c", "KBSA"),
    ("ST", "Sao Tome and Principe", 25, "4!n4!n11!n2!n", "BSAK"),
    ("SV", "El Salvador", 28, "4!a20!n", "BA"),
    ("TL", "Timor-Leste", 23, "3!n14!n2!n", "BAK"),
    ("TN", "Tunisia", 24, "2!n3!n13!n2!n", "BSAK"),
    ("TR", "Turkey", 26, "5!n1!n16!c", "BRA"),
    ("UA", "Ukraine", 29, "6!n19!c", "BA"),
    ("VA", "Vatican City", 22, "3!n15!n", "BA"),
    ("VG", "British Virgin Islands", 24, "4!a16!n", "BA"),
    ("XK", "Kosovo", 20, "4!n10!n2!n", "BAK"),
    ("YE", "Yemen", 30, "4!a4!n18!c", "BSA"),
]

LAYOUTS: Dict[str, Layout] = {
    cc: Layout(country=cc, name=name, length=length, segments=tuple(parse_format(fmt, roles)))
    for cc, name, length, fmt, roles in _TABLE
}


def layout_for(country: str) -> Optional[Layout]:
    return LAYOUTS.get((country or "").upper())


def supported_countries() -> List[str]:
    return sorted(LAYOUTS)
