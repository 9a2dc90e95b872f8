# namefully/utils.py
from __future__ import annotations

import re
from dataclasses import dataclass

from .constants import MAX_NUMBER_OF_NAME_PARTS, MIN_NUMBER_OF_NAME_PARTS
from .types import CapsRange, NameOrder, Namon

# Token boundaries for the case-conversion family
_BIRTH_SPLIT_RE = re.compile(r"[' -]")


@dataclass(frozen=True)
class NameIndex:
    """
    Positions of each role within a flat list of 2-5 tokens (-1 when absent).

    Built from a fixed table keyed by token count and name order.
    """

    prefix: int
    first_name: int
    middle_name: int
    last_name: int
    suffix: int

    @classmethod
    def base(cls) -> NameIndex:
        return cls(-1, 0, -1, 1, -1)

    @classmethod
    def when(cls, order: NameOrder, count: int = 2) -> NameIndex:
        """
        Lookup table:

            count  first-name order     last-name order
            2      first last           last first
            3      first middle last    last first middle
            4      prefix first m. l.   prefix last first middle
            5      ... + suffix         ... + suffix
        """
        if order is NameOrder.FIRST_NAME:
            table = {
                2: (-1, 0, -1, 1, -1),
                3: (-1, 0, 1, 2, -1),
                4: (0, 1, 2, 3, -1),
                5: (0, 1, 2, 3, 4),
            }
        else:
            table = {
                2: (-1, 1, -1, 0, -1),
                3: (-1, 1, 2, 0, -1),
                4: (0, 2, 3, 1, -1),
                5: (0, 2, 3, 1, 4),
            }
        slots = table.get(count)
        return cls(*slots) if slots else cls.base()

    @classmethod
    def only(
        cls,
        first_name: int,
        last_name: int,
        prefix: int = -1,
        middle_name: int = -1,
        suffix: int = -1,
    ) -> NameIndex:
        return cls(prefix, first_name, middle_name, last_name, suffix)

    def get(self, namon: Namon) -> int:
        return self.to_dict()[namon]

    def to_dict(self) -> dict[Namon, int]:
        return {
            Namon.PREFIX: self.prefix,
            Namon.FIRST_NAME: self.first_name,
            Namon.MIDDLE_NAME: self.middle_name,
            Namon.LAST_NAME: self.last_name,
            Namon.SUFFIX: self.suffix,
        }


def is_valid_arity(count: int) -> bool:
    return MIN_NUMBER_OF_NAME_PARTS <= count <= MAX_NUMBER_OF_NAME_PARTS


# -------------------------------
# Casing
# -------------------------------
def capitalize(s: str, caps: CapsRange = CapsRange.INITIAL) -> str:
    """INITIAL: "jOHN" -> "John"; ALL: "john" -> "JOHN"; NONE: unchanged."""
    if not s or caps is CapsRange.NONE:
        return s
    if caps is CapsRange.ALL:
        return s.upper()
    return s[0].upper() + s[1:].lower()


def decapitalize(s: str, caps: CapsRange = CapsRange.INITIAL) -> str:
    """INITIAL: "John" -> "john"; ALL: "JOHN" -> "john"; NONE: unchanged."""
    if not s or caps is CapsRange.NONE:
        return s
    if caps is CapsRange.ALL:
        return s.lower()
    return s[0].lower() + s[1:]


def toggle_case(s: str) -> str:
    out = []
    for ch in s:
        out.append(ch.lower() if ch.isupper() else ch.upper())
    return "".join(out)


def split_birth(birth: str) -> list[str]:
    """Split a birth name on spaces, apostrophes and hyphens, dropping empties."""
    return [tok for tok in _BIRTH_SPLIT_RE.split(birth) if tok]
