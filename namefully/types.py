# namefully/types.py
"""
Enumerations shared across the package.

Every string enum exposes ``cast(value, fallback=None)`` which resolves a
member from the member itself, its value, its name, or one of a few loose
aliases ("period" for US titles, "ln" for last-name order, "," for commas).
Unrecognized input returns ``fallback`` instead of raising; callers decide
whether that is an error.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, TypeVar

E = TypeVar("E", bound="_Matchable")


class _Matchable(str, Enum):
    @classmethod
    def cast(cls: type[E], value: Any, fallback: E | None = None) -> E | None:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return fallback
        for key in (value.lower(), value.strip().lower()):
            for member in cls:
                if key in (member.value.lower(), member.name.lower()):
                    return member
            alias = _ALIASES.get(cls.__name__, {}).get(key)
            if alias is not None:
                return cls(alias)
        return fallback


class Title(_Matchable):
    """Prefix style: US appends a period ("Mr."), UK does not ("Mr")."""

    US = "US"
    UK = "UK"


class Surname(_Matchable):
    """How a father/mother last name renders."""

    FATHER = "father"
    MOTHER = "mother"
    HYPHENATED = "hyphenated"
    ALL = "all"


class NameOrder(_Matchable):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"

    @property
    def opposite(self) -> NameOrder:
        return NameOrder.LAST_NAME if self is NameOrder.FIRST_NAME else NameOrder.FIRST_NAME


class NameType(_Matchable):
    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    BIRTH_NAME = "birthName"


class Flat(_Matchable):
    """Reduction variants for Namefully.flatten() and Namefully.zip()."""

    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    FIRST_MID = "firstMid"
    MID_LAST = "midLast"
    ALL = "all"


class Namon(_Matchable):
    """One semantic piece of a name, in canonical order."""

    PREFIX = "prefix"
    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    SUFFIX = "suffix"

    @property
    def index(self) -> int:
        return list(Namon).index(self)

    @property
    def key(self) -> str:
        return self.value

    @classmethod
    def from_key(cls, key: Any) -> Namon | None:
        """Exact role key ("firstName", ...) or member; no aliases."""
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        return next((m for m in cls if m.value == key), None)


class Separator(_Matchable):
    """Token used to split string input and join name parts."""

    COMMA = ","
    COLON = ":"
    DOUBLE_QUOTE = '"'
    EMPTY = ""
    HYPHEN = "-"
    PERIOD = "."
    SEMI_COLON = ";"
    SINGLE_QUOTE = "'"
    SPACE = " "
    UNDERSCORE = "_"

    @property
    def token(self) -> str:
        return self.value


class CapsRange(IntEnum):
    NONE = 0
    INITIAL = 1
    ALL = 2


# alias (lowercased) -> member value, per enum
_ALIASES: dict[str, dict[str, str]] = {
    "Title": {
        "gb": "UK",
        "au": "UK",
        "noperiod": "UK",
        "no-period": "UK",
        "usa": "US",
        "period": "US",
        ".": "US",
    },
    "Surname": {
        "hyphen": "hyphenated",
        "-": "hyphenated",
        "*": "all",
        "both": "all",
        "every": "all",
    },
    "NameOrder": {
        "first": "firstName",
        "fn": "firstName",
        "last": "lastName",
        "ln": "lastName",
    },
    "NameType": {
        "first": "firstName",
        "fn": "firstName",
        "middle": "middleName",
        "mn": "middleName",
        "last": "lastName",
        "ln": "lastName",
        "surname": "lastName",
        "birth": "birthName",
        "bn": "birthName",
    },
    "Flat": {
        "first": "firstName",
        "fn": "firstName",
        "middle": "middleName",
        "mn": "middleName",
        "last": "lastName",
        "ln": "lastName",
        "first_mid": "firstMid",
        "first-mid": "firstMid",
        "fm": "firstMid",
        "mid_last": "midLast",
        "mid-last": "midLast",
        "ml": "midLast",
        "*": "all",
    },
    "Namon": {
        "title": "prefix",
        "first": "firstName",
        "fn": "firstName",
        "given": "firstName",
        "middle": "middleName",
        "mn": "middleName",
        "last": "lastName",
        "ln": "lastName",
        "surname": "lastName",
        "family": "lastName",
    },
    "Separator": {
        "doublequote": '"',
        "double_quote": '"',
        "semicolon": ";",
        "semi_colon": ";",
        "singlequote": "'",
        "single_quote": "'",
    },
}


__all__ = [
    "CapsRange",
    "Flat",
    "NameOrder",
    "NameType",
    "Namon",
    "Separator",
    "Surname",
    "Title",
]
