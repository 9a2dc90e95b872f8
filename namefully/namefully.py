# namefully/namefully.py
"""
Namefully: read-only views over a parsed personal name.

    >>> name = Namefully("Mr John Ben Smith Ph.D")
    >>> name.full, name.short, name.public
    ('Mr John Ben Smith Ph.D', 'John Smith', 'John S')
    >>> name.format("official")
    'Mr SMITH, John Ben Ph.D'
    >>> name.zip()
    'John B. S.'

Input may be a string, a list of strings, a list of Names, a role-keyed
mapping, or any object implementing the Parser protocol. Options are a
Config or a mapping merged into the registry (see namefully.config).
"""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Mapping
from typing import Any

from .config import Config, ConfigRegistry
from .config import registry as default_registry
from .constants import ALLOWED_FORMAT_TOKENS, FORMAT_KEYWORDS, ZERO_WIDTH_SPACE
from .exceptions import InputError, NotAllowedError
from .fullname import FullName
from .name import Name
from .parsers import (
    ArrayNameParser,
    ArrayStringParser,
    NamaParser,
    Parser,
    StringParser,
    build_parser,
    build_parser_async,
)
from .types import Flat, NameOrder, NameType, Namon, Surname
from .utils import NameIndex, capitalize, decapitalize, split_birth, toggle_case

log = logging.getLogger(__name__)

# Reduction variants, least to most aggressive
_FLAT_CASCADE = (
    Flat.FIRST_NAME,
    Flat.MIDDLE_NAME,
    Flat.LAST_NAME,
    Flat.FIRST_MID,
    Flat.MID_LAST,
    Flat.ALL,
)

_PUNCTUATION = {".", ",", " ", "-", "_"}

# Trailing/leading characters dropped from formatted output
_TRIM = string.whitespace + ZERO_WIDTH_SPACE


def _visible(parts: list[str]) -> list[str]:
    """Drop empty strings and mononym placeholders."""
    return [p for p in parts if p and p != ZERO_WIDTH_SPACE]


def _is_placeholder(name: Name | None) -> bool:
    return name is None or name.value == ZERO_WIDTH_SPACE


def _to_parser(raw: Any) -> Parser:
    if isinstance(raw, str):
        return StringParser(raw)
    if isinstance(raw, (list, tuple)):
        if not raw:
            raise InputError(list(raw), "cannot parse an empty list")
        if all(isinstance(r, str) for r in raw):
            return ArrayStringParser(list(raw))
        if all(isinstance(r, Name) for r in raw):
            return ArrayNameParser(list(raw))
        raise InputError(list(raw), "expecting a list of strings or a list of Names")
    if isinstance(raw, Mapping):
        return NamaParser(raw)
    if isinstance(raw, Parser):
        return raw
    raise InputError(raw, "cannot parse raw data; review expected data types")


class Namefully:
    def __init__(
        self,
        names: Any,
        options: Config | Mapping[str, Any] | None = None,
        *,
        registry: ConfigRegistry | None = None,
    ) -> None:
        if isinstance(options, Config):
            config = options
        elif isinstance(names, FullName) and options is None:
            config = names.config
        else:
            config = (registry or default_registry).merge(options)
        self._config = config

        if isinstance(names, FullName):
            full_name = names
        else:
            full_name = _to_parser(names).parse(config)
        self._full_name = full_name.ensure_complete()

    # -------------------------------
    # Construction helpers
    # -------------------------------
    @classmethod
    def try_parse(cls, text: str, index: NameIndex | None = None) -> Namefully | None:
        """Best-effort parse of free text; None instead of raising."""
        try:
            return cls(build_parser(text, index))
        except Exception:
            log.debug("try_parse: could not parse %r", text, exc_info=True)
            return None

    @classmethod
    async def parse(cls, text: str, index: NameIndex | None = None) -> Namefully:
        return cls(await build_parser_async(text, index))

    @classmethod
    def deserialize(cls, data: Mapping[str, Any] | str) -> Namefully:
        from .data import deserialize

        return deserialize(data)

    def serialize(self) -> dict[str, Any]:
        from .data import serialize

        return serialize(self)

    # -------------------------------
    # Getters
    # -------------------------------
    @property
    def config(self) -> Config:
        return self._config

    @property
    def length(self) -> int:
        return len(self.full)

    @property
    def prefix(self) -> str | None:
        return self._full_name.prefix.value if self._full_name.prefix else None

    @property
    def first(self) -> str:
        return self.first_name(with_more=False)

    @property
    def middle(self) -> str | None:
        return self._full_name.middle_name[0].value if self.has_middle else None

    @property
    def has_middle(self) -> bool:
        return self._full_name.has(Namon.MIDDLE_NAME)

    @property
    def last(self) -> str:
        return self.last_name()

    @property
    def suffix(self) -> str | None:
        return self._full_name.suffix.value if self._full_name.suffix else None

    @property
    def birth(self) -> str:
        return self.birth_name()

    @property
    def short(self) -> str:
        return self.shorten()

    @property
    def long(self) -> str:
        return self.birth

    @property
    def public(self) -> str:
        return self.format("f $l")

    @property
    def salutation(self) -> str:
        return self.format("p l")

    @property
    def full(self) -> str:
        return self.full_name()

    @property
    def parts(self) -> list[Name]:
        return self._full_name.to_list()

    def __str__(self) -> str:
        return self.full

    def __repr__(self) -> str:
        return f"Namefully({self.full!r})"

    def to_string(self) -> str:
        return self.full

    def get(self, namon: Namon | str) -> Name | list[Name] | None:
        return self._full_name.get(namon)

    def has(self, namon: Namon | str) -> bool:
        return self._full_name.has(namon)

    def equal(self, other: Namefully) -> bool:
        return self.to_string() == other.to_string()

    def deep_equal(self, other: Namefully) -> bool:
        """Same parts, role by role (extra given names and mother surnames included)."""
        mine, theirs = self._full_name.to_list(flat=True), other._full_name.to_list(flat=True)
        if len(mine) != len(theirs):
            return False
        return all(a == b for a, b in zip(mine, theirs))

    def to_dict(self) -> dict[str, Any]:
        return {
            "prefix": self.prefix,
            "firstName": self.first,
            "middleName": self.middle_name(),
            "lastName": self.last,
            "suffix": self.suffix,
        }

    # -------------------------------
    # Names
    # -------------------------------
    def _order(self, order: NameOrder | str | None) -> NameOrder:
        if order is None:
            return self._config.ordered_by
        return NameOrder.cast(order, self._config.ordered_by)

    def _birth_parts(self, order: NameOrder) -> list[str]:
        first, middles, last = self.first_name(), self.middle_name(), self.last_name()
        if order is NameOrder.FIRST_NAME:
            return _visible([first, *middles, last])
        return _visible([last, first, *middles])

    def full_name(self, order: NameOrder | str | None = None) -> str:
        """
        Prefix, birth name, suffix. With ``config.ending`` and a suffix present,
        the birth name ends with a comma: "Fabrice Piazza, Ph.D".
        """
        names: list[str] = []
        if self.prefix:
            names.append(self.prefix)
        birth = self._birth_parts(self._order(order))
        if self.suffix:
            if self._config.ending and birth:
                birth[-1] = f"{birth[-1]},"
            names.extend(birth)
            names.append(self.suffix)
        else:
            names.extend(birth)
        return " ".join(_visible(names))

    def birth_name(self, order: NameOrder | str | None = None) -> str:
        return " ".join(self._birth_parts(self._order(order)))

    def first_name(self, with_more: bool = True) -> str:
        return self._full_name.first_name.to_string(with_more=with_more)

    def middle_name(self) -> list[str]:
        return [n.value for n in self._full_name.middle_name]

    def last_name(self, surname: Surname | str | None = None) -> str:
        style = Surname.cast(surname, self._config.surname) if surname else self._config.surname
        return self._full_name.last_name.to_string(surname=style)

    def initials(
        self,
        order_by: NameOrder | str | None = None,
        only: NameType | str = NameType.BIRTH_NAME,
        as_json: bool = False,
    ) -> list[str] | dict[str, list[str]]:
        """
        Initials of the birth name in the effective order.

        ``only`` restricts to one role; ``as_json`` returns a per-role mapping.
        """
        first_name, last_name = self._full_name.first_name, self._full_name.last_name
        first_inits: list[str] = []
        if not _is_placeholder(first_name):
            first_inits = first_name.initials()
        mid_inits = [n.value[0] for n in self._full_name.middle_name]
        last_inits: list[str] = []
        if not _is_placeholder(last_name):
            last_inits = last_name.initials(surname=self._config.surname)

        if as_json:
            return {
                NameType.FIRST_NAME.value: first_inits,
                NameType.MIDDLE_NAME.value: mid_inits,
                NameType.LAST_NAME.value: last_inits,
            }

        role = NameType.cast(only, NameType.BIRTH_NAME)
        if role is NameType.FIRST_NAME:
            return first_inits
        if role is NameType.MIDDLE_NAME:
            return mid_inits
        if role is NameType.LAST_NAME:
            return last_inits

        if self._order(order_by) is NameOrder.FIRST_NAME:
            return [*first_inits, *mid_inits, *last_inits]
        return [*last_inits, *first_inits, *mid_inits]

    def shorten(self, order: NameOrder | str | None = None) -> str:
        """First name (without extra given names) and last name only."""
        first = self._full_name.first_name.value
        last = self.last_name()
        if self._order(order) is NameOrder.FIRST_NAME:
            return " ".join(_visible([first, last]))
        return " ".join(_visible([last, first]))

    # -------------------------------
    # Flatten / zip
    # -------------------------------
    def flatten(
        self,
        limit: int = 20,
        by: Flat | str = Flat.MIDDLE_NAME,
        with_period: bool = True,
        recursive: bool = False,
        with_more: bool = False,
        surname: Surname | str | None = None,
    ) -> str:
        """
        Reduce the birth name to fit ``limit`` characters.

        The full name is returned unchanged when it already fits. Otherwise
        the ``by`` variant is applied once, or, with ``recursive``, each
        variant from ``by`` onward until one fits (the last attempt is
        returned if none does).
        """
        return self._flatten(limit, by, with_period, recursive, with_more, surname, warn=True)

    def zip(self, by: Flat | str = Flat.MID_LAST, with_period: bool = True) -> str:
        """Always apply one reduction variant."""
        return self._flatten(0, by, with_period, False, False, None, warn=False)

    def _flatten(
        self,
        limit: int,
        by: Flat | str,
        with_period: bool,
        recursive: bool,
        with_more: bool,
        surname: Surname | str | None,
        warn: bool,
    ) -> str:
        if len(self.full) <= limit:
            return self.full

        start = Flat.cast(by, Flat.MIDDLE_NAME)
        variants = _FLAT_CASCADE[_FLAT_CASCADE.index(start) :] if recursive else (start,)
        style = Surname.cast(surname, self._config.surname) if surname else self._config.surname

        flat = ""
        for variant in variants:
            flat = self._flat(variant, with_period, with_more, style)
            if len(flat) <= limit:
                return flat
        if warn:
            log.warning("flatten: %r still exceeds %d characters (by=%s)", flat, limit, start.value)
        return flat

    def _flat(self, by: Flat, with_period: bool, with_more: bool, surname: Surname) -> str:
        sep = "." if with_period else ""
        joiner = f"{sep} "
        first_name, last_name = self._full_name.first_name, self._full_name.last_name
        middles = self._full_name.middle_name

        fn, fi = "", ""
        if not _is_placeholder(first_name):
            fn = first_name.to_string(with_more=with_more)
            fi = joiner.join(first_name.initials(with_more=with_more)) + sep
        ln, li = "", ""
        if not _is_placeholder(last_name):
            ln = last_name.to_string(surname=surname)
            li = joiner.join(last_name.initials(surname=surname)) + sep
        mn = " ".join(n.value for n in middles)
        mi = joiner.join(n.value[0] for n in middles) + sep if middles else ""

        if self._config.ordered_by is NameOrder.FIRST_NAME:
            variants = {
                Flat.FIRST_NAME: [fi, mn, ln],
                Flat.MIDDLE_NAME: [fn, mi, ln],
                Flat.LAST_NAME: [fn, mn, li],
                Flat.FIRST_MID: [fi, mi, ln],
                Flat.MID_LAST: [fn, mi, li],
                Flat.ALL: [fi, mi, li],
            }
        else:
            variants = {
                Flat.FIRST_NAME: [ln, fi, mn],
                Flat.MIDDLE_NAME: [ln, fn, mi],
                Flat.LAST_NAME: [li, fn, mn],
                Flat.FIRST_MID: [ln, fi, mi],
                Flat.MID_LAST: [li, fn, mi],
                Flat.ALL: [li, fi, mi],
            }
        return " ".join(p for p in variants[by] if p)

    # -------------------------------
    # Format
    # -------------------------------
    def format(self, pattern: str) -> str:
        """
        Render ``pattern`` character by character.

            b/B  birth name        f/F  first name       l/L  last name
            m/M  middle names      p/P  prefix           s/S  suffix
            o/O  official form     $f $l $m  initial only
            . , - _ and space are copied as-is

        Uppercase letters render uppercase. "short", "long", "public" and
        "official" are accepted as whole patterns.
        """
        if pattern in FORMAT_KEYWORDS:
            if pattern == "official":
                pattern = "o"
            else:
                return getattr(self, pattern)

        group = ""
        formatted: list[str] = []
        for char in pattern:
            if char not in ALLOWED_FORMAT_TOKENS:
                raise NotAllowedError(
                    self.full, "format", f"unsupported character <{char}> from {pattern}."
                )
            group += char
            if char == "$":
                continue
            formatted.append(self._map(group))
            group = ""
        return "".join(formatted).strip(_TRIM)

    def _map(self, token: str) -> str:
        if token in _PUNCTUATION:
            return token
        if token == "b":
            return self.birth
        if token == "B":
            return self.birth.upper()
        if token == "f":
            return self.first_name()
        if token == "F":
            return self.first_name().upper()
        if token == "l":
            return self.last_name()
        if token == "L":
            return self.last_name().upper()
        if token in ("m", "M"):
            middle = " ".join(self.middle_name())
            return middle if token == "m" else middle.upper()
        if token in ("o", "O"):
            official = self._official()
            return official if token == "o" else official.upper()
        if token in ("p", "P"):
            prefix = self.prefix or ""
            return prefix if token == "p" else prefix.upper()
        if token in ("s", "S"):
            suffix = self.suffix or ""
            return suffix if token == "s" else suffix.upper()
        if token in ("$f", "$F"):
            return self._full_name.first_name.value[0]
        if token in ("$l", "$L"):
            return self._full_name.last_name.value[0]
        if token in ("$m", "$M"):
            return self.middle[0] if self.middle else ""
        return ""

    def _official(self) -> str:
        names: list[str] = []
        if self.prefix:
            names.append(self.prefix)
        names.append(f"{self.last_name()},".upper())
        names.append(self.first_name())
        if self.has_middle:
            names.append(" ".join(self.middle_name()))
        if self.suffix:
            if self._config.ending:
                names[-1] = f"{names[-1]},"
            names.append(self.suffix)
        return " ".join(_visible(names))

    # -------------------------------
    # Case conversion
    # -------------------------------
    def flip(self) -> None:
        """Swap first/last-name order on the shared config (affects every holder)."""
        order = self._config.ordered_by.opposite
        self._config.update_order(order)
        log.debug("config %s now ordered by %s", self._config.name, order.value)

    def split(self, pattern: str | re.Pattern[str] = r"[' -]") -> list[str]:
        return [tok for tok in re.split(pattern, self.birth) if tok]

    def join(self, separator: str = "") -> str:
        return separator.join(self.split())

    def to_upper_case(self) -> str:
        return self.birth.upper()

    def to_lower_case(self) -> str:
        return self.birth.lower()

    def to_camel_case(self) -> str:
        return decapitalize(self.to_pascal_case())

    def to_pascal_case(self) -> str:
        return "".join(capitalize(tok) for tok in split_birth(self.birth))

    def to_snake_case(self) -> str:
        return "_".join(tok.lower() for tok in split_birth(self.birth))

    def to_hyphen_case(self) -> str:
        return "-".join(tok.lower() for tok in split_birth(self.birth))

    def to_dot_case(self) -> str:
        return ".".join(tok.lower() for tok in split_birth(self.birth))

    def to_toggle_case(self) -> str:
        return toggle_case(self.birth)


__all__ = ["Namefully"]
