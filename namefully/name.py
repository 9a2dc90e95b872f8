# namefully/name.py
"""
Name: one piece of a personal name (a "namon").

A single frozen value type tagged with its role. First names may carry
extra given names (``more``); last names may carry a mother surname and a
default join style. Everything else is a plain token.

    >>> Name.first("John", "Ben").to_string(with_more=True)
    'John Ben'
    >>> Name.last("Mebarak", "Ripoll").to_string(surname=Surname.HYPHENATED)
    'Mebarak-Ripoll'

Operations that "change" a name (caps, decaps, copy_with) return a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .constants import MIN_NAME_LENGTH, ZERO_WIDTH_SPACE
from .exceptions import InputError
from .types import CapsRange, Namon, Surname
from .utils import capitalize, decapitalize


def _check_token(value: Any, namon: Namon) -> None:
    if not isinstance(value, str):
        raise InputError(value, f"{namon.value} must be a string, got {type(value).__name__}")
    # mononym placeholders are the only sub-2-char tokens allowed
    if value == ZERO_WIDTH_SPACE:
        return
    if len(value.strip()) < MIN_NAME_LENGTH:
        raise InputError(value, f"must be {MIN_NAME_LENGTH}+ characters")


@dataclass(frozen=True, eq=False)
class Name:
    value: str
    type: Namon
    more: tuple[str, ...] = ()
    mother: str | None = None
    surname: Surname = Surname.FATHER
    caps_range: CapsRange | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        namon = Namon.cast(self.type)
        if namon is None:
            raise InputError(self.type, "unknown name type")
        object.__setattr__(self, "type", namon)

        _check_token(self.value, namon)
        more = tuple(self.more or ())
        if more and namon is not Namon.FIRST_NAME:
            raise InputError(list(more), "only first names carry extra given names")
        for token in more:
            _check_token(token, namon)
        object.__setattr__(self, "more", more)

        if self.mother is not None:
            if namon is not Namon.LAST_NAME:
                raise InputError(self.mother, "only last names carry a mother surname")
            _check_token(self.mother, namon)

        if self.caps_range:
            object.__setattr__(self, "value", capitalize(self.value, self.caps_range))
            object.__setattr__(
                self, "more", tuple(capitalize(t, self.caps_range) for t in self.more)
            )
            if self.mother is not None:
                object.__setattr__(self, "mother", capitalize(self.mother, self.caps_range))

    # ---- constructors ----
    @classmethod
    def prefix(cls, value: str, caps_range: CapsRange | None = None) -> Name:
        return cls(value, Namon.PREFIX, caps_range=caps_range)

    @classmethod
    def first(cls, value: str, *more: str, caps_range: CapsRange | None = None) -> Name:
        return cls(value, Namon.FIRST_NAME, more=more, caps_range=caps_range)

    @classmethod
    def middle(cls, value: str, caps_range: CapsRange | None = None) -> Name:
        return cls(value, Namon.MIDDLE_NAME, caps_range=caps_range)

    @classmethod
    def last(
        cls,
        father: str,
        mother: str | None = None,
        surname: Surname = Surname.FATHER,
        caps_range: CapsRange | None = None,
    ) -> Name:
        return cls(father, Namon.LAST_NAME, mother=mother, surname=surname, caps_range=caps_range)

    @classmethod
    def suffix(cls, value: str, caps_range: CapsRange | None = None) -> Name:
        return cls(value, Namon.SUFFIX, caps_range=caps_range)

    # ---- role predicates ----
    @property
    def is_prefix(self) -> bool:
        return self.type is Namon.PREFIX

    @property
    def is_first_name(self) -> bool:
        return self.type is Namon.FIRST_NAME

    @property
    def is_middle_name(self) -> bool:
        return self.type is Namon.MIDDLE_NAME

    @property
    def is_last_name(self) -> bool:
        return self.type is Namon.LAST_NAME

    @property
    def is_suffix(self) -> bool:
        return self.type is Namon.SUFFIX

    @property
    def father(self) -> str:
        return self.value

    @property
    def has_more(self) -> bool:
        return bool(self.more)

    @property
    def has_mother(self) -> bool:
        return bool(self.mother)

    @property
    def length(self) -> int:
        return len(self.to_string(with_more=True, surname=Surname.ALL))

    @property
    def as_names(self) -> list[Name]:
        """Each sub-token as its own plain name of the same role."""
        if self.type is Namon.FIRST_NAME:
            return [Name.first(t) for t in (self.value, *self.more)]
        if self.type is Namon.LAST_NAME:
            tokens = [self.value] + ([self.mother] if self.mother else [])
            return [Name.last(t) for t in tokens]
        return [self]

    # ---- rendering ----
    def to_string(self, *, with_more: bool = False, surname: Surname | None = None) -> str:
        if self.type is Namon.FIRST_NAME:
            if with_more and self.more:
                return " ".join((self.value, *self.more))
            return self.value
        if self.type is Namon.LAST_NAME:
            style = surname or self.surname
            if style is Surname.MOTHER:
                return self.mother or ""
            if style is Surname.HYPHENATED:
                return "-".join(t for t in (self.value, self.mother) if t)
            if style is Surname.ALL:
                return " ".join(t for t in (self.value, self.mother) if t)
            return self.value
        return self.value

    def initials(self, *, with_more: bool = False, surname: Surname | None = None) -> list[str]:
        if self.type is Namon.FIRST_NAME:
            tokens = [self.value, *self.more] if with_more else [self.value]
            return [t[0] for t in tokens]
        if self.type is Namon.LAST_NAME:
            style = surname or self.surname
            if style is Surname.MOTHER:
                return [self.mother[0]] if self.mother else []
            if style is Surname.FATHER:
                return [self.value[0]]
            return [t[0] for t in (self.value, self.mother) if t]
        return [self.value[0]]

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.type is other.type and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((self.type, str(self)))

    # ---- functional updates ----
    def copy_with(self, **changes: Any) -> Name:
        return replace(self, **changes)

    def caps(self, caps_range: CapsRange | None = None) -> Name:
        """Capitalize every token ("INITIAL" by default, or the stored hint)."""
        rng = caps_range if caps_range is not None else (self.caps_range or CapsRange.INITIAL)
        return replace(
            self,
            value=capitalize(self.value, rng),
            more=tuple(capitalize(t, rng) for t in self.more),
            mother=capitalize(self.mother, rng) if self.mother else self.mother,
            caps_range=None,
        )

    def decaps(self, caps_range: CapsRange | None = None) -> Name:
        rng = caps_range if caps_range is not None else (self.caps_range or CapsRange.INITIAL)
        return replace(
            self,
            value=decapitalize(self.value, rng),
            more=tuple(decapitalize(t, rng) for t in self.more),
            mother=decapitalize(self.mother, rng) if self.mother else self.mother,
            caps_range=None,
        )


__all__ = ["Name"]
