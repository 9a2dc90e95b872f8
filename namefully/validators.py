# namefully/validators.py
"""
Content and structure checks for name input.

Content rules are regexes over accented Latin, Greek and Cyrillic letters,
allowing a single apostrophe, hyphen or space between letters ("O'Neil",
"Day-Lewis", "Le Pen"). Digits and other punctuation are rejected.

- Content failures raise ValidationError (naming the failing role).
- Shape/arity/type failures raise InputError.

Callers skip content checks when their Config has ``bypass`` set; structural
checks (``validate_index``/``validate_keys`` and the Name-list rules) always run.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .constants import MAX_NUMBER_OF_NAME_PARTS, MIN_NUMBER_OF_NAME_PARTS
from .exceptions import InputError, ValidationError
from .name import Name
from .types import NameOrder, Namon
from .utils import NameIndex, is_valid_arity

# Letters accepted anywhere in a name token
_LETTER = r"[a-zA-ZÀ-ÖØ-öø-ÿЀ-ӿΆ-ώ]"

# Letters, joined by at most one apostrophe/hyphen/space at a time
NAMON_RE = re.compile(rf"^{_LETTER}+(?:[' -]{_LETTER}+)*$")
FIRST_NAME_RE = NAMON_RE
MIDDLE_NAME_RE = NAMON_RE
LAST_NAME_RE = NAMON_RE


class Validator(Protocol):
    def validate(self, value: Any) -> None: ...


def _check(value: str, pattern: re.Pattern[str], name_type: str) -> None:
    if not pattern.match(value):
        raise ValidationError(value, name_type, "invalid content")


# -------------------------------
# Per-role validators
# -------------------------------
class NamonValidator:
    """Single token (also used for prefix and suffix)."""

    def __init__(self, name_type: str = "namon") -> None:
        self.name_type = name_type

    def validate(self, value: Any) -> None:
        if isinstance(value, Name):
            _check(value.value, NAMON_RE, self.name_type)
        elif isinstance(value, str):
            _check(value, NAMON_RE, self.name_type)
        else:
            raise InputError(value, f"{self.name_type} must be a string or a Name")


class FirstNameValidator:
    name_type = Namon.FIRST_NAME.value

    def validate(self, value: Any) -> None:
        if isinstance(value, Name):
            for token in (value.value, *value.more):
                _check(token, FIRST_NAME_RE, self.name_type)
        elif isinstance(value, str):
            _check(value, FIRST_NAME_RE, self.name_type)
        else:
            raise InputError(value, "first name must be a string or a Name")


class MiddleNameValidator:
    """Accepts one token or a list of tokens/Names."""

    name_type = Namon.MIDDLE_NAME.value

    def validate(self, value: Any) -> None:
        if isinstance(value, str):
            _check(value, MIDDLE_NAME_RE, self.name_type)
        elif isinstance(value, Name):
            _check(value.value, MIDDLE_NAME_RE, self.name_type)
        elif isinstance(value, (list, tuple)):
            for item in value:
                if isinstance(item, Name):
                    _check(item.value, MIDDLE_NAME_RE, self.name_type)
                elif isinstance(item, str):
                    _check(item, MIDDLE_NAME_RE, self.name_type)
                else:
                    raise InputError(item, "middle names must be strings or Names")
        else:
            raise InputError(value, "middle name must be a string, a Name, or a list of them")


class LastNameValidator:
    name_type = Namon.LAST_NAME.value

    def validate(self, value: Any) -> None:
        if isinstance(value, Name):
            _check(value.value, LAST_NAME_RE, self.name_type)
            if value.mother:
                _check(value.mother, LAST_NAME_RE, self.name_type)
        elif isinstance(value, str):
            _check(value, LAST_NAME_RE, self.name_type)
        else:
            raise InputError(value, "last name must be a string or a Name")


# -------------------------------
# Composite validators (list/map input)
# -------------------------------
class NamaValidator:
    """Map of role keys (Namon) to string values."""

    def validate_keys(self, nama: Mapping[Namon, Any]) -> None:
        if not nama:
            raise InputError(nama, "Map<k,v> must not be empty")
        if not is_valid_arity(len(nama)):
            raise InputError(
                {k.value: v for k, v in nama.items()},
                f"expecting {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} fields",
            )
        if Namon.FIRST_NAME not in nama:
            raise InputError({k.value: v for k, v in nama.items()}, '"firstName" is a required key')
        if Namon.LAST_NAME not in nama:
            raise InputError({k.value: v for k, v in nama.items()}, '"lastName" is a required key')

    def validate(self, nama: Mapping[Namon, Any]) -> None:
        self.validate_keys(nama)
        for namon, value in nama.items():
            # structured first/last values are checked once they become Names
            if not isinstance(value, (str, list, tuple)):
                continue
            _ROLE_VALIDATORS[namon].validate(value)


class ArrayStringValidator:
    """Flat list of 2-5 string tokens, positioned by a NameIndex."""

    def validate_index(self, values: Sequence[Any]) -> None:
        if not is_valid_arity(len(values)):
            raise InputError(
                list(values),
                f"expecting a list of {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} elements",
            )

    def validate(self, values: Sequence[str], index: NameIndex | None = None) -> None:
        self.validate_index(values)
        index = index or NameIndex.when(NameOrder.FIRST_NAME, len(values))
        count = len(values)
        Validators.first_name.validate(values[index.first_name])
        Validators.last_name.validate(values[index.last_name])
        if count >= 3:
            Validators.middle_name.validate(values[index.middle_name])
        if count >= 4:
            Validators.prefix.validate(values[index.prefix])
        if count == 5:
            Validators.suffix.validate(values[index.suffix])


class ArrayNameValidator:
    """
    List of role-tagged Names.

    At least two entries with a first and a last name among them; middle
    names may repeat, so there is no upper bound on the list itself.
    """

    def validate(self, names: Sequence[Any]) -> None:
        if len(names) < MIN_NUMBER_OF_NAME_PARTS:
            raise InputError(list(names), f"expecting at least {MIN_NUMBER_OF_NAME_PARTS} elements")
        for name in names:
            if not isinstance(name, Name):
                raise InputError(name, "expecting a list of Name")
        roles = {name.type for name in names}
        if Namon.FIRST_NAME not in roles or Namon.LAST_NAME not in roles:
            raise InputError(
                [str(n) for n in names], "both first and last names are required"
            )


class Validators:
    """Shared validator instances, one per role/shape."""

    namon = NamonValidator()
    prefix = NamonValidator(Namon.PREFIX.value)
    first_name = FirstNameValidator()
    middle_name = MiddleNameValidator()
    last_name = LastNameValidator()
    suffix = NamonValidator(Namon.SUFFIX.value)
    nama = NamaValidator()
    array_string = ArrayStringValidator()
    array_name = ArrayNameValidator()


_ROLE_VALIDATORS: dict[Namon, Validator] = {
    Namon.PREFIX: Validators.prefix,
    Namon.FIRST_NAME: Validators.first_name,
    Namon.MIDDLE_NAME: Validators.middle_name,
    Namon.LAST_NAME: Validators.last_name,
    Namon.SUFFIX: Validators.suffix,
}


def validator_for(namon: Namon) -> Validator:
    return _ROLE_VALIDATORS[namon]


__all__ = [
    "ArrayNameValidator",
    "ArrayStringValidator",
    "FIRST_NAME_RE",
    "FirstNameValidator",
    "LAST_NAME_RE",
    "LastNameValidator",
    "MIDDLE_NAME_RE",
    "MiddleNameValidator",
    "NAMON_RE",
    "NamaValidator",
    "NamonValidator",
    "Validator",
    "Validators",
    "validator_for",
]
