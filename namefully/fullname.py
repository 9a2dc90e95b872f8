# namefully/fullname.py
"""
FullName: the structured name (prefix, first, middles, last, suffix).

Setters validate (unless the config bypasses content checks) and return a
new FullName, so a half-built value can be shared safely:

    full = FullName(config).set_first_name("John").set_last_name("Smith")
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from .config import Config, registry
from .constants import ZERO_WIDTH_SPACE
from .exceptions import InputError, NamefullyError, UnknownError
from .name import Name
from .types import Namon, Title
from .validators import Validators, validator_for


@dataclass(frozen=True, eq=False)
class FullName:
    config: Config
    prefix: Name | None = None
    first_name: Name | None = None
    middle_name: tuple[Name, ...] = ()
    last_name: Name | None = None
    suffix: Name | None = None

    @classmethod
    def parse(cls, json: Mapping[str, Any], config: Config | None = None) -> FullName:
        """
        Build from a role-keyed mapping.

        ``firstName`` may be a string or ``{"value", "more"}``; ``lastName`` a
        string or ``{"father", "mother"}``; ``middleName`` a string or a list.
        Unexpected (non-taxonomy) failures are wrapped in UnknownError.
        """
        config = config or registry.create()
        try:
            first = json["firstName"]
            if isinstance(first, Mapping):
                first = Name.first(first["value"], *(first.get("more") or ()))

            last = json["lastName"]
            if isinstance(last, Mapping):
                last = Name.last(last["father"], last.get("mother"), config.surname)

            return (
                cls(config)
                .set_prefix(json.get("prefix"))
                .set_first_name(first)
                .set_middle_name(json.get("middleName"))
                .set_last_name(last)
                .set_suffix(json.get("suffix"))
            )
        except NamefullyError:
            raise
        except Exception as err:
            raise UnknownError(dict(json), "could not parse JSON content", origin=err) from err

    def _replace(self, **changes: Any) -> FullName:
        return replace(self, **changes)

    # ---- setters ----
    def set_prefix(self, name: str | Name | None) -> FullName:
        """Store the prefix, appending "." for US titles when it's missing."""
        if name is None:
            return self._replace(prefix=None)
        value = name.value if isinstance(name, Name) else name
        if not isinstance(value, str):
            raise InputError(value, "prefix must be a string or a Name")
        us_title = self.config.title is Title.US
        if not self.config.bypass:
            # the period a US title adds is not part of the token
            Validators.prefix.validate(value.rstrip(".") if us_title else value)
        if us_title and not value.endswith("."):
            value = f"{value}."
        return self._replace(prefix=Name.prefix(value))

    def set_first_name(self, name: str | Name) -> FullName:
        if not self.config.bypass:
            Validators.first_name.validate(name)
        if isinstance(name, Name):
            first = name if name.is_first_name else Name.first(name.value)
        else:
            first = Name.first(name)
        return self._replace(first_name=first)

    def set_middle_name(self, names: str | Name | Sequence[str | Name] | None) -> FullName:
        if names is None:
            return self._replace(middle_name=())
        if isinstance(names, (str, Name)):
            names = [names]
        if not isinstance(names, (list, tuple)):
            raise InputError(names, "middle name must be a string, a Name, or a list of them")
        if not self.config.bypass:
            Validators.middle_name.validate(names)
        middles = []
        for n in names:
            if isinstance(n, Name):
                middles.append(n if n.is_middle_name else Name.middle(n.value))
            else:
                middles.append(Name.middle(n))
        return self._replace(middle_name=tuple(middles))

    def set_last_name(self, name: str | Name) -> FullName:
        if not self.config.bypass:
            Validators.last_name.validate(name)
        if isinstance(name, Name):
            last = name if name.is_last_name else Name.last(name.value, surname=self.config.surname)
        else:
            last = Name.last(name, surname=self.config.surname)
        return self._replace(last_name=last)

    def set_suffix(self, name: str | Name | None) -> FullName:
        if name is None:
            return self._replace(suffix=None)
        if not self.config.bypass:
            Validators.suffix.validate(name)
        value = name.value if isinstance(name, Name) else name
        return self._replace(suffix=Name.suffix(value))

    # ---- reads ----
    @property
    def is_complete(self) -> bool:
        return self.first_name is not None and self.last_name is not None

    def ensure_complete(self) -> FullName:
        if not self.is_complete:
            raise InputError(
                [str(n) for n in self.to_list()], "both first and last names are required"
            )
        return self

    def has(self, namon: Namon | str) -> bool:
        role = Namon.from_key(namon)
        if role is Namon.PREFIX:
            return self.prefix is not None
        if role is Namon.SUFFIX:
            return self.suffix is not None
        if role is Namon.MIDDLE_NAME:
            return len(self.middle_name) > 0
        if role is Namon.FIRST_NAME:
            return self.first_name is not None
        if role is Namon.LAST_NAME:
            return self.last_name is not None
        return False

    def get(self, namon: Namon | str) -> Name | list[Name] | None:
        role = Namon.from_key(namon)
        if role is Namon.PREFIX:
            return self.prefix
        if role is Namon.FIRST_NAME:
            return self.first_name
        if role is Namon.MIDDLE_NAME:
            return list(self.middle_name)
        if role is Namon.LAST_NAME:
            return self.last_name
        if role is Namon.SUFFIX:
            return self.suffix
        return None

    def to_list(self, flat: bool = False) -> list[Name]:
        """
        Parts in canonical order, unset roles skipped.

        With ``flat``, first and last names are exploded into their sub-tokens
        (extra given names, mother surname).
        """
        names: list[Name] = []
        if self.prefix is not None:
            names.append(self.prefix)
        if self.first_name is not None:
            names.extend(self.first_name.as_names if flat else [self.first_name])
        names.extend(self.middle_name)
        if self.last_name is not None:
            names.extend(self.last_name.as_names if flat else [self.last_name])
        if self.suffix is not None:
            names.append(self.suffix)
        return names

    def __iter__(self) -> Iterator[Name]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self.to_list())


# -------------------------------
# Mononym
# -------------------------------
@dataclass(frozen=True, eq=False)
class Mononym(FullName):
    """
    A one-word name ("Plato") kept in the five-slot shape.

    First and last name hold a zero-width-space placeholder unless the real
    token is assigned to one of them.
    """

    mono_type: Namon = Namon.FIRST_NAME

    @classmethod
    def of(
        cls,
        name: str | Name,
        type: Namon | str = Namon.FIRST_NAME,
        config: Config | None = None,
    ) -> Mononym:
        config = config or registry.create()
        value = name.value if isinstance(name, Name) else name
        namon = Namon.cast(type, Namon.FIRST_NAME)
        if not config.bypass:
            validator_for(namon).validate(value)

        slots: dict[str, Any] = {
            "first_name": Name.first(ZERO_WIDTH_SPACE),
            "last_name": Name.last(ZERO_WIDTH_SPACE),
        }
        if namon is Namon.PREFIX:
            slots["prefix"] = Name.prefix(value)
        elif namon is Namon.FIRST_NAME:
            slots["first_name"] = Name.first(value)
        elif namon is Namon.MIDDLE_NAME:
            slots["middle_name"] = (Name.middle(value),)
        elif namon is Namon.LAST_NAME:
            slots["last_name"] = Name.last(value, surname=config.surname)
        else:
            slots["suffix"] = Name.suffix(value)
        return cls(config, mono_type=namon, **slots)

    @property
    def value(self) -> str:
        name = self.get(self.mono_type)
        if isinstance(name, list):
            return name[0].value
        return name.value

    def with_type(self, type: Namon | str) -> Mononym:
        """Same token, reassigned to another role."""
        return Mononym.of(self.value, type, self.config)

    def __str__(self) -> str:
        return self.value


__all__ = ["FullName", "Mononym"]
