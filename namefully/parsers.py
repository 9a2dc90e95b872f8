# namefully/parsers.py
"""
Parsers turn one raw input shape into a FullName.

    StringParser       "John Ben Smith"                  (split on config.separator)
    ArrayStringParser  ["John", "Ben", "Smith"]          (positioned by NameIndex)
    ArrayNameParser    [Name.first("John"), Name.last("Smith")]
    NamaParser         {"firstName": "John", "lastName": "Smith"}
    MonoParser         "Plato"                           (config.mono only)

Anything with a ``raw`` attribute and a ``parse(config)`` method satisfies
the Parser protocol and may be handed to Namefully in place of raw input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .config import Config
from .exceptions import InputError
from .fullname import FullName, Mononym
from .name import Name
from .types import Namon
from .utils import NameIndex
from .validators import Validators

log = logging.getLogger(__name__)


@runtime_checkable
class Parser(Protocol):
    raw: Any

    def parse(self, config: Config) -> FullName: ...


@dataclass
class StringParser:
    raw: str

    def parse(self, config: Config) -> FullName:
        token = config.separator.token
        names = self.raw.split(token) if token else [self.raw]
        return ArrayStringParser(names).parse(config)


@dataclass
class ArrayStringParser:
    raw: Sequence[str]

    def parse(self, config: Config) -> FullName:
        raw = []
        for value in self.raw:
            if not isinstance(value, str):
                raise InputError(list(self.raw), "expecting a list of strings")
            raw.append(value.strip())

        if config.mono and len(raw) == 1:
            return MonoParser(raw[0]).parse(config)

        index = NameIndex.when(config.ordered_by, len(raw))
        if config.bypass:
            Validators.array_string.validate_index(raw)
        else:
            Validators.array_string.validate(raw, index)

        count = len(raw)
        full = (
            FullName(config)
            .set_first_name(raw[index.first_name])
            .set_last_name(raw[index.last_name])
        )
        if count >= 3:
            full = full.set_middle_name(_split_middle(raw[index.middle_name], config))
        if count >= 4:
            full = full.set_prefix(raw[index.prefix])
        if count == 5:
            full = full.set_suffix(raw[index.suffix])
        return full


def _split_middle(value: str, config: Config) -> list[str]:
    token = config.separator.token
    parts = value.split(token) if token else [value]
    return [p.strip() for p in parts if p.strip()]


@dataclass
class ArrayNameParser:
    raw: Sequence[Name]

    def parse(self, config: Config) -> FullName:
        names = list(self.raw)
        if config.mono and len(names) == 1 and isinstance(names[0], Name):
            return MonoParser(names[0]).parse(config)

        Validators.array_name.validate(names)

        full = FullName(config)
        middles: list[Name] = []
        for name in names:
            if name.is_prefix:
                full = full.set_prefix(name)
            elif name.is_first_name:
                full = full.set_first_name(name)
            elif name.is_middle_name:
                middles.append(name)
            elif name.is_last_name:
                full = full.set_last_name(name.copy_with(surname=config.surname))
            else:
                full = full.set_suffix(name)
        return full.set_middle_name(middles)


@dataclass
class NamaParser:
    raw: Mapping[Any, Any]

    def as_nama(self) -> dict[Namon, Any]:
        """Role-keyed copy of the input; unknown or repeated keys raise InputError."""
        nama: dict[Namon, Any] = {}
        for key, value in self.raw.items():
            namon = Namon.from_key(key)
            if namon is None:
                raise InputError(dict(self.raw), f'unsupported key "{key}"')
            if namon in nama:
                raise InputError(dict(self.raw), f'duplicate key "{key}"')
            nama[namon] = value
        return nama

    def parse(self, config: Config) -> FullName:
        nama = self.as_nama()
        if config.bypass:
            Validators.nama.validate_keys(nama)
        else:
            Validators.nama.validate(nama)
        return FullName.parse({k.value: v for k, v in nama.items()}, config)


@dataclass
class MonoParser:
    raw: str | Name

    def parse(self, config: Config) -> FullName:
        namon = config.mono if isinstance(config.mono, Namon) else Namon.FIRST_NAME
        value = self.raw.value if isinstance(self.raw, Name) else self.raw.strip()
        return Mononym.of(value, namon, config)


# -------------------------------
# Best-effort parsing of free text
# -------------------------------
def build_parser(text: str, index: NameIndex | None = None) -> Parser:
    """
    Pick a parser for whitespace-separated free text.

    With ``index``, tokens are taken at the given positions (out-of-range
    positions are skipped). Otherwise 2-3 tokens go through StringParser and
    longer input is read as first name, middle names, last name: prefixes and
    suffixes are not detected here.
    """
    parts = text.split()
    length = len(parts)

    if index is not None:
        names = [
            Name(parts[position], namon)
            for namon, position in index.to_dict().items()
            if 0 <= position < length
        ]
        log.debug("build_parser: explicit index over %d token(s)", length)
        return ArrayNameParser(names)

    if length < 2:
        raise InputError(text, "cannot build from too few parts")
    if length <= 3:
        log.debug("build_parser: string parser for %d token(s)", length)
        return StringParser(" ".join(parts))

    first, *middles, last = parts
    log.debug("build_parser: collapsing %d middle token(s)", len(middles))
    return ArrayStringParser([first, " ".join(middles), last])


async def build_parser_async(text: str, index: NameIndex | None = None) -> Parser:
    return build_parser(text, index)


__all__ = [
    "ArrayNameParser",
    "ArrayStringParser",
    "MonoParser",
    "NamaParser",
    "Parser",
    "StringParser",
    "build_parser",
    "build_parser_async",
]
