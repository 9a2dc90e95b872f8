# namefully/__init__.py
"""Parse, validate and format personal names."""

from __future__ import annotations

from .builder import NameBuilder
from .config import Config, ConfigRegistry, registry
from .constants import VERSION
from .data import deserialize, serialize
from .exceptions import (
    InputError,
    NameErrorType,
    NamefullyError,
    NotAllowedError,
    UnknownError,
    ValidationError,
)
from .fullname import FullName, Mononym
from .name import Name
from .namefully import Namefully
from .parsers import (
    ArrayNameParser,
    ArrayStringParser,
    MonoParser,
    NamaParser,
    Parser,
    StringParser,
    build_parser,
)
from .types import CapsRange, Flat, NameOrder, NameType, Namon, Separator, Surname, Title
from .utils import NameIndex

__version__ = VERSION

__all__ = [
    "ArrayNameParser",
    "ArrayStringParser",
    "CapsRange",
    "Config",
    "ConfigRegistry",
    "Flat",
    "FullName",
    "InputError",
    "MonoParser",
    "NamaParser",
    "Name",
    "NameBuilder",
    "NameErrorType",
    "NameIndex",
    "NameOrder",
    "NameType",
    "Namefully",
    "NamefullyError",
    "Namon",
    "Mononym",
    "NotAllowedError",
    "Parser",
    "Separator",
    "StringParser",
    "Surname",
    "Title",
    "UnknownError",
    "ValidationError",
    "build_parser",
    "deserialize",
    "registry",
    "serialize",
]
