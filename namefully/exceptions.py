# namefully/exceptions.py
"""
Error taxonomy raised across the package.

All errors derive from NamefullyError and carry the offending ``source``
(a string, a list of strings/names, or a mapping) plus a human-readable
message. The subclass tells callers what went wrong:

- InputError: wrong shape, arity, missing role, or wrong runtime type.
- ValidationError: well-shaped content that fails a role's rules.
- NotAllowedError: an operation refused for the given arguments.
- UnknownError: anything else caught while bridging layers.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class NameErrorType(str, Enum):
    INPUT = "InputError"
    VALIDATION = "ValidationError"
    NOT_ALLOWED = "NotAllowedError"
    UNKNOWN = "UnknownError"


def _render(source: Any) -> str:
    if source is None:
        return "<undefined>"
    if isinstance(source, str):
        return source
    if isinstance(source, Mapping):
        return " ".join(f"{k}: {_render(v)}" for k, v in source.items())
    if isinstance(source, (list, tuple)):
        return " ".join(_render(s) for s in source)
    return str(source)


class NamefullyError(Exception):
    """Base class for every error this package raises on purpose."""

    type = NameErrorType.UNKNOWN

    def __init__(self, source: Any = None, message: str = "") -> None:
        self.source = source
        self.message = message
        super().__init__(str(self))

    @property
    def source_as_string(self) -> str:
        return _render(self.source)

    @property
    def has_message(self) -> bool:
        return bool(self.message.strip())

    def __str__(self) -> str:
        report = f"{self.type.value} ({self.source_as_string})"
        if self.has_message:
            report = f"{report}: {self.message}"
        return report


class InputError(NamefullyError):
    """Raised when the input has the wrong shape, arity, or type."""

    type = NameErrorType.INPUT


class ValidationError(NamefullyError):
    """
    Raised when a token fails its role's content rules.

    ``name_type`` names the failing role ("firstName", "middleName", "prefix"...).
    """

    type = NameErrorType.VALIDATION

    def __init__(self, source: Any = None, name_type: str = "", message: str = "") -> None:
        self.name_type = name_type
        super().__init__(source, message)

    def __str__(self) -> str:
        report = f"{self.type.value} ({self.name_type}='{self.source_as_string}')"
        if self.has_message:
            report = f"{report}: {self.message}"
        return report


class NotAllowedError(NamefullyError):
    """Raised when an operation refuses its arguments, e.g. a bad format pattern."""

    type = NameErrorType.NOT_ALLOWED

    def __init__(self, source: Any = None, operation: str = "", message: str = "") -> None:
        self.operation = operation
        super().__init__(source, message)

    def __str__(self) -> str:
        report = f"{self.type.value} ({self.source_as_string})"
        if self.operation.strip():
            report = f"{report} - {self.operation}"
        if self.has_message:
            report = f"{report}: {self.message}"
        return report


class UnknownError(NamefullyError):
    """
    Wraps an unexpected exception caught at a bridging boundary.

    The wrapped exception is kept on ``origin``; raise sites also chain it
    with ``raise ... from origin``.
    """

    type = NameErrorType.UNKNOWN

    def __init__(
        self, source: Any = None, message: str = "", origin: BaseException | None = None
    ) -> None:
        self.origin = origin
        super().__init__(source, message)

    def __str__(self) -> str:
        report = super().__str__()
        if self.origin is not None:
            report = f"{report}\n{type(self.origin).__name__}: {self.origin}"
        return report


__all__ = [
    "InputError",
    "NameErrorType",
    "NamefullyError",
    "NotAllowedError",
    "UnknownError",
    "ValidationError",
]
