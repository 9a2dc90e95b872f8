# ruff: noqa: E402
# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namefully import Name, Namefully
from namefully.config import ConfigRegistry, registry

_ENV_VARS = (
    "NAMEFULLY_ORDERED_BY",
    "NAMEFULLY_SEPARATOR",
    "NAMEFULLY_TITLE",
    "NAMEFULLY_ENDING",
    "NAMEFULLY_BYPASS",
    "NAMEFULLY_SURNAME",
)


@pytest.fixture(autouse=True)
def _isolated_registry(monkeypatch: pytest.MonkeyPatch):
    """Every test starts from built-in defaults and an empty default registry."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def fresh_registry() -> ConfigRegistry:
    return ConfigRegistry()


@pytest.fixture
def john() -> Namefully:
    return Namefully("Mr John Ben Smith Ph.D")


@pytest.fixture
def many_first_names() -> Namefully:
    return Namefully([Name.first("Daniel", "Michael", "Blake"), Name.last("Day-Lewis")])


@pytest.fixture
def many_middle_names() -> Namefully:
    return Namefully(
        [
            Name.first("Emilia"),
            Name.middle("Isobel"),
            Name.middle("Euphemia"),
            Name.middle("Rose"),
            Name.last("Clarke"),
        ]
    )


@pytest.fixture
def many_last_names() -> Namefully:
    return Namefully(
        [Name.first("Shakira", "Isabel"), Name.last("Mebarak", "Ripoll")],
        {"name": "shakira", "surname": "mother"},
    )


@pytest.fixture
def by_last_name() -> Namefully:
    return Namefully("Obama Barack", {"name": "byLastName", "ordered_by": "lastName"})
