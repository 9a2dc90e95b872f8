# tests/test_builder.py
from __future__ import annotations

import pytest

from namefully import Namefully
from namefully.builder import NameBuilder
from namefully.exceptions import InputError
from namefully.name import Name
from namefully.types import NameOrder


class TestQueue:
    def test_add_and_size(self):
        builder = NameBuilder.create(Name.first("John"))
        builder.add(Name.middle("Ben"), Name.last("Smith"))
        assert builder.size == 3
        assert len(builder) == 3

    def test_add_first_and_last(self):
        builder = NameBuilder.of(Name.first("John"))
        builder.add_first(Name.prefix("Mr"))
        builder.add_last(Name.suffix("Ph.D"))
        assert [str(n) for n in builder.names()] == ["Mr", "John", "Ph.D"]

    def test_remove(self):
        smith = Name.last("Smith")
        builder = NameBuilder.of(Name.first("John"), smith)
        assert builder.remove(smith)
        assert not builder.remove(Name.last("Doe"))
        assert builder.size == 1

    def test_remove_matches_the_same_object(self):
        first, twin = Name.middle("Ben"), Name.middle("Ben")
        builder = NameBuilder.of(first, twin)
        assert not builder.remove(Name.middle("Ben"))
        assert builder.remove(twin)
        assert builder.names()[0] is first

    def test_remove_first_and_last(self):
        builder = NameBuilder.of(Name.prefix("Mr"), Name.first("John"), Name.last("Smith"))
        assert builder.remove_first() == Name.prefix("Mr")
        assert builder.remove_last() == Name.last("Smith")
        assert builder.names() == [Name.first("John")]

    def test_remove_from_empty_queue(self):
        builder = NameBuilder.create()
        assert builder.remove_first() is None
        assert builder.remove_last() is None

    def test_remove_and_retain_where(self):
        builder = NameBuilder.of(
            Name.first("John"), Name.middle("Ben"), Name.middle("Carl"), Name.last("Smith")
        )
        builder.remove_where(lambda n: n.is_middle_name)
        assert [str(n) for n in builder.names()] == ["John", "Smith"]
        builder.retain_where(lambda n: n.is_last_name)
        assert [str(n) for n in builder.names()] == ["Smith"]

    def test_names_is_a_copy(self):
        builder = NameBuilder.of(Name.first("John"))
        builder.names().append(Name.last("Smith"))
        assert builder.size == 1


class TestBuild:
    def test_build(self):
        builder = NameBuilder.of(Name.first("John"), Name.last("Smith"))
        builder.add(Name.middle("Ben"))
        name = builder.build()
        assert isinstance(name, Namefully)
        assert name.full == "John Ben Smith"

    def test_build_with_options(self):
        builder = NameBuilder.of(Name.first("Barack"), Name.last("Obama"))
        name = builder.build({"name": "obama", "ordered_by": "lastName"})
        assert name.config.ordered_by is NameOrder.LAST_NAME
        assert name.full == "Obama Barack"

    def test_build_with_own_registry(self, fresh_registry):
        name = NameBuilder.of(Name.first("John"), Name.last("Smith")).build(
            {"name": "local"}, registry=fresh_registry
        )
        assert name.config is fresh_registry.create("local")

    @pytest.mark.parametrize(
        "names",
        [
            [],
            [Name.first("John")],
            [Name.first("John"), Name.middle("Ben")],
            [Name.prefix("Mr"), Name.last("Smith")],
        ],
    )
    def test_incomplete_queue(self, names):
        with pytest.raises(InputError):
            NameBuilder(names).build()


class TestHooks:
    def test_lifecycle_order(self):
        calls = []
        builder = NameBuilder.use(
            prebuild=lambda: calls.append("prebuild"),
            postbuild=lambda name: calls.append(("postbuild", name.full)),
            preclear=lambda name: calls.append(("preclear", name.full if name else None)),
            postclear=lambda: calls.append("postclear"),
        )
        builder.add(Name.first("John"), Name.last("Smith"))
        builder.build()
        builder.clear()
        builder.clear()
        assert calls == [
            "prebuild",
            ("postbuild", "John Smith"),
            ("preclear", "John Smith"),
            "postclear",
            "postclear",
        ]
        assert builder.size == 0

    def test_preclear_skipped_before_any_build(self):
        calls = []
        builder = NameBuilder.use(
            [Name.first("John"), Name.last("Smith")],
            preclear=lambda name: calls.append("preclear"),
            postclear=lambda: calls.append("postclear"),
        )
        builder.clear()
        assert calls == ["postclear"]
        assert builder.size == 0

    def test_prebuild_runs_before_validation(self):
        calls = []
        builder = NameBuilder(
            [Name.first("John")],
            prebuild=lambda: calls.append("prebuild"),
            postbuild=lambda name: calls.append("postbuild"),
        )
        with pytest.raises(InputError):
            builder.build()
        assert calls == ["prebuild"]

    def test_hooks_can_be_assigned_later(self):
        seen = []
        builder = NameBuilder.of(Name.first("John"), Name.last("Smith"))
        builder.postbuild = lambda name: seen.append(name.short)
        builder.build()
        assert seen == ["John Smith"]
