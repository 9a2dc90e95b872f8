# tests/test_config.py
from __future__ import annotations

import os

import pytest

from namefully.config import Config, ConfigRegistry, registry
from namefully.exceptions import InputError
from namefully.types import NameOrder, Namon, Separator, Surname, Title


def test_create_uses_defaults(fresh_registry: ConfigRegistry):
    config = fresh_registry.create()
    assert config.name == "default"
    assert config.ordered_by is NameOrder.FIRST_NAME
    assert config.separator is Separator.SPACE
    assert config.title is Title.UK
    assert config.ending is False
    assert config.bypass is True
    assert config.surname is Surname.FATHER
    assert config.mono is False


def test_same_name_same_config(fresh_registry: ConfigRegistry):
    assert fresh_registry.create("a") is fresh_registry.create("a")
    assert fresh_registry.create("a") is not fresh_registry.create("b")
    assert "a" in fresh_registry and "b" in fresh_registry
    assert len(fresh_registry) == 2


def test_merge_writes_over_cached_entry(fresh_registry: ConfigRegistry):
    merged = fresh_registry.merge({"name": "x", "title": "US", "ending": True})
    assert fresh_registry.create("x") is merged
    assert merged.title is Title.US
    assert merged.ending is True
    # untouched fields keep their values
    assert merged.surname is Surname.FATHER


def test_merge_accepts_camel_case_and_aliases(fresh_registry: ConfigRegistry):
    config = fresh_registry.merge(orderedBy="ln", separator=",", surname="hyphen", mono="lastName")
    assert config.ordered_by is NameOrder.LAST_NAME
    assert config.separator is Separator.COMMA
    assert config.surname is Surname.HYPHENATED
    assert config.mono is Namon.LAST_NAME


def test_merge_never_raises_on_odd_values(fresh_registry: ConfigRegistry):
    config = fresh_registry.merge({"title": "nope", "nickname": "JJ", "bypass": None})
    assert config.title is Title.UK
    assert config.bypass is True


def test_merge_without_options_is_default(fresh_registry: ConfigRegistry):
    assert fresh_registry.merge() is fresh_registry.create("default")


def test_copy_with_generates_unique_names(fresh_registry: ConfigRegistry):
    config = fresh_registry.create("config")
    copy = config.copy_with(name="config")
    assert copy.name == "config_copy"
    assert copy.clone().name == "config_copy_copy"
    assert fresh_registry.names() == ["config", "config_copy", "config_copy_copy"]


def test_copy_with_overrides_without_touching_the_source(fresh_registry: ConfigRegistry):
    config = fresh_registry.create("base")
    other = config.copy_with(name="other", title="US", ordered_by="lastName")
    assert other.name == "other"
    assert other.title is Title.US
    assert other.ordered_by is NameOrder.LAST_NAME
    assert config.title is Title.UK
    assert config.ordered_by is NameOrder.FIRST_NAME


def test_update_mutates_in_place(fresh_registry: ConfigRegistry):
    config = fresh_registry.create("u")
    config.update(ordered_by="lastName", title=Title.US, ending=True)
    again = fresh_registry.create("u")
    assert again.ordered_by is NameOrder.LAST_NAME
    assert again.title is Title.US
    assert again.ending is True


def test_update_registers_a_hand_built_config(fresh_registry: ConfigRegistry):
    solo = Config(name="solo", registry=fresh_registry)
    solo.update(ordered_by=NameOrder.LAST_NAME)
    assert solo.ordered_by is NameOrder.LAST_NAME
    assert fresh_registry.get("solo") is solo


def test_update_leaves_the_cached_namesake_alone(fresh_registry: ConfigRegistry):
    cached = fresh_registry.create("shared")
    twin = Config(name="shared", registry=fresh_registry)
    twin.update(ordered_by="lastName", ending=True)
    assert twin.ordered_by is NameOrder.LAST_NAME
    assert twin.ending is True
    assert cached.ordered_by is NameOrder.FIRST_NAME
    assert cached.ending is False
    assert fresh_registry.get("shared") is cached


def test_reset_restores_defaults(fresh_registry: ConfigRegistry):
    config = fresh_registry.merge(name="r", title="US", surname="all", bypass=False)
    config.reset()
    assert fresh_registry.create("r") is config
    assert config.title is Title.UK
    assert config.surname is Surname.FATHER
    assert config.bypass is True


def test_to_dict_shape(fresh_registry: ConfigRegistry):
    assert fresh_registry.create().to_dict() == {
        "name": "default",
        "orderedBy": "firstName",
        "separator": " ",
        "title": "UK",
        "ending": False,
        "bypass": True,
        "surname": "father",
    }


def test_defaults_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NAMEFULLY_TITLE", "period")
    monkeypatch.setenv("NAMEFULLY_BYPASS", "0")
    monkeypatch.setenv("NAMEFULLY_SEPARATOR", ",")
    monkeypatch.setenv("NAMEFULLY_ORDERED_BY", "lastName")
    config = ConfigRegistry().create()
    assert config.title is Title.US
    assert config.bypass is False
    assert config.separator is Separator.COMMA
    assert config.ordered_by is NameOrder.LAST_NAME


def test_dotenv_file_is_opt_in(tmp_path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".env").write_text("NAMEFULLY_TITLE=US\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert ConfigRegistry().create().title is Title.UK


def test_dotenv_file_fills_unset_variables(tmp_path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "names.env"
    path.write_text("NAMEFULLY_TITLE=US\nNAMEFULLY_SURNAME=all\n", encoding="utf-8")
    monkeypatch.setenv("NAMEFULLY_SURNAME", "mother")
    config = ConfigRegistry(dotenv_path=path).create()
    assert config.title is Title.US
    assert config.surname is Surname.MOTHER
    assert "NAMEFULLY_TITLE" not in os.environ


def test_bad_environment_values_fall_back(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NAMEFULLY_SURNAME", "grandmother")
    assert ConfigRegistry().create().surname is Surname.FATHER


def test_clear_forgets_everything():
    registry.create("temp")
    registry.clear()
    assert "temp" not in registry
    assert len(registry) == 0


class TestLoadYaml:
    def test_load_named_configs(self, tmp_path, fresh_registry: ConfigRegistry):
        path = tmp_path / "names.yaml"
        path.write_text(
            "configs:\n"
            "  american:\n"
            "    title: US\n"
            "    ordered_by: lastName\n"
            "  hyphenated:\n"
            "    surname: hyphenated\n"
            "    ending: true\n",
            encoding="utf-8",
        )
        loaded = fresh_registry.load(path)
        assert [c.name for c in loaded] == ["american", "hyphenated"]
        assert fresh_registry.create("american").title is Title.US
        assert fresh_registry.create("american").ordered_by is NameOrder.LAST_NAME
        assert fresh_registry.create("hyphenated").surname is Surname.HYPHENATED
        assert fresh_registry.create("hyphenated").ending is True

    def test_top_level_mapping_without_configs_key(self, tmp_path, fresh_registry):
        path = tmp_path / "flat.yaml"
        path.write_text("plain: {}\n", encoding="utf-8")
        loaded = fresh_registry.load(path)
        assert loaded[0].name == "plain"
        assert loaded[0].title is Title.UK

    def test_non_mapping_file_is_rejected(self, tmp_path, fresh_registry):
        path = tmp_path / "bad.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(InputError):
            fresh_registry.load(path)
