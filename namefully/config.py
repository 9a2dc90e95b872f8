# namefully/config.py
"""
Named configurations and the registry that owns them.

A Config is looked up by name: two lookups with the same name return the
same object, so ``update()``/``reset()`` on it are seen by every holder.
The registry is an explicit object; ``registry`` below is the process
default used when callers don't pass their own.

Built-in defaults can be overridden from the environment, or from a .env
file passed as ``ConfigRegistry(dotenv_path=...)``:

    NAMEFULLY_ORDERED_BY   firstName | lastName (aliases: fn, ln, ...)
    NAMEFULLY_SEPARATOR    " " | "," | "comma" | ...
    NAMEFULLY_TITLE        UK | US (aliases: period, noperiod, ...)
    NAMEFULLY_ENDING       bool
    NAMEFULLY_BYPASS       bool
    NAMEFULLY_SURNAME      father | mother | hyphenated | all
"""

from __future__ import annotations

import logging
import os
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values

from .exceptions import InputError
from .types import NameOrder, Namon, Separator, Surname, Title

log = logging.getLogger(__name__)

DEFAULT_NAME = "default"
_COPY_ALIAS = "_copy"

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _getenv_str(env: Mapping[str, str], name: str, default: str) -> str:
    return env.get(name, default).strip()


def _getenv_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    """
    Read a loosely-typed boolean from the environment.

    Treats "1", "true", "yes", "on" (case-insensitive) as True;
    "0", "false", "no", "off", "" as False. If unset, returns default.
    """
    raw = env.get(name)
    if raw is None:
        return default
    return _as_bool(raw, default)


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "on"}:
            return True
        if v in {"0", "false", "no", "off", ""}:
            return False
    return default


@dataclass(frozen=True)
class ConfigDefaults:
    ordered_by: NameOrder = NameOrder.FIRST_NAME
    separator: Separator = Separator.SPACE
    title: Title = Title.UK
    ending: bool = False
    bypass: bool = True
    surname: Surname = Surname.FATHER


def load_defaults(dotenv_path: str | Path | None = None) -> ConfigDefaults:
    """
    Built-in defaults, overridden by NAMEFULLY_* variables.

    Values from ``dotenv_path`` fill in variables the process environment
    leaves unset. The file is read, never loaded into os.environ.
    """
    env: dict[str, str] = {}
    if dotenv_path is not None:
        env.update((k, v) for k, v in dotenv_values(dotenv_path).items() if v is not None)
    env.update(os.environ)

    base = ConfigDefaults()
    return ConfigDefaults(
        ordered_by=NameOrder.cast(
            _getenv_str(env, "NAMEFULLY_ORDERED_BY", base.ordered_by.value), base.ordered_by
        ),
        separator=Separator.cast(
            env.get("NAMEFULLY_SEPARATOR", base.separator.value), base.separator
        ),
        title=Title.cast(_getenv_str(env, "NAMEFULLY_TITLE", base.title.value), base.title),
        ending=_getenv_bool(env, "NAMEFULLY_ENDING", base.ending),
        bypass=_getenv_bool(env, "NAMEFULLY_BYPASS", base.bypass),
        surname=Surname.cast(
            _getenv_str(env, "NAMEFULLY_SURNAME", base.surname.value), base.surname
        ),
    )


# -------------------------------
# Config
# -------------------------------
@dataclass
class Config:
    """
    Formatting/validation options for a name, registered under ``name``.

    Prefer ``ConfigRegistry.create()``/``merge()`` over calling this directly.
    A Config built by hand joins its registry on the first ``update()``.
    """

    name: str = DEFAULT_NAME
    ordered_by: NameOrder = NameOrder.FIRST_NAME
    separator: Separator = Separator.SPACE
    title: Title = Title.UK
    ending: bool = False
    bypass: bool = True
    surname: Surname = Surname.FATHER
    mono: bool | Namon = False
    registry: ConfigRegistry | None = field(default=None, repr=False, compare=False)

    @property
    def _registry(self) -> ConfigRegistry:
        return self.registry if self.registry is not None else registry

    def copy_with(self, **options: Any) -> Config:
        """
        Derive a new registered config from this one.

        The new name is ``options["name"]`` (or this config's name) suffixed
        with "_copy" until it no longer clashes with this config or the cache.
        """
        return self._registry.copy(self, options)

    def clone(self) -> Config:
        return self.copy_with()

    def update(
        self,
        ordered_by: NameOrder | str | None = None,
        title: Title | str | None = None,
        ending: bool | None = None,
    ) -> None:
        """
        Change this config in place; unchanged values are left alone.

        An unregistered config is registered under its name first. When
        another config already owns the name, that one is not touched.
        """
        order = NameOrder.cast(ordered_by) if ordered_by is not None else None
        style = Title.cast(title) if title is not None else None
        reg = self._registry
        with reg.lock:
            reg.adopt(self)
            if order is not None and order is not self.ordered_by:
                self.ordered_by = order
            if style is not None and style is not self.title:
                self.title = style
            if ending is not None and ending != self.ending:
                self.ending = ending

    def update_order(self, order: NameOrder | str) -> None:
        self.update(ordered_by=order)

    def reset(self) -> None:
        """Restore default values in place, keeping the name."""
        defaults = self._registry.defaults
        with self._registry.lock:
            self.ordered_by = defaults.ordered_by
            self.separator = defaults.separator
            self.title = defaults.title
            self.ending = defaults.ending
            self.bypass = defaults.bypass
            self.surname = defaults.surname
            self.mono = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "orderedBy": self.ordered_by.value,
            "separator": self.separator.token,
            "title": self.title.value,
            "ending": self.ending,
            "bypass": self.bypass,
            "surname": self.surname.value,
        }


_OPTION_FIELDS = {f.name for f in fields(Config)} - {"name", "registry"}


def _option_key(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _coerce(config: Config, key: str, value: Any) -> Any:
    """Cast an option value onto ``config``'s current value; never raises."""
    current = getattr(config, key)
    if key == "ordered_by":
        return NameOrder.cast(value, current)
    if key == "separator":
        return Separator.cast(value, current)
    if key == "title":
        return Title.cast(value, current)
    if key == "surname":
        return Surname.cast(value, current)
    if key == "mono":
        if isinstance(value, bool):
            return value
        return Namon.cast(value, current)
    return _as_bool(value, current)


# -------------------------------
# Registry
# -------------------------------
class ConfigRegistry:
    """Name-keyed cache of Config objects."""

    def __init__(
        self,
        defaults: ConfigDefaults | None = None,
        *,
        dotenv_path: str | Path | None = None,
    ) -> None:
        self._cache: dict[str, Config] = {}
        self._defaults = defaults
        self._dotenv_path = dotenv_path
        self.lock = threading.RLock()

    @property
    def defaults(self) -> ConfigDefaults:
        if self._defaults is None:
            self._defaults = load_defaults(self._dotenv_path)
        return self._defaults

    def __contains__(self, name: object) -> bool:
        return name in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, name: str) -> Config | None:
        return self._cache.get(name)

    def names(self) -> list[str]:
        return list(self._cache)

    def adopt(self, config: Config) -> Config:
        """Cache ``config`` under its name unless the name is taken; return the owner."""
        with self.lock:
            return self._cache.setdefault(config.name, config)

    def create(self, name: str = DEFAULT_NAME) -> Config:
        """Return the config cached under ``name``, creating it with defaults."""
        with self.lock:
            config = self._cache.get(name)
            if config is None:
                d = self.defaults
                config = Config(
                    name=name,
                    ordered_by=d.ordered_by,
                    separator=d.separator,
                    title=d.title,
                    ending=d.ending,
                    bypass=d.bypass,
                    surname=d.surname,
                    registry=self,
                )
                self._cache[name] = config
                log.debug("config created: %s", name)
            return config

    def merge(self, options: Mapping[str, Any] | Config | None = None, **kwargs: Any) -> Config:
        """
        Write the given options over the config cached under ``options["name"]``
        (default "default") and return it.

        Keys may be snake_case or camelCase; values go through the enums'
        ``cast()``. Unknown keys are ignored.
        """
        opts = _options_of(options)
        opts.update(kwargs)
        name = opts.pop("name", None) or DEFAULT_NAME
        with self.lock:
            config = self.create(name)
            for key, value in opts.items():
                if value is None:
                    continue
                attr = _option_key(key)
                if attr not in _OPTION_FIELDS:
                    log.debug("config %s: ignoring unknown option %r", name, key)
                    continue
                setattr(config, attr, _coerce(config, attr, value))
            return config

    def copy(self, config: Config, options: Mapping[str, Any] | None = None) -> Config:
        opts = _options_of(options)
        with self.lock:
            name = opts.pop("name", None) or config.name
            while name == config.name or name in self._cache:
                name = f"{name}{_COPY_ALIAS}"
            copied = Config(
                name=name,
                ordered_by=config.ordered_by,
                separator=config.separator,
                title=config.title,
                ending=config.ending,
                bypass=config.bypass,
                surname=config.surname,
                mono=config.mono,
                registry=self,
            )
            self._cache[name] = copied
            log.debug("config copied: %s -> %s", config.name, name)
            if opts:
                self.merge(opts, name=name)
            return copied

    def clear(self) -> None:
        """Forget every cached config and re-read defaults on next use."""
        with self.lock:
            self._cache.clear()
            self._defaults = None

    def load(self, path: str | Path) -> list[Config]:
        """
        Merge named configurations from a YAML file.

        Expected shape (the top-level ``configs`` key is optional):

          configs:
            american:
              title: US
              ordered_by: lastName
            hyphenated:
              surname: hyphenated
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise InputError(str(path), "configuration file must hold a mapping")
        entries = data.get("configs", data)
        if not isinstance(entries, dict):
            raise InputError(str(path), "'configs' must be a mapping of names to options")

        loaded: list[Config] = []
        for name, opts in entries.items():
            if opts is None:
                opts = {}
            if not isinstance(opts, dict):
                raise InputError(str(name), f"options for config {name!r} must be a mapping")
            loaded.append(self.merge(opts, name=str(name)))
        log.debug("loaded %d config(s) from %s", len(loaded), path)
        return loaded


def _options_of(options: Mapping[str, Any] | Config | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, Config):
        return {
            "name": options.name,
            "ordered_by": options.ordered_by,
            "separator": options.separator,
            "title": options.title,
            "ending": options.ending,
            "bypass": options.bypass,
            "surname": options.surname,
            "mono": options.mono,
        }
    return dict(options)


registry: ConfigRegistry = ConfigRegistry()

__all__ = [
    "Config",
    "ConfigDefaults",
    "ConfigRegistry",
    "DEFAULT_NAME",
    "load_defaults",
    "registry",
]
