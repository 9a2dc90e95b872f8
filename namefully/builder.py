# namefully/builder.py
"""
NameBuilder: stage Name parts one at a time, then build a Namefully.

Nothing is validated while parts are queued; ``build()`` checks that a first
and a last name are present before constructing.

    builder = NameBuilder.use(postbuild=lambda name: print(name.full))
    builder.add(Name.first("John"), Name.last("Smith"))
    builder.build()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import Config, ConfigRegistry
from .name import Name
from .namefully import Namefully
from .validators import Validators

log = logging.getLogger(__name__)

VoidCallback = Callable[[], None]
Callback = Callable[[Namefully], None]


class NameBuilder:
    def __init__(
        self,
        names: Iterable[Name] | None = None,
        *,
        prebuild: VoidCallback | None = None,
        postbuild: Callback | None = None,
        preclear: Callback | None = None,
        postclear: VoidCallback | None = None,
    ) -> None:
        self._queue: list[Name] = list(names or [])
        self._instance: Namefully | None = None
        self.prebuild = prebuild
        self.postbuild = postbuild
        self.preclear = preclear
        self.postclear = postclear

    @classmethod
    def create(cls, name: Name | None = None) -> NameBuilder:
        return cls([name] if name is not None else [])

    @classmethod
    def of(cls, *names: Name) -> NameBuilder:
        return cls(names)

    @classmethod
    def use(
        cls,
        names: Iterable[Name] | None = None,
        prebuild: VoidCallback | None = None,
        postbuild: Callback | None = None,
        preclear: Callback | None = None,
        postclear: VoidCallback | None = None,
    ) -> NameBuilder:
        return cls(
            names,
            prebuild=prebuild,
            postbuild=postbuild,
            preclear=preclear,
            postclear=postclear,
        )

    @property
    def size(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return self.size

    def names(self) -> list[Name]:
        return list(self._queue)

    # ---- queue ----
    def add(self, *names: Name) -> None:
        self._queue.extend(names)

    def add_first(self, name: Name) -> None:
        self._queue.insert(0, name)

    def add_last(self, name: Name) -> None:
        self._queue.append(name)

    def remove(self, name: Name) -> bool:
        """Drop ``name`` itself (not an equal copy); False when absent."""
        for i, queued in enumerate(self._queue):
            if queued is name:
                del self._queue[i]
                return True
        return False

    def remove_first(self) -> Name | None:
        return self._queue.pop(0) if self._queue else None

    def remove_last(self) -> Name | None:
        return self._queue.pop() if self._queue else None

    def remove_where(self, predicate: Callable[[Name], bool]) -> None:
        self._queue = [n for n in self._queue if not predicate(n)]

    def retain_where(self, predicate: Callable[[Name], bool]) -> None:
        self._queue = [n for n in self._queue if predicate(n)]

    # ---- lifecycle ----
    def build(
        self,
        config: Config | Mapping[str, Any] | None = None,
        *,
        registry: ConfigRegistry | None = None,
    ) -> Namefully:
        if self.prebuild:
            self.prebuild()

        names = list(self._queue)
        Validators.array_name.validate(names)
        self._instance = Namefully(names, config, registry=registry)
        log.debug("built %r from %d part(s)", self._instance.full, len(names))

        if self.postbuild:
            self.postbuild(self._instance)
        return self._instance

    def clear(self) -> None:
        """Empty the queue; ``preclear`` runs only once something was built."""
        if self.preclear and self._instance is not None:
            self.preclear(self._instance)
        self._queue.clear()
        if self.postclear:
            self.postclear()
        log.debug("builder cleared")
        self._instance = None


__all__ = ["NameBuilder"]
