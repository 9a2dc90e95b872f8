# namefully/data.py
"""
Plain snapshots of a Namefully instance, and back.

    {
      "names": {
        "prefix": "Mr",
        "firstName": "John" | {"value": "John", "more": ["Ben"]},
        "middleName": ["Carl"],
        "lastName": "Smith" | {"father": "Smith", "mother": "Doe"},
        "suffix": "Ph.D"
      },
      "config": {"name": "default", "orderedBy": "firstName", "separator": " ",
                 "title": "UK", "ending": false, "bypass": true, "surname": "father"}
    }

The shape is checked with pydantic; anything pydantic (or the JSON decoder)
rejects surfaces as UnknownError, while errors from our own taxonomy pass
through untouched.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .builder import NameBuilder
from .config import ConfigRegistry
from .config import registry as default_registry
from .exceptions import InputError, NamefullyError, UnknownError
from .name import Name
from .types import Namon

if TYPE_CHECKING:
    from .namefully import Namefully

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Snapshot models
# ---------------------------------------------------------------------------
class FirstNameModel(BaseModel):
    value: str
    more: list[str] = Field(default_factory=list)


class LastNameModel(BaseModel):
    father: str
    mother: str | None = None


class NamesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prefix: str | None = None
    first_name: str | FirstNameModel = Field(..., alias="firstName")
    middle_name: list[str] = Field(default_factory=list, alias="middleName")
    last_name: str | LastNameModel = Field(..., alias="lastName")
    suffix: str | None = None

    @field_validator("middle_name", mode="before")
    @classmethod
    def wrap_single_middle(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    def to_names(self) -> list[Name]:
        names: list[Name] = []
        if self.prefix is not None:
            names.append(Name.prefix(self.prefix))
        if isinstance(self.first_name, FirstNameModel):
            names.append(Name.first(self.first_name.value, *self.first_name.more))
        else:
            names.append(Name.first(self.first_name))
        names.extend(Name.middle(m) for m in self.middle_name)
        if isinstance(self.last_name, LastNameModel):
            names.append(Name.last(self.last_name.father, self.last_name.mother))
        else:
            names.append(Name.last(self.last_name))
        if self.suffix is not None:
            names.append(Name.suffix(self.suffix))
        return names


class ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = "default"
    ordered_by: str | None = Field(default=None, alias="orderedBy")
    separator: str | None = None
    title: str | None = None
    ending: bool | None = None
    bypass: bool | None = None
    surname: str | None = None


class SerializedName(BaseModel):
    names: NamesModel
    config: ConfigModel = Field(default_factory=ConfigModel)


# ---------------------------------------------------------------------------
# serialize / deserialize
# ---------------------------------------------------------------------------
def serialize(name: Namefully) -> dict[str, Any]:
    """Snapshot of ``name``: its parts plus its config's values."""
    first = name.get(Namon.FIRST_NAME)
    last = name.get(Namon.LAST_NAME)
    names: dict[str, Any] = {}
    if name.prefix:
        names["prefix"] = name.prefix
    if first.has_more:
        names["firstName"] = {"value": first.value, "more": list(first.more)}
    else:
        names["firstName"] = first.value
    if name.has_middle:
        names["middleName"] = name.middle_name()
    if last.has_mother:
        names["lastName"] = {"father": last.father, "mother": last.mother}
    else:
        names["lastName"] = last.father
    if name.suffix:
        names["suffix"] = name.suffix
    return {"names": names, "config": name.config.to_dict()}


def deserialize(
    data: Mapping[str, Any] | str, registry: ConfigRegistry | None = None
) -> Namefully:
    """
    Rebuild a Namefully from ``serialize()`` output (or its JSON text).

    The config is merged into the registry under its serialized name.
    """
    if not isinstance(data, (str, Mapping)):
        raise InputError(data, "expecting a mapping or a JSON string")
    try:
        if isinstance(data, str):
            snapshot = SerializedName.model_validate_json(data)
        else:
            snapshot = SerializedName.model_validate(dict(data))

        options = snapshot.config.model_dump(by_alias=True, exclude_none=True)
        config = (registry or default_registry).merge(options)
        builder = NameBuilder.of(*snapshot.names.to_names())
        return builder.build(config)
    except NamefullyError:
        raise
    except Exception as err:
        log.debug("deserialize failed: %s", err)
        raise UnknownError(data, "could not deserialize data", origin=err) from err


def to_json(name: Namefully, **kwargs: Any) -> str:
    return json.dumps(serialize(name), **kwargs)


__all__ = [
    "ConfigModel",
    "FirstNameModel",
    "LastNameModel",
    "NamesModel",
    "SerializedName",
    "deserialize",
    "serialize",
    "to_json",
]
