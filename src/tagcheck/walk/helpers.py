"""Capability checks, field metadata and emptiness for the walker and the engine."""

import dataclasses
from collections.abc import Mapping, Set
from dataclasses import dataclass, field
from enum import Enum
from numbers import Number
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

DEFAULT_NAME_KEY = "json"
DEFAULT_TAG_KEY = "is"

# Integral floats below this magnitude render without a fractional part.
INTEGRAL_FLOAT_LIMIT = 1e21

_EMPTY_TAGS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class FieldInfo:
    """Metadata of one field of a structured value.

    ``name`` is the external (serialized) name used in paths and messages,
    ``attribute`` the Python attribute name, ``tags`` the field's tag texts
    keyed by tag key.
    """
    name: str
    attribute: str
    tags: Mapping[str, str] = field(default_factory=lambda: _EMPTY_TAGS, compare=False)
    annotation: Any = field(default=None, compare=False, repr=False)

    def tag(self, key: str) -> str:
        """Tag text for ``key``, empty when the field carries none."""
        value = self.tags.get(key)
        return value if isinstance(value, str) else ""


def is_struct(value: Any) -> bool:
    """True for dataclass instances and pydantic model instances."""
    if isinstance(value, type):
        return False
    return isinstance(value, BaseModel) or dataclasses.is_dataclass(value)


def is_struct_type(tp: Any) -> bool:
    return isinstance(tp, type) and (issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp))


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_container(value: Any) -> bool:
    return is_struct(value) or is_sequence(value) or is_mapping(value)


def name_of(attribute: str, tags: Mapping[str, str], name_key: str = DEFAULT_NAME_KEY) -> str:
    """External name of a field.

    The name tag follows the ``name,option,...`` convention; the attribute name
    is used when the tag is missing, has no name part or is ``-``.
    """
    tag = tags.get(name_key)
    if not isinstance(tag, str) or not tag:
        return attribute

    name = tag.split(",", 1)[0].strip()
    if not name or name == "-":
        return attribute
    return name


def _pydantic_tags(info: Any, name_key: str) -> Mapping[str, str]:
    extra = info.json_schema_extra
    tags = dict(extra) if isinstance(extra, dict) else {}
    if info.alias and name_key not in tags:
        tags[name_key] = info.alias
    return MappingProxyType(tags)


def struct_field_infos(cls: type, name_key: str = DEFAULT_NAME_KEY) -> list[FieldInfo]:
    """Field metadata of a dataclass or pydantic model class, in declaration order.

    Private fields (leading underscore) are not part of the result.
    """
    infos: list[FieldInfo] = []
    if issubclass(cls, BaseModel):
        for attribute, info in cls.model_fields.items():
            if attribute.startswith("_"):
                continue
            tags = _pydantic_tags(info, name_key)
            infos.append(FieldInfo(name_of(attribute, tags, name_key), attribute, tags, info.annotation))
        return infos

    for dc_field in dataclasses.fields(cls):
        if dc_field.name.startswith("_"):
            continue
        tags = dc_field.metadata or _EMPTY_TAGS
        infos.append(FieldInfo(name_of(dc_field.name, tags, name_key), dc_field.name, tags, dc_field.type))
    return infos


def struct_fields(value: Any, name_key: str = DEFAULT_NAME_KEY) -> list[tuple[FieldInfo, Any]]:
    """(metadata, current value) pairs of a structured value's public fields."""
    return [
        (info, getattr(value, info.attribute, None))
        for info in struct_field_infos(type(value), name_key)
    ]


def is_empty(value: Any) -> bool:
    """Logical emptiness used to decide whether ``required`` fires.

    None, False, numeric zero, empty text, all-zero bytes, empty collections,
    tuples whose items are all empty and structured values whose public fields
    are all empty count as empty. A present reference to an empty value is
    empty as well.
    """
    return _is_empty(value, set())


def _is_empty(value: Any, seen: set[int]) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        return _is_empty(value.value, seen)
    if isinstance(value, bool):
        return not value
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, str):
        return not value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return not any(bytes(value))
    if isinstance(value, (list, Set)) or is_mapping(value):
        return len(value) == 0

    if isinstance(value, tuple) or is_struct(value):
        key = id(value)
        if key in seen:
            return True
        seen.add(key)
        try:
            if isinstance(value, tuple):
                return all(_is_empty(item, seen) for item in value)
            return all(_is_empty(item, seen) for _, item in struct_fields(value))
        finally:
            seen.discard(key)

    if hasattr(value, "__len__"):
        return len(value) == 0
    return False


def render(value: Any) -> str:
    """Default string form of a value, as handed to rule predicates."""
    if isinstance(value, Enum):
        return render(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < INTEGRAL_FLOAT_LIMIT:
        return str(int(value))
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)
