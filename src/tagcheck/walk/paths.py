"""Dotted field-path tables built from declared types.

Uses the same name resolution as the walker so that a path reported by the
engine (minus sequence indices and mapping keys) can be looked up here.
"""

import dataclasses
import logging
import typing
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from ..errors import ArgumentError
from .helpers import DEFAULT_NAME_KEY, FieldInfo, is_struct, is_struct_type, struct_field_infos

logger = logging.getLogger(__name__)


def field_paths(target: Any, name_key: str = DEFAULT_NAME_KEY) -> dict[str, FieldInfo]:
    """Map every reachable field of a structured type to its dotted path.

    ``target`` may be a dataclass or pydantic model class, or an instance of one.
    Fields whose type is, or contains, another structured type (optionally,
    inside a list, tuple or mapping) contribute that type's fields under their
    own path. Each structured type is expanded once per branch, so recursive
    types terminate.
    """
    cls = type(target) if is_struct(target) else target
    if not is_struct_type(cls):
        raise ArgumentError(f"expected a dataclass or pydantic model, got {cls!r}")

    table: dict[str, FieldInfo] = {}
    _collect(cls, (), name_key, table, set())
    return table


def _collect(cls: type, prefix: tuple[str, ...], name_key: str,
             table: dict[str, FieldInfo], expanding: set[type]) -> None:
    expanding.add(cls)
    hints = _type_hints(cls)
    for info in struct_field_infos(cls, name_key):
        path = prefix + (info.name,)
        table[".".join(path)] = info

        annotation = hints.get(info.attribute, info.annotation)
        for nested in _struct_types(annotation):
            if nested in expanding:
                logger.debug(f"Not expanding recursive type {nested.__name__} at {'.'.join(path)}")
                continue
            _collect(nested, path, name_key, table, expanding)
    expanding.discard(cls)


def _type_hints(cls: type) -> dict[str, Any]:
    if issubclass(cls, BaseModel):
        return {name: info.annotation for name, info in cls.model_fields.items()}
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug(f"Unable to resolve annotations of {cls.__name__}: {e}")
        return {f.name: f.type for f in dataclasses.fields(cls)}


def _struct_types(annotation: Any) -> Iterator[type]:
    """Structured types named by an annotation, looking through wrappers."""
    if is_struct_type(annotation):
        yield annotation
        return

    origin = typing.get_origin(annotation)
    if origin is None:
        return

    args = typing.get_args(annotation)
    if origin is typing.Annotated:
        yield from _struct_types(args[0])
        return

    if isinstance(origin, type) and issubclass(origin, Mapping):
        args = args[1:]

    seen: set[type] = set()
    for arg in args:
        for nested in _struct_types(arg):
            if nested not in seen:
                seen.add(nested)
                yield nested
