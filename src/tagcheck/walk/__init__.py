"""Generic traversal of structured values (dataclasses, pydantic models, lists, tuples, mappings)."""

from .helpers import (
    DEFAULT_NAME_KEY,
    DEFAULT_TAG_KEY,
    FieldInfo,
    is_container,
    is_empty,
    is_mapping,
    is_sequence,
    is_struct,
    is_struct_type,
    name_of,
    render,
    struct_fields,
)
from .paths import field_paths
from .walker import Walker, walk

__all__ = [
    "DEFAULT_NAME_KEY",
    "DEFAULT_TAG_KEY",
    "FieldInfo",
    "Walker",
    "field_paths",
    "is_container",
    "is_empty",
    "is_mapping",
    "is_sequence",
    "is_struct",
    "is_struct_type",
    "name_of",
    "render",
    "struct_fields",
    "walk",
]
