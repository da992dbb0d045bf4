"""Depth-first traversal of arbitrary structured values.

The walker visits a node, then its children: the public fields of dataclass and
pydantic instances, the items of lists and tuples, the values of mappings. Each
visit hands the callback the node, the field metadata it was reached through
(``None`` for sequence items and mapping values) and the path segments from the
root.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from ..errors import WalkDepthError, WalkError
from .helpers import DEFAULT_NAME_KEY, FieldInfo, is_container, is_mapping, is_sequence, is_struct, render, struct_fields

logger = logging.getLogger(__name__)

Path = tuple[str, ...]
Visitor = Callable[[Any, FieldInfo | None, Path], Any]


class Walker:
    """Reusable traversal settings.

    Args:
        name_key: Tag key holding each field's external name
        max_depth: Maximum number of path segments, or None for no limit
        skip_cycles: Skip containers already on the descent stack instead of
            raising WalkError
    """

    def __init__(self, name_key: str = DEFAULT_NAME_KEY, max_depth: int | None = None,
                 skip_cycles: bool = True):
        self.name_key = name_key
        self.max_depth = max_depth
        self.skip_cycles = skip_cycles

    def walk(self, value: Any, fn: Visitor) -> Any:
        """Visit ``value`` and everything reachable from it.

        Returns the first non-None value returned by ``fn``, which also stops
        the traversal, or None once every node has been visited.
        """
        if value is None:
            raise WalkError("value must not be None")
        return self._visit(value, None, (), fn, set())

    def _visit(self, node: Any, field: FieldInfo | None, path: Path, fn: Visitor, active: set[int]) -> Any:
        if self.max_depth is not None and len(path) > self.max_depth:
            raise WalkDepthError(self.max_depth, path)

        result = fn(node, field, path)
        if result is not None:
            return result

        if not is_container(node):
            return None

        key = id(node)
        if key in active:
            if not self.skip_cycles:
                raise WalkError(f"cycle detected at {'.'.join(path) or '<root>'}")
            logger.debug(f"Skipping cyclic reference at {'.'.join(path)}")
            return None

        active.add(key)
        try:
            for child, child_field, segment in self._children(node):
                result = self._visit(child, child_field, path + (segment,), fn, active)
                if result is not None:
                    return result
        finally:
            active.discard(key)
        return None

    def _children(self, node: Any) -> Iterator[tuple[Any, FieldInfo | None, str]]:
        if is_struct(node):
            for info, value in struct_fields(node, self.name_key):
                yield value, info, info.name
        elif is_sequence(node):
            for index, item in enumerate(node):
                yield item, None, str(index)
        elif is_mapping(node):
            for key, item in node.items():
                yield item, None, render(key)


def walk(value: Any, fn: Visitor, *, name_key: str = DEFAULT_NAME_KEY,
         max_depth: int | None = None, skip_cycles: bool = True) -> Any:
    """Walk ``value`` with a one-off Walker."""
    return Walker(name_key, max_depth, skip_cycles).walk(value, fn)
