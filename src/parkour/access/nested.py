"""Read and copy-on-write helpers for nested mappings addressed by paths.

None of these functions mutate the mapping they are given. Writes copy only
the mappings along the path (the "spine") and share every other sub-mapping
with the original.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ..errors import MISSING
from ..runtime.logging import get_logger
from .paths import Key, KeySequence, resolve_path

logger = get_logger("parkour.access")

RootT = TypeVar("RootT")


def has_path(root: object, path: object) -> bool:
    """Return whether every segment of ``path`` exists in ``root``."""

    return _lookup(root, resolve_path(path)) is not MISSING


def get_path(root: object, path: object, default: Any = None) -> Any:
    """Return the value at ``path``, or ``default`` if any segment is missing."""

    found = _lookup(root, resolve_path(path))
    if found is MISSING:
        return default
    return found


def set_path(root: RootT, path: object, value: Any) -> RootT | dict[Key, Any]:
    """
    Return a copy of ``root`` with ``value`` stored at ``path``.

    Missing intermediate segments are created as empty dicts. If an
    intermediate segment holds something other than a mapping, nothing is
    written and ``root`` itself is returned.
    """
    keys = resolve_path(path)
    if not isinstance(root, Mapping):
        logger.debug("set_path skipped: root is %s, not a mapping", type(root).__name__)
        return root

    spine: list[Mapping[Key, Any]] = [root]
    current: Mapping[Key, Any] = root
    for depth, key in enumerate(keys[:-1]):
        child = current.get(key, MISSING)
        if child is MISSING:
            child = {}
        elif not isinstance(child, Mapping):
            logger.debug(
                "set_path skipped: %r holds a %s, not a mapping",
                keys[: depth + 1],
                type(child).__name__,
            )
            return root
        spine.append(child)
        current = child

    return _rebuild(spine, keys, value)


def update_path(
    root: RootT,
    path: object,
    transform: Callable[[Any], Any],
) -> RootT | dict[Key, Any]:
    """
    Return a copy of ``root`` with the value at ``path`` replaced by
    ``transform(value)``.

    Nothing is created along the way: if any segment is missing, ``root`` is
    returned as-is and ``transform`` is not called.
    """
    keys = resolve_path(path)
    spine: list[Mapping[Key, Any]] = []
    current: object = root
    for depth, key in enumerate(keys):
        if not isinstance(current, Mapping) or key not in current:
            logger.debug("update_path skipped: %r is missing", keys[: depth + 1])
            return root
        spine.append(current)
        current = current[key]

    return _rebuild(spine, keys, transform(current))


def _lookup(root: object, keys: KeySequence) -> Any:
    current = root
    for key in keys:
        if not isinstance(current, Mapping):
            return MISSING
        current = current.get(key, MISSING)
        if current is MISSING:
            return MISSING
    return current


def _rebuild(
    spine: list[Mapping[Key, Any]],
    keys: KeySequence,
    leaf: Any,
) -> dict[Key, Any]:
    # spine[i] is the mapping that holds keys[i]
    for node, key in zip(reversed(spine), reversed(keys)):
        copied = dict(node)
        copied[key] = leaf
        leaf = copied
    return leaf


__all__ = ["get_path", "has_path", "set_path", "update_path"]
