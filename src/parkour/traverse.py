"""Single-pass traversal helpers over mappings.

Every callback receives ``(value, key)`` unless documented otherwise. Plain
sequences are accepted anywhere a mapping is, and are treated as a mapping
from index to item. Functions that build a mapping return a new ``dict`` in
the input's iteration order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeAlias


Traversable: TypeAlias = Mapping[Any, Any] | Sequence[Any]
Callback: TypeAlias = Callable[[Any, Any], Any]
Reducer: TypeAlias = Callable[[Any, Any, Any], Any]


def _items(data: Traversable) -> Iterable[tuple[Any, Any]]:
    if isinstance(data, Mapping):
        return data.items()
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        return enumerate(data)
    raise TypeError(f"expected a mapping or a sequence, got {type(data).__name__}")


def each(data: Traversable, fn: Callback) -> None:
    for key, value in _items(data):
        fn(value, key)


def invoke(data: Traversable, fn: Callback) -> None:
    """Call ``fn(value, key)`` on every item; same as :func:`each`."""

    each(data, fn)


def map_(data: Traversable, fn: Callback) -> dict[Any, Any]:
    return {key: fn(value, key) for key, value in _items(data)}


def map_keys(data: Traversable, fn: Callback) -> dict[Any, Any]:
    """Re-key ``data`` with ``fn(value, key)``. Colliding keys keep the last value."""

    return {fn(value, key): value for key, value in _items(data)}


def _split(
    data: Traversable,
    fn: Callback,
    preserve_keys: bool,
) -> tuple[dict[Any, Any], dict[Any, Any]]:
    passed: dict[Any, Any] = {}
    failed: dict[Any, Any] = {}
    for key, value in _items(data):
        target = passed if fn(value, key) else failed
        target[key if preserve_keys else len(target)] = value
    return passed, failed


def filter_(
    data: Traversable,
    fn: Callback,
    preserve_keys: bool = True,
) -> dict[Any, Any]:
    """
    Keep the items for which ``fn(value, key)`` is truthy.

    With ``preserve_keys=False`` the kept items are renumbered from 0.
    """
    return _split(data, fn, preserve_keys)[0]


def reject(
    data: Traversable,
    fn: Callback,
    preserve_keys: bool = True,
) -> dict[Any, Any]:
    """Inverse of :func:`filter_`: keep the items for which ``fn`` is falsy."""
    return _split(data, fn, preserve_keys)[1]


def passing(
    data: Traversable,
    fn: Callback,
    preserve_keys: bool = True,
) -> tuple[dict[Any, Any], dict[Any, Any]]:
    """Partition ``data`` into ``(passed, failed)`` in a single pass."""
    return _split(data, fn, preserve_keys)


def reduce(data: Traversable, fn: Reducer, memo: Any = None) -> Any:
    """Fold ``data`` with ``memo = fn(memo, value, key)``."""

    for key, value in _items(data):
        memo = fn(memo, value, key)
    return memo


def map_reduce(
    data: Traversable,
    mapper: Callback,
    reducer: Reducer,
    memo: Any = None,
) -> Any:
    """Fold ``reducer`` over ``mapper(value, key)`` without building the mapped dict."""

    for key, value in _items(data):
        memo = reducer(memo, mapper(value, key), key)
    return memo


def every(data: Traversable, fn: Callback) -> bool:
    return all(fn(value, key) for key, value in _items(data))


def some(data: Traversable, fn: Callback) -> bool:
    return any(fn(value, key) for key, value in _items(data))


def first_ok(data: Traversable, fn: Callback, default: Any = False) -> Any:
    """Return the first truthy ``fn(value, key)`` result, or ``default``."""

    for key, value in _items(data):
        result = fn(value, key)
        if result:
            return result
    return default


def first_not_ok(data: Traversable, fn: Callback, default: Any = True) -> Any:
    """Return the first falsy ``fn(value, key)`` result, or ``default``."""

    for key, value in _items(data):
        result = fn(value, key)
        if not result:
            return result
    return default


def find(data: Traversable, fn: Callback, default: Any = None) -> Any:
    for key, value in _items(data):
        if fn(value, key):
            return value
    return default


def find_key(data: Traversable, fn: Callback, default: Any = None) -> Any:
    for key, value in _items(data):
        if fn(value, key):
            return key
    return default


def combine(
    data: Traversable,
    fn: Callable[[Any, Any], Mapping[Any, Any] | Iterable[tuple[Any, Any]]],
    overwrite: bool = True,
) -> dict[Any, Any]:
    """
    Build a mapping from the pairs produced by ``fn(value, key)``.

    ``fn`` may return a mapping or any iterable of ``(key, value)`` pairs,
    including a generator. When two pairs share a key the later one wins,
    unless ``overwrite`` is false, in which case the first one is kept.

    Example:
        Index users by name::

            combine(users, lambda user, _: [(user["name"], user["id"])])
    """
    combined: dict[Any, Any] = {}
    for key, value in _items(data):
        produced = fn(value, key)
        pairs = produced.items() if isinstance(produced, Mapping) else produced
        for new_key, new_value in pairs:
            if overwrite or new_key not in combined:
                combined[new_key] = new_value
    return combined


def reindex(
    data: Traversable,
    key_map: Mapping[Any, Any],
    keep_unmapped: bool = True,
) -> dict[Any, Any]:
    """
    Rename keys of ``data`` according to ``key_map``.

    Keys absent from ``key_map`` are kept unchanged, or dropped when
    ``keep_unmapped`` is false.
    """
    reindexed: dict[Any, Any] = {}
    for key, value in _items(data):
        if key in key_map:
            reindexed[key_map[key]] = value
        elif keep_unmapped:
            reindexed[key] = value
    return reindexed


def normalize(data: Traversable, default: Any) -> dict[Any, Any]:
    """
    Turn integer-keyed entries into keys mapped to ``default``.

    ``normalize(["a", "b"], True)`` gives ``{"a": True, "b": True}`` and
    ``normalize({0: "a", "b": 1}, None)`` gives ``{"a": None, "b": 1}``.
    """
    normalized: dict[Any, Any] = {}
    for key, value in _items(data):
        if isinstance(key, int) and not isinstance(key, bool):
            normalized[value] = default
        else:
            normalized[key] = value
    return normalized


def range_(start: int, end: int, step: int = 1) -> range:
    """
    Lazy integers from ``start`` up to, but excluding, ``end``.

    Negative ``step`` values count down. A direction that cannot reach ``end``
    gives an empty sequence. The result can be iterated any number of times
    and has ``len(range_(a, b, s)) == max(ceil((b - a) / s), 0)``.
    """
    for name, value in (("start", start), ("end", end), ("step", step)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"range_ {name} must be an int, got {type(value).__name__}")
    if step == 0:
        raise ValueError("range_ step must not be zero")
    return range(start, end, step)


def iter_items(data: Traversable) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs the way every helper here visits them."""

    yield from _items(data)


__all__ = [
    "Callback",
    "Reducer",
    "Traversable",
    "combine",
    "each",
    "every",
    "filter_",
    "find",
    "find_key",
    "first_not_ok",
    "first_ok",
    "invoke",
    "iter_items",
    "map_",
    "map_keys",
    "map_reduce",
    "normalize",
    "passing",
    "range_",
    "reduce",
    "reindex",
    "reject",
    "some",
]
