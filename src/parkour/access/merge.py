from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .paths import Key


def merge(first: Mapping[Key, Any], second: Mapping[Key, Any]) -> dict[Key, Any]:
    """
    Recursively merge ``second`` onto ``first`` and return the result.

    Values from ``second`` win, except where both sides hold a mapping under
    the same key; those are merged recursively. Anything else, lists
    included, is replaced wholesale. Keys only present in ``first`` keep
    their position. Neither argument is modified.

    Parameters:
        first (Mapping): Base mapping.
        second (Mapping): Mapping whose entries take precedence.

    Returns:
        dict: A new mapping. Sub-mappings of ``first`` that ``second`` does
        not touch are shared, not copied.
    """
    merged = dict(first)
    for key, incoming in second.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
            merged[key] = merge(existing, incoming)
        else:
            merged[key] = incoming
    return merged


__all__ = ["merge"]
