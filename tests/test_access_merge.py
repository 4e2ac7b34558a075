"""Tests for recursive mapping merge."""

import copy

from parkour import merge


def test_merge_with_empty_is_identity() -> None:
    data = {"a": 1, "b": {"c": [1, 2]}}

    assert merge(data, {}) == data
    assert merge({}, data) == data


def test_merge_prefers_second_on_scalar_conflict() -> None:
    assert merge({"x": 1}, {"x": 2}) == {"x": 2}


def test_merge_recurses_through_mappings() -> None:
    assert merge({"a": {"b": 1, "c": 2}}, {"a": {"b": 9}}) == {"a": {"b": 9, "c": 2}}


def test_merge_replaces_lists_wholesale() -> None:
    assert merge({"tags": [1, 2, 3]}, {"tags": [4]}) == {"tags": [4]}


def test_merge_replaces_mapping_with_scalar_and_back() -> None:
    assert merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}
    assert merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}


def test_merge_preserves_key_order() -> None:
    merged = merge({"a": 1, "b": 2}, {"c": 3, "a": 4})

    assert list(merged) == ["a", "b", "c"]
    assert merged == {"a": 4, "b": 2, "c": 3}


def test_merge_does_not_mutate_inputs() -> None:
    first = {"a": {"b": {"c": 1}}, "keep": {"k": 1}}
    second = {"a": {"b": {"d": 2}}}
    first_snapshot = copy.deepcopy(first)
    second_snapshot = copy.deepcopy(second)

    merged = merge(first, second)

    assert merged == {"a": {"b": {"c": 1, "d": 2}}, "keep": {"k": 1}}
    assert first == first_snapshot
    assert second == second_snapshot
    assert merged["keep"] is first["keep"]
    assert merged["a"] is not first["a"]
