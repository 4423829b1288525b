"""Helpers for working with lists and dictionaries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

_T = TypeVar("_T")
_K = TypeVar("_K")
_V = TypeVar("_V")

DEFAULT_KEY_VALUE_FORMAT = "%s=%s"


def list_contains_element(items: Iterable[Any], element: Any) -> bool:
    """Return True if ``items`` contains ``element``."""
    return element in items


def remove_element_from_list(items: Iterable[_T], element: Any) -> list[_T]:
    """Return a copy of ``items`` with every occurrence of ``element`` removed."""
    return [item for item in items if item != element]


def make_copy_of_list(items: Iterable[_T]) -> list[_T]:
    """Return a new list holding the same elements."""
    return list(items)


def batch_list_into_groups_of(
    items: Sequence[_T], batch_size: int
) -> list[list[_T]] | None:
    """Split ``items`` into consecutive groups of ``batch_size``.

    The last group holds whatever remains. Returns None if ``batch_size`` <= 0.
    """
    if batch_size <= 0:
        return None
    return [list(items[start : start + batch_size]) for start in range(0, len(items), batch_size)]


def merge_maps(*args: Mapping[_K, _V]) -> dict[_K, _V]:
    """Merge the mappings into a new dict; later mappings win on shared keys."""
    merged: dict[_K, _V] = {}
    for mapping in args:
        merged.update(mapping)
    return merged


def keys(mapping: Mapping[_K, Any]) -> list[_K]:
    """Return the keys of ``mapping``, sorted."""
    return sorted(mapping)


def key_value_string_slice(mapping: Mapping[str, str]) -> list[str]:
    """Return sorted ``key=value`` strings for the mapping."""
    return key_value_string_slice_with_format(mapping, DEFAULT_KEY_VALUE_FORMAT)


def key_value_string_slice_with_format(mapping: Mapping[Any, Any], fmt: str) -> list[str]:
    """Format each key and value with the %-style ``fmt`` and return the results sorted."""
    return sorted(fmt % (key, value) for key, value in mapping.items())


def key_value_string_slice_as_map(kv_pairs: Iterable[str]) -> dict[str, list[str]]:
    """Parse ``key=value`` strings into a dict of value lists.

    A repeated key collects all of its values; a missing ``=`` gives an empty value.
    """
    out: dict[str, list[str]] = {}
    for pair in kv_pairs:
        key, _, value = pair.partition("=")
        out.setdefault(key, []).append(value)
    return out