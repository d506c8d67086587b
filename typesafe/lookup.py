"""Keyed lookups that refuse a None key."""

from typing import Mapping, MutableMapping, Optional, TypeVar

from selector.errors import MissingValueError

from .validation import require_not_none

K = TypeVar('K')
V = TypeVar('V')


def map_contains_key(mapping: Mapping[K, V], key: K) -> bool:
    require_not_none(key, "key")
    return key in mapping


def map_get(mapping: Mapping[K, V], key: K) -> Optional[V]:
    require_not_none(key, "key")
    return mapping.get(key)


def map_get_require_value_present(mapping: Mapping[K, V], key: K) -> V:
    """Like map_get, but a missing key or a stored None is an error.

    Telling an absent key apart from a None value is left to the caller
    (use map_contains_key).
    """
    require_not_none(key, "key")
    value = mapping.get(key)
    if value is None:
        raise MissingValueError(f"No value present for key {key!r}")
    return value


def map_remove(mapping: MutableMapping[K, V], key: K) -> Optional[V]:
    """Remove key, returning its value or None when it was absent."""
    require_not_none(key, "key")
    return mapping.pop(key, None)
