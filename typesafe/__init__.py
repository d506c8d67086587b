"""Guarded equality, membership and keyed-lookup helpers."""

from .equality import equals_string, equals_uuid, typed_equals
from .lookup import map_contains_key, map_get, map_get_require_value_present, map_remove
from .membership import (
    contains_all,
    contains_element,
    intersects,
    remove_all,
    remove_element,
    retain_all,
)
from .validation import set_validation, validation_enabled
from .wrapper import TypeSafe

__all__ = [
    'TypeSafe',
    'typed_equals',
    'equals_string',
    'equals_uuid',
    'contains_element',
    'contains_all',
    'intersects',
    'remove_element',
    'remove_all',
    'retain_all',
    'map_get',
    'map_get_require_value_present',
    'map_contains_key',
    'map_remove',
    'set_validation',
    'validation_enabled',
]
