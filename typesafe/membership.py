"""Typed pass-through membership operations.

Mutating operations accept mutable sets and mutable sequences (list,
deque) and return whether the collection changed.
"""

from collections.abc import MutableSequence, MutableSet
from typing import Callable, Collection, Iterable, TypeVar

from selector.errors import InvalidArgumentError

from .validation import require_not_none

T = TypeVar('T')


def _require_mutable(collection) -> None:
    if not isinstance(collection, (MutableSet, MutableSequence)):
        raise InvalidArgumentError(
            f"Expected a mutable set or sequence, got {type(collection).__name__}"
        )


def _rebuild(collection: MutableSequence, keep: Callable[[T], bool]) -> bool:
    kept = [item for item in collection if keep(item)]
    if len(kept) == len(collection):
        return False
    collection.clear()
    collection.extend(kept)
    return True


def contains_element(collection: Collection[T], element: T) -> bool:
    require_not_none(collection, "collection")
    return element in collection


def contains_all(collection: Collection[T], elements: Iterable[T]) -> bool:
    require_not_none(collection, "collection")
    require_not_none(elements, "elements")
    return all(element in collection for element in elements)


def intersects(collection: Iterable[T], elements: Iterable[T]) -> bool:
    """Whether the two share an element. Neither input is modified."""
    require_not_none(collection, "collection")
    require_not_none(elements, "elements")
    try:
        copy = set(collection)
        copy.intersection_update(elements)
    except TypeError:
        # Unhashable items: fall back to pairwise membership
        return any(item in elements for item in collection)
    return bool(copy)


def remove_element(collection: Collection[T], element: T) -> bool:
    """Remove one occurrence of element."""
    require_not_none(collection, "collection")
    _require_mutable(collection)
    if isinstance(collection, MutableSet):
        if element not in collection:
            return False
        collection.discard(element)
        return True
    try:
        collection.remove(element)
    except ValueError:
        return False
    return True


def remove_all(collection: Collection[T], elements: Collection[T]) -> bool:
    """Remove every occurrence of each given element."""
    require_not_none(collection, "collection")
    require_not_none(elements, "elements")
    _require_mutable(collection)
    if isinstance(collection, MutableSet):
        before = len(collection)
        for element in list(elements):
            collection.discard(element)
        return len(collection) != before
    return _rebuild(collection, lambda item: item not in elements)


def retain_all(collection: Collection[T], elements: Collection[T]) -> bool:
    """Keep only the items that also appear in elements."""
    require_not_none(collection, "collection")
    require_not_none(elements, "elements")
    _require_mutable(collection)
    if isinstance(collection, MutableSet):
        dropped = [item for item in collection if item not in elements]
        for item in dropped:
            collection.discard(item)
        return bool(dropped)
    return _rebuild(collection, lambda item: item in elements)
