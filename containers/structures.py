"""Thin built-in adaptations handed out by the container pool."""

from collections import deque
from collections.abc import MutableSet
from typing import Any, Iterable, Iterator, Optional

from selector import InvalidArgumentError


def _reject_none(item: Any) -> Any:
    if item is None:
        raise InvalidArgumentError("This queue does not accept None elements")
    return item


class NullRejectingDeque(deque):
    """deque whose every insertion path refuses None."""

    def __init__(self, iterable: Iterable[Any] = (), maxlen: Optional[int] = None):
        super().__init__([_reject_none(item) for item in iterable], maxlen)

    def append(self, item):
        super().append(_reject_none(item))

    def appendleft(self, item):
        super().appendleft(_reject_none(item))

    def extend(self, iterable):
        super().extend([_reject_none(item) for item in iterable])

    def extendleft(self, iterable):
        super().extendleft([_reject_none(item) for item in iterable])

    def insert(self, index, item):
        super().insert(index, _reject_none(item))

    def __setitem__(self, index, item):
        super().__setitem__(index, _reject_none(item))

    def __iadd__(self, iterable):
        self.extend(iterable)
        return self


class OrderedSet(MutableSet):
    """Unique elements kept in insertion order, backed by dict keys.

    Re-adding an element does not move it.
    """

    def __init__(self, iterable: Iterable[Any] = ()):
        self._items = dict.fromkeys(iterable)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item) -> None:
        self._items[item] = None

    def discard(self, item) -> None:
        self._items.pop(item, None)

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
