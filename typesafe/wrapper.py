"""Marker wrapper whose untyped equality and hashing are disabled."""

from typing import Generic, TypeVar

from selector.errors import InvalidArgumentError, MisuseError

from .equality import typed_equals

T = TypeVar('T')


class TypeSafe(Generic[T]):
    """Wraps a value so that only ``equals_typed`` can compare it.

    ``==`` accepts any object and silently returns False across types.
    On this wrapper it always raises, steering callers to
    ``equals_typed``. Hashing is disabled along with it.

    Example:
        TypeSafe.build("bob").equals_typed("tom")   # False
        TypeSafe.build("bob") == "tom"              # raises MisuseError
    """

    __slots__ = ('_element',)

    def __init__(self, element: T):
        # Checked unconditionally to avoid a late failure in equals_typed
        if element is None:
            raise InvalidArgumentError("TypeSafe element must not be None")
        self._element = element

    @classmethod
    def build(cls, element: T) -> "TypeSafe[T]":
        return cls(element)

    @property
    def element(self) -> T:
        return self._element

    def equals_typed(self, other: T) -> bool:
        return typed_equals(self._element, other)

    def __eq__(self, other: object) -> bool:
        raise MisuseError("Use equals_typed instead of == on TypeSafe")

    def __ne__(self, other: object) -> bool:
        raise MisuseError("Use equals_typed instead of != on TypeSafe")

    def __hash__(self) -> int:
        raise MisuseError("TypeSafe is not hashable")

    def __repr__(self) -> str:
        return f"TypeSafe({self._element!r})"
