"""Typed equality helpers."""

from typing import Any, TypeVar
from uuid import UUID

from selector.errors import InvalidArgumentError, MisuseError

from . import validation

T = TypeVar('T')


def _check_operands(first: Any, second: Any) -> None:
    if first is None or second is None:
        raise InvalidArgumentError("typed equality operands must not be None")
    # Exact type match: True == 1 is the kind of comparison this rejects
    if type(first) is not type(second):
        raise MisuseError(
            f"Cannot compare {type(first).__name__} with {type(second).__name__}"
        )


def typed_equals(first: T, second: T) -> bool:
    """Equality restricted to operands of the same type."""
    if validation.validation_enabled():
        _check_operands(first, second)
    return first == second


def _equals_as(expected: type, first: Any, second: Any) -> bool:
    if validation.validation_enabled():
        for operand in (first, second):
            if operand is None:
                raise InvalidArgumentError(f"{expected.__name__} operands must not be None")
            if not isinstance(operand, expected):
                raise MisuseError(f"Expected {expected.__name__}, got {type(operand).__name__}")
    return first == second


def equals_string(first: str, second: str) -> bool:
    return _equals_as(str, first, second)


def equals_uuid(first: UUID, second: UUID) -> bool:
    return _equals_as(UUID, first, second)
