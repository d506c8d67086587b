"""Switch for precondition checks in the typed accessors.

Checks default to on when the interpreter runs with assertions enabled,
so ``python -O`` behaves like a production build. The
``CONTAINER_ADVISOR_VALIDATE`` environment variable overrides that.
"""

import os
from typing import Any

from selector.errors import InvalidArgumentError

VALIDATE_ENV = "CONTAINER_ADVISOR_VALIDATE"

_FALSE_VALUES = ("0", "false", "no", "off")


def _default_validation() -> bool:
    raw = os.environ.get(VALIDATE_ENV)
    if raw is None:
        return __debug__
    return raw.strip().lower() not in _FALSE_VALUES


_enabled = _default_validation()


def validation_enabled() -> bool:
    return _enabled


def set_validation(enabled: bool) -> bool:
    """Turn checks on or off, returning the previous setting."""
    global _enabled
    previous = _enabled
    _enabled = bool(enabled)
    return previous


def require_not_none(value: Any, name: str) -> None:
    if _enabled and value is None:
        raise InvalidArgumentError(f"{name} must not be None")
