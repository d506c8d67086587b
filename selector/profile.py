"""Usage profile for container selection decisions."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class UsageProfile:
    """Declared access pattern of a container the caller is about to build.

    Used by the selection engine to pick a shape, ordering and concurrency
    mode without the caller having to know every tradeoff up front.
    """
    allow_duplicates: bool = True
    random_access_by_position: bool = False
    frequent_contains_checks: bool = False
    insert_or_remove_at_front: bool = False
    queue_semantics: bool = False
    nulls_supported: bool = False
    capacity_hint: int = 0

    # Concurrent variants only
    more_reads_than_writes: bool = False

    # Meaningful only when duplicates are disallowed, mutually exclusive
    preserve_insertion_order: bool = False
    sort_by_comparator: bool = False

    concurrency_required: bool = False

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "capacity_hint":
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise InvalidArgumentError(
                        f"capacity_hint must be a non-negative int, got {value!r}"
                    )
            elif not isinstance(value, bool):
                raise InvalidArgumentError(f"{f.name} must be a bool, got {value!r}")

    @property
    def has_conflicting_order(self) -> bool:
        """Both insertion order and comparator sorting were requested."""
        return self.preserve_insertion_order and self.sort_by_comparator

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UsageProfile":
        """Build a profile from a plain mapping, e.g. a YAML section."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known, key=str)
        if unknown:
            raise InvalidArgumentError(
                f"Unknown profile fields: {', '.join(map(repr, unknown))}"
            )
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
