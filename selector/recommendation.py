"""Container recommendation returned by the selection engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class ContainerShape(Enum):
    """Physical layout the container should have."""
    SEQUENTIAL = "sequential"  # Flat, indexable, duplicate tolerant
    QUEUE = "queue"            # Double-ended queue, None rejected
    HASHED = "hashed"          # Hash-based unique set
    TREE = "tree"              # Comparator-ordered unique set


class OrderingMode(Enum):
    """Iteration order guaranteed by the container."""
    NONE = "none"
    INSERTION = "insertion"
    SORTED = "sorted"


class ConcurrencyMode(Enum):
    """Thread-safety policy the caller must put in place."""
    NONE = "none"
    COPY_ON_WRITE = "copy-on-write"
    LOCK_WRAPPED = "lock-wrapped"
    LOCK_FREE_SORTED = "lock-free-sorted"


@dataclass(frozen=True)
class ContainerRecommendation:
    """Description of the container a caller should build.

    Not a live instance: it carries enough to pick a concrete type, and to
    let tests assert which rule fired without depending on one.
    """
    duplicates_allowed: bool
    ordering: OrderingMode
    concurrency: ConcurrencyMode
    shape: ContainerShape
    linked: bool = False
    accepts_nulls: bool = True
    capacity_hint: int = 0
    rule: str = ""
    notes: Tuple[str, ...] = ()

    def __str__(self) -> str:
        shape = "linked" if self.linked else self.shape.value
        return f"{shape}/{self.ordering.value}/{self.concurrency.value}"

    @property
    def requires_external_lock(self) -> bool:
        """Caller must serialize every access, iteration included."""
        return self.concurrency is ConcurrencyMode.LOCK_WRAPPED

    @property
    def snapshot_iteration(self) -> bool:
        """Iteration sees a snapshot and never hits a modification conflict."""
        return self.concurrency is ConcurrencyMode.COPY_ON_WRITE

    @property
    def key(self) -> Tuple[ContainerShape, OrderingMode, ConcurrencyMode, bool]:
        """Lookup key used by the container pool."""
        return (self.shape, self.ordering, self.concurrency, self.linked)

    @property
    def python_type(self) -> str:
        """Hint naming a Python structure that satisfies the recommendation."""
        if self.shape is ContainerShape.TREE:
            base = "sorted set (bisect-maintained list or third-party sorted container)"
        elif self.shape is ContainerShape.HASHED:
            base = "containers.OrderedSet (dict-backed)" if self.ordering is OrderingMode.INSERTION else "set"
        elif self.shape is ContainerShape.QUEUE or self.linked:
            base = "collections.deque"
        else:
            base = "list"

        if self.concurrency is ConcurrencyMode.COPY_ON_WRITE:
            return f"{base}, replaced by a fresh copy on every write"
        if self.concurrency is ConcurrencyMode.LOCK_WRAPPED:
            return f"{base} guarded by threading.Lock"
        if self.concurrency is ConcurrencyMode.LOCK_FREE_SORTED:
            return "concurrent sorted set"
        return base

    def to_dict(self) -> Dict[str, Any]:
        return {
            'duplicates_allowed': self.duplicates_allowed,
            'ordering': self.ordering.value,
            'concurrency': self.concurrency.value,
            'shape': self.shape.value,
            'linked': self.linked,
            'accepts_nulls': self.accepts_nulls,
            'capacity_hint': self.capacity_hint,
            'rule': self.rule,
            'notes': list(self.notes),
        }
