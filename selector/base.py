"""Decision branches and the ordered rule sets the engine walks."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from .profile import UsageProfile
from .recommendation import (
    ConcurrencyMode,
    ContainerRecommendation,
    ContainerShape,
    OrderingMode,
)


class Branch(Enum):
    """Top-level split on duplicate tolerance and concurrency."""
    WITH_DUPLICATES = "with_duplicates"
    WITH_DUPLICATES_THREADED = "with_duplicates_threaded"
    WITHOUT_DUPLICATES = "without_duplicates"
    WITHOUT_DUPLICATES_THREADED = "without_duplicates_threaded"

    @property
    def duplicates_allowed(self) -> bool:
        return self in (Branch.WITH_DUPLICATES, Branch.WITH_DUPLICATES_THREADED)

    @property
    def concurrent(self) -> bool:
        return self in (Branch.WITH_DUPLICATES_THREADED, Branch.WITHOUT_DUPLICATES_THREADED)

    @classmethod
    def for_profile(cls, profile: UsageProfile) -> "Branch":
        if profile.allow_duplicates:
            if profile.concurrency_required:
                return cls.WITH_DUPLICATES_THREADED
            return cls.WITH_DUPLICATES
        if profile.concurrency_required:
            return cls.WITHOUT_DUPLICATES_THREADED
        return cls.WITHOUT_DUPLICATES


@dataclass(frozen=True)
class Rule:
    """One guarded outcome in a branch.

    Rules are evaluated in declaration order and the first one whose
    guard holds wins.
    """
    name: str
    when: Callable[[UsageProfile], bool]
    shape: ContainerShape
    ordering: OrderingMode
    concurrency: ConcurrencyMode = ConcurrencyMode.NONE
    linked: bool = False
    accepts_nulls: bool = True
    notes: Tuple[str, ...] = ()

    def matches(self, profile: UsageProfile) -> bool:
        return bool(self.when(profile))

    def build(self, profile: UsageProfile, duplicates_allowed: bool) -> ContainerRecommendation:
        return ContainerRecommendation(
            duplicates_allowed=duplicates_allowed,
            ordering=self.ordering,
            concurrency=self.concurrency,
            shape=self.shape,
            linked=self.linked,
            accepts_nulls=self.accepts_nulls,
            capacity_hint=profile.capacity_hint,
            rule=self.name,
            notes=self.notes,
        )


def _always(profile: UsageProfile) -> bool:
    return True


COPY_ON_WRITE_NOTE = (
    "every write copies the whole structure; iteration runs over a snapshot "
    "and never raises a modification conflict"
)
LOCK_WRAPPED_NOTE = (
    "all access, iteration included, must be serialized by the caller"
)


WITH_DUPLICATES_RULES: Tuple[Rule, ...] = (
    Rule(
        name="indexed-or-membership",
        when=lambda p: p.random_access_by_position or p.frequent_contains_checks,
        shape=ContainerShape.SEQUENTIAL,
        ordering=OrderingMode.INSERTION,
    ),
    Rule(
        name="front-queue-without-nulls",
        when=lambda p: p.insert_or_remove_at_front and p.queue_semantics and not p.nulls_supported,
        shape=ContainerShape.QUEUE,
        ordering=OrderingMode.INSERTION,
        accepts_nulls=False,
        notes=("None elements are rejected at the boundary",),
    ),
    Rule(
        name="front-linked",
        when=lambda p: p.insert_or_remove_at_front,
        shape=ContainerShape.SEQUENTIAL,
        ordering=OrderingMode.INSERTION,
        linked=True,
        notes=("accepts None but pays a higher per-element memory overhead",),
    ),
    Rule(
        name="default-sequential",
        when=_always,
        shape=ContainerShape.SEQUENTIAL,
        ordering=OrderingMode.INSERTION,
    ),
)

WITH_DUPLICATES_THREADED_RULES: Tuple[Rule, ...] = (
    Rule(
        name="read-mostly-copy-on-write",
        when=lambda p: p.more_reads_than_writes,
        shape=ContainerShape.SEQUENTIAL,
        ordering=OrderingMode.INSERTION,
        concurrency=ConcurrencyMode.COPY_ON_WRITE,
        notes=(COPY_ON_WRITE_NOTE,),
    ),
    Rule(
        name="default-lock-wrapped",
        when=_always,
        shape=ContainerShape.SEQUENTIAL,
        ordering=OrderingMode.INSERTION,
        concurrency=ConcurrencyMode.LOCK_WRAPPED,
        notes=(LOCK_WRAPPED_NOTE,),
    ),
)

WITHOUT_DUPLICATES_RULES: Tuple[Rule, ...] = (
    Rule(
        name="insertion-ordered-set",
        when=lambda p: p.preserve_insertion_order,
        shape=ContainerShape.HASHED,
        ordering=OrderingMode.INSERTION,
    ),
    Rule(
        name="comparator-sorted-set",
        when=lambda p: p.sort_by_comparator,
        shape=ContainerShape.TREE,
        ordering=OrderingMode.SORTED,
        accepts_nulls=False,
    ),
    Rule(
        name="default-hashed-set",
        when=_always,
        shape=ContainerShape.HASHED,
        ordering=OrderingMode.NONE,
    ),
)

WITHOUT_DUPLICATES_THREADED_RULES: Tuple[Rule, ...] = (
    Rule(
        name="concurrent-sorted-set",
        when=lambda p: p.sort_by_comparator,
        shape=ContainerShape.TREE,
        ordering=OrderingMode.SORTED,
        concurrency=ConcurrencyMode.LOCK_FREE_SORTED,
        accepts_nulls=False,
    ),
    Rule(
        name="read-mostly-copy-on-write-set",
        when=lambda p: p.more_reads_than_writes,
        shape=ContainerShape.HASHED,
        ordering=OrderingMode.NONE,
        concurrency=ConcurrencyMode.COPY_ON_WRITE,
        notes=(COPY_ON_WRITE_NOTE,),
    ),
    Rule(
        name="default-lock-wrapped-set",
        when=_always,
        shape=ContainerShape.HASHED,
        ordering=OrderingMode.NONE,
        concurrency=ConcurrencyMode.LOCK_WRAPPED,
        notes=(LOCK_WRAPPED_NOTE,),
    ),
)

BRANCH_RULES: Dict[Branch, Tuple[Rule, ...]] = {
    Branch.WITH_DUPLICATES: WITH_DUPLICATES_RULES,
    Branch.WITH_DUPLICATES_THREADED: WITH_DUPLICATES_THREADED_RULES,
    Branch.WITHOUT_DUPLICATES: WITHOUT_DUPLICATES_RULES,
    Branch.WITHOUT_DUPLICATES_THREADED: WITHOUT_DUPLICATES_THREADED_RULES,
}
