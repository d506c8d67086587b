"""Shared Hypothesis strategies."""

from hypothesis import strategies as st
from hypothesis.strategies import composite

from selector import UsageProfile

FLAGS = (
    "allow_duplicates",
    "random_access_by_position",
    "frequent_contains_checks",
    "insert_or_remove_at_front",
    "queue_semantics",
    "nulls_supported",
    "more_reads_than_writes",
    "preserve_insertion_order",
    "sort_by_comparator",
    "concurrency_required",
)


@composite
def usage_profiles(draw, **fixed):
    """Generates profiles with every flag drawn unless pinned by keyword."""
    values = {name: fixed[name] if name in fixed else draw(st.booleans()) for name in FLAGS}
    values["capacity_hint"] = fixed.get("capacity_hint", draw(st.integers(min_value=0, max_value=10_000)))
    return UsageProfile(**values)


@composite
def consistent_profiles(draw, **fixed):
    """Profiles that never ask for both insertion order and sorting."""
    profile = draw(usage_profiles(**fixed))
    if profile.has_conflicting_order:
        unpinned = [
            name for name in ("preserve_insertion_order", "sort_by_comparator")
            if name not in fixed
        ]
        values = profile.to_dict()
        values[draw(st.sampled_from(unpinned))] = False
        profile = UsageProfile(**values)
    return profile
