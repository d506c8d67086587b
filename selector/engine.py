"""Selection engine - maps a usage profile onto a container recommendation."""

from typing import Dict, List, Mapping, Tuple

from .base import BRANCH_RULES, Branch, Rule
from .errors import ConflictingOptionsError
from .profile import UsageProfile
from .recommendation import ContainerRecommendation


def validate_profile(profile: UsageProfile) -> None:
    """Reject profiles whose options contradict each other."""
    if profile.has_conflicting_order:
        raise ConflictingOptionsError(
            "Preserving insertion order and sorting by comparator are not compatible"
        )


def _first_match(branch: Branch, profile: UsageProfile) -> Tuple[Rule, List[str]]:
    """Walk the branch rules in order, return the winner and the names consulted."""
    consulted = []
    for rule in BRANCH_RULES[branch]:
        consulted.append(rule.name)
        if rule.matches(profile):
            return rule, consulted
    # Every branch ends with an unconditional rule
    raise AssertionError(f"No rule matched in branch {branch.value}")


def _apply(branch: Branch, profile: UsageProfile) -> ContainerRecommendation:
    rule, _ = _first_match(branch, profile)
    return rule.build(profile, duplicates_allowed=branch.duplicates_allowed)


def recommend_with_duplicates(profile: UsageProfile) -> ContainerRecommendation:
    """Duplicates allowed, single-threaded."""
    return _apply(Branch.WITH_DUPLICATES, profile)


def recommend_with_duplicates_threaded(profile: UsageProfile) -> ContainerRecommendation:
    """Duplicates allowed, concurrent. Only the read/write ratio is consulted."""
    return _apply(Branch.WITH_DUPLICATES_THREADED, profile)


def recommend_without_duplicates(profile: UsageProfile) -> ContainerRecommendation:
    """Unique elements, single-threaded."""
    validate_profile(profile)
    return _apply(Branch.WITHOUT_DUPLICATES, profile)


def recommend_without_duplicates_threaded(profile: UsageProfile) -> ContainerRecommendation:
    """Unique elements, concurrent. Sorted order beats the read/write ratio."""
    validate_profile(profile)
    return _apply(Branch.WITHOUT_DUPLICATES_THREADED, profile)


_BRANCH_FUNCTIONS = {
    Branch.WITH_DUPLICATES: recommend_with_duplicates,
    Branch.WITH_DUPLICATES_THREADED: recommend_with_duplicates_threaded,
    Branch.WITHOUT_DUPLICATES: recommend_without_duplicates,
    Branch.WITHOUT_DUPLICATES_THREADED: recommend_without_duplicates_threaded,
}


def recommend(profile: UsageProfile) -> ContainerRecommendation:
    """Recommend a container for the given profile.

    Args:
        profile: Declared usage pattern

    Returns:
        Recommendation produced by the first matching rule of the
        profile's branch

    Raises:
        ConflictingOptionsError: insertion order and comparator sorting
            were both requested
    """
    validate_profile(profile)
    return _BRANCH_FUNCTIONS[Branch.for_profile(profile)](profile)


def trace(profile: UsageProfile) -> List[str]:
    """Names of the rules consulted for a profile, ending with the winner."""
    validate_profile(profile)
    _, consulted = _first_match(Branch.for_profile(profile), profile)
    return consulted


class SelectionEngine:
    """Stateless front for the decision rules.

    Holds no per-call state, so one instance can be shared between
    threads. Set ``_verbose`` to print each decision.
    """

    _verbose: bool = False

    def __init__(self, name: str = "selector"):
        self.name = name

    def recommend(self, profile: UsageProfile) -> ContainerRecommendation:
        recommendation = recommend(profile)
        if self._verbose:
            self._log_selection(profile, recommendation)
        return recommendation

    def recommend_all(
        self,
        profiles: Mapping[str, UsageProfile]
    ) -> Dict[str, ContainerRecommendation]:
        """Recommend for several named profiles, failing on the first conflict."""
        return {name: self.recommend(profile) for name, profile in profiles.items()}

    def trace(self, profile: UsageProfile) -> List[str]:
        return trace(profile)

    def _log_selection(self, profile: UsageProfile, recommendation: ContainerRecommendation):
        branch = Branch.for_profile(profile)
        print(f"[{self.name}] {branch.value}: rule '{recommendation.rule}' -> {recommendation}")
        for note in recommendation.notes:
            print(f"[{self.name}]   note: {note}")
