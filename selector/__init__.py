"""Selector module for container selection."""

from .base import Branch, Rule
from .engine import (
    SelectionEngine,
    recommend,
    recommend_with_duplicates,
    recommend_with_duplicates_threaded,
    recommend_without_duplicates,
    recommend_without_duplicates_threaded,
    trace,
    validate_profile,
)
from .errors import (
    AdvisorError,
    ConfigError,
    ConflictingOptionsError,
    InvalidArgumentError,
    MisuseError,
    MissingValueError,
    UnsupportedContainerError,
)
from .profile import UsageProfile
from .recommendation import (
    ConcurrencyMode,
    ContainerRecommendation,
    ContainerShape,
    OrderingMode,
)
from .tree import decision_graph, rule_order

__all__ = [
    'Branch',
    'Rule',
    'SelectionEngine',
    'recommend',
    'recommend_with_duplicates',
    'recommend_with_duplicates_threaded',
    'recommend_without_duplicates',
    'recommend_without_duplicates_threaded',
    'trace',
    'validate_profile',
    'AdvisorError',
    'ConfigError',
    'ConflictingOptionsError',
    'InvalidArgumentError',
    'MisuseError',
    'MissingValueError',
    'UnsupportedContainerError',
    'UsageProfile',
    'ConcurrencyMode',
    'ContainerRecommendation',
    'ContainerShape',
    'OrderingMode',
    'decision_graph',
    'rule_order',
]
