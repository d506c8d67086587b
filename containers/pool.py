from collections import deque
from threading import Lock
from typing import Any, Callable, Dict, List, Tuple

from selector import (
    ConcurrencyMode,
    ContainerRecommendation,
    ContainerShape,
    OrderingMode,
    UsageProfile,
    UnsupportedContainerError,
    recommend,
)

from .structures import NullRejectingDeque, OrderedSet

ContainerKey = Tuple[ContainerShape, OrderingMode, ConcurrencyMode, bool]
ContainerFactory = Callable[[], Any]


# Built-ins, or thin adaptations of them, covering every single-threaded
# outcome except comparator sorting. Lock-wrapped outcomes reuse them:
# the caller owns the lock.
_DEFAULTS: Dict[ContainerKey, ContainerFactory] = {
    (ContainerShape.SEQUENTIAL, OrderingMode.INSERTION, ConcurrencyMode.NONE, False): list,
    (ContainerShape.SEQUENTIAL, OrderingMode.INSERTION, ConcurrencyMode.NONE, True): deque,
    (ContainerShape.QUEUE, OrderingMode.INSERTION, ConcurrencyMode.NONE, False): NullRejectingDeque,
    (ContainerShape.HASHED, OrderingMode.INSERTION, ConcurrencyMode.NONE, False): OrderedSet,
    (ContainerShape.HASHED, OrderingMode.NONE, ConcurrencyMode.NONE, False): set,
    (ContainerShape.SEQUENTIAL, OrderingMode.INSERTION, ConcurrencyMode.LOCK_WRAPPED, False): list,
    (ContainerShape.HASHED, OrderingMode.NONE, ConcurrencyMode.LOCK_WRAPPED, False): set,
}


class ContainerPool:
    """Turns recommendations into fresh, caller-owned containers.

    Callers register factories for the combinations Python has no
    built-in for (sorted sets, copy-on-write, concurrent sorted sets).
    """

    _lock = Lock()
    _registry: Dict[ContainerKey, ContainerFactory] = dict(_DEFAULTS)
    _verbose: bool = False

    @classmethod
    def register(cls, key: ContainerKey, factory: ContainerFactory) -> None:
        with cls._lock:
            cls._registry[key] = factory

    @classmethod
    def register_for(cls, recommendation: ContainerRecommendation, factory: ContainerFactory) -> None:
        cls.register(recommendation.key, factory)

    @classmethod
    def create(cls, recommendation: ContainerRecommendation) -> Any:
        with cls._lock:
            factory = cls._registry.get(recommendation.key)

        if factory is None:
            raise UnsupportedContainerError(
                f"No container registered for {recommendation} ({recommendation.python_type})"
            )

        container = factory()
        if cls._verbose:
            print(f"[pool] {recommendation} -> {type(container).__name__}")
        return container

    @classmethod
    def create_for(cls, profile: UsageProfile) -> Any:
        """Recommend for profile, then build the matching container."""
        return cls.create(recommend(profile))

    @classmethod
    def registered(cls) -> List[ContainerKey]:
        with cls._lock:
            return list(cls._registry.keys())

    @classmethod
    def clear(cls) -> None:
        """Drop caller registrations, keeping the built-in defaults."""
        with cls._lock:
            cls._registry.clear()
            cls._registry.update(_DEFAULTS)
