from .pool import ContainerPool
from .structures import NullRejectingDeque, OrderedSet

__all__ = ['ContainerPool', 'NullRejectingDeque', 'OrderedSet']
