"""
hardener: transitive immutability for object-capability runtimes.

harden(root) freezes root and everything reachable from it through property
values, accessor functions and prototype links, while keeping inherited
properties overridable by assignment on descendants.
"""

from hardener.contracts import (
    ConfigError,
    HardenerError,
    HardenerOptions,
    ReadOnlyViolationError,
    TypeKindError,
    UnreachablePrototypeError,
)
from hardener.core import Hardener, WeakFringe, create_hardener

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Hardener",
    "HardenerError",
    "HardenerOptions",
    "ReadOnlyViolationError",
    "TypeKindError",
    "UnreachablePrototypeError",
    "WeakFringe",
    "create_hardener",
]
