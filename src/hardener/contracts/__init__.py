# src/hardener/contracts/__init__.py
"""Shared contracts: descriptors, host protocol, options and errors.

Leaf package - nothing here imports from hardener.core or hardener.realm.
"""

from hardener.contracts.config import HardenerOptions
from hardener.contracts.descriptors import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    PropertyKey,
)
from hardener.contracts.errors import (
    ConfigError,
    HardenerError,
    ReadOnlyViolationError,
    TypeKindError,
    UnreachablePrototypeError,
)
from hardener.contracts.host import (
    COMPOSITE_KINDS,
    FUNCTION_KIND,
    OBJECT_KIND,
    FringeSet,
    HostValueModel,
)

__all__ = [
    "COMPOSITE_KINDS",
    "FUNCTION_KIND",
    "OBJECT_KIND",
    "AccessorDescriptor",
    "ConfigError",
    "DataDescriptor",
    "Descriptor",
    "FringeSet",
    "HardenerError",
    "HardenerOptions",
    "HostValueModel",
    "PropertyKey",
    "ReadOnlyViolationError",
    "TypeKindError",
    "UnreachablePrototypeError",
]
