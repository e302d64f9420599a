# src/hardener/contracts/descriptors.py
"""Property descriptor contracts.

A property is either a data property (stored value) or an accessor property
(getter/setter pair). Modelling the two as distinct frozen dataclasses keeps
the hardening algorithm independent of any one host's reflection API: code
dispatches on the descriptor type, never on the presence of a "value" key.

Leaf module - no intra-package imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

# Property keys are strings or host-specific non-string keys (symbols).
PropertyKey: TypeAlias = Any


@dataclass(frozen=True, slots=True)
class DataDescriptor:
    """A property holding a stored value."""

    value: Any = None
    writable: bool = False
    enumerable: bool = False
    configurable: bool = False


@dataclass(frozen=True, slots=True)
class AccessorDescriptor:
    """A property computed by a getter and/or setter function.

    get and set are host function nodes, or None when absent.
    """

    get: Any = None
    set: Any = None
    enumerable: bool = False
    configurable: bool = False


Descriptor: TypeAlias = DataDescriptor | AccessorDescriptor
