# src/hardener/contracts/host.py
"""Host value model protocol.

The hardener never manipulates values directly. Every structural operation
(freeze, descriptor reflection, prototype reads, function creation) goes
through an object satisfying HostValueModel. hardener.realm.Realm is the
bundled implementation.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from hardener.contracts.descriptors import Descriptor, PropertyKey

# Kinds the walker knows how to harden. kind_of() returns None for
# non-composite values; anything else is a TypeKindError.
OBJECT_KIND = "object"
FUNCTION_KIND = "function"
COMPOSITE_KINDS = frozenset({OBJECT_KIND, FUNCTION_KIND})


@runtime_checkable
class HostValueModel(Protocol):
    """Reflection capabilities the hardener consumes.

    Implementations must make freeze() irreversible: once frozen, a node
    rejects property addition, removal and reconfiguration, and every data
    property it owns is non-writable.
    """

    def kind_of(self, value: Any) -> str | None:
        """Return the value's category, or None if it is not composite."""
        ...

    def freeze(self, node: Any) -> None:
        """Apply the structural freeze to node."""
        ...

    def get_own_property_descriptors(self, node: Any) -> Mapping[PropertyKey, Descriptor]:
        """Snapshot all own properties, ordered by own-key enumeration.

        Non-string keys are included.
        """
        ...

    def define_property(self, node: Any, key: PropertyKey, descriptor: Descriptor) -> None:
        """Define or redefine an own property.

        Raises:
            TypeError: If the definition is not permitted.
        """
        ...

    def get_prototype_of(self, node: Any) -> Any:
        """Return node's prototype, or None."""
        ...

    def make_function(self, behavior: Callable[..., Any], *, name: str) -> Any:
        """Create a host function node.

        behavior is called as behavior(receiver, *args).
        """
        ...


@runtime_checkable
class FringeSet(Protocol):
    """Membership capabilities required of a caller-supplied fringe set."""

    def add(self, node: Any) -> Any:
        """Add node to the set."""
        ...

    def has(self, node: Any) -> bool:
        """Return True if node is a member."""
        ...
