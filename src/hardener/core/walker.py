# src/hardener/core/walker.py
"""Graph walker: one harden call's traversal, validation and commit.

A HardenPass owns the per-call structures:

- work set: nodes discovered this call and not already in the fringe,
  ordered by discovery;
- path index: node -> first-discovered access path (diagnostics only);
- prototype registry: prototype -> path of the node it belongs to.

Traversal is an explicit work queue, never recursion: hardening a node
enqueues its outbound links into the same work set, and dequeue() keeps
going until no new nodes appear. Identity dedup against the fringe and the
work set guarantees termination on cyclic graphs.

A pass is single use. Create a new one per call.
"""

from typing import Any

from hardener.contracts.descriptors import DataDescriptor
from hardener.contracts.errors import TypeKindError, UnreachablePrototypeError
from hardener.contracts.host import COMPOSITE_KINDS, FringeSet, HostValueModel
from hardener.core.identity import IdentityMap, IdentitySet
from hardener.core.logging import get_logger
from hardener.core.node import NodeHardener

logger = get_logger(__name__)

_UNKNOWN_PATH = "unknown"


class HardenPass:
    """Closure computation for a single root."""

    def __init__(self, model: HostValueModel, fringe: FringeSet, node_hardener: NodeHardener) -> None:
        self._model = model
        self._fringe = fringe
        self._node_hardener = node_hardener
        self.work_set = IdentitySet()
        self.paths = IdentityMap()
        self.prototypes = IdentityMap()

    def enqueue(self, value: Any, path: str) -> None:
        """Add value to the work set if it is a composite not yet seen.

        Raises:
            TypeKindError: If the host reports an unrecognized composite kind.
        """
        kind = self._model.kind_of(value)
        if kind is None:
            return
        if kind not in COMPOSITE_KINDS:
            raise TypeKindError(kind)
        if self._fringe.has(value) or self.work_set.has(value):
            return
        self.work_set.add(value)
        self.paths.setdefault(value, path)

    def dequeue(self) -> None:
        """Harden every queued node, including those queued along the way."""
        for node in self.work_set:
            self._freeze_and_traverse(node)

    def _freeze_and_traverse(self, node: Any) -> None:
        path = self.paths.get(node, _UNKNOWN_PATH)

        # Lock the node down before reading any of its links, so a reactive
        # node cannot change what we are about to traverse.
        self._node_hardener.harden(node, path, self.enqueue)

        proto = self._model.get_prototype_of(node)
        descriptors = self._model.get_own_property_descriptors(node)

        if proto is not None and not self.prototypes.has(proto):
            self.prototypes.set(proto, path)
            self.paths.setdefault(proto, f"{path}.__proto__")

        for key, desc in descriptors.items():
            pathname = f"{path}.{key}"
            if isinstance(desc, DataDescriptor):
                self.enqueue(desc.value, pathname)
            else:
                self.enqueue(desc.get, f"{pathname}(get)")
                self.enqueue(desc.set, f"{pathname}(set)")

    def check_prototypes(self) -> None:
        """Fail unless every recorded prototype is fringed or processed.

        Raises:
            UnreachablePrototypeError: For the first unprocessed prototype.
        """
        for proto, path in self.prototypes.items():
            if self.work_set.has(proto) or self._fringe.has(proto):
                continue
            try:
                message = f"prototype {proto} of {path} is not already in the fringe set"
            except Exception as e:
                message = "a prototype of something is not already in the fringe set (and rendering it failed)"
                logger.warning(
                    "prototype_format_failed",
                    path=path,
                    prototype_type=type(proto).__name__,
                    error=type(e).__name__,
                )
            raise UnreachablePrototypeError(proto, path, message)

    def commit(self) -> None:
        """Merge the work set into the fringe."""
        for node in self.work_set:
            self._fringe.add(node)
