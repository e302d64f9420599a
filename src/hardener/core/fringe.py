# src/hardener/core/fringe.py
"""Weak-membership fringe of already-hardened nodes.

The fringe is the frontier where traversal stops: nodes that were hardened
by an earlier call, or that the caller declared terminal. It only grows.

Membership does not keep a node alive. Nodes that cannot be weakly
referenced (plain dict, list and other builtins without __weakref__) are
retained strongly instead; for those the fringe extends their lifetime to
the fringe's own.

Thread Safety:
    NOT thread-safe. Hardeners sharing a fringe must be serialized by the
    caller.
"""

import weakref
from collections.abc import Iterable
from typing import Any


class WeakFringe:
    """Identity-keyed set with weak membership.

    Example:
        fringe = WeakFringe(realm.intrinsics())
        fringe.add(node)
        assert fringe.has(node)
    """

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        self._weak: dict[int, weakref.ref[Any]] = {}
        self._strong: dict[int, Any] = {}
        for node in initial:
            self.add(node)

    def add(self, node: Any) -> None:
        """Add node by identity. Adding an existing member is a no-op."""
        key = id(node)
        if self._lookup(key) is node:
            return
        try:
            self._weak[key] = weakref.ref(node, self._make_reaper(key))
        except TypeError:
            # Not weakly referenceable.
            self._strong[key] = node

    def has(self, node: Any) -> bool:
        """Return True if this exact object is a member."""
        return self._lookup(id(node)) is node

    __contains__ = has

    def __len__(self) -> int:
        return len(self._strong) + sum(1 for ref in self._weak.values() if ref() is not None)

    def _lookup(self, key: int) -> Any:
        ref = self._weak.get(key)
        if ref is not None:
            target = ref()
            if target is not None:
                return target
        return self._strong.get(key)

    def _make_reaper(self, key: int) -> Any:
        # The callback must not reference self strongly, or the fringe could
        # never be collected while members are alive.
        weak_self = weakref.ref(self)

        def reap(ref: weakref.ref[Any]) -> None:
            fringe = weak_self()
            if fringe is not None and fringe._weak.get(key) is ref:
                del fringe._weak[key]

        return reap
