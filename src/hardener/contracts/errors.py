# src/hardener/contracts/errors.py
"""Exceptions raised by the hardener.

Every error aborts the in-progress harden call immediately. Nothing is
retried internally; retry policy belongs to the caller.

All hardener errors subclass TypeError as well as HardenerError, so callers
that treat "operation not permitted on this value" as a TypeError keep
working.
"""

from typing import Any


class HardenerError(Exception):
    """Base class for all hardener errors."""

    pass


class ConfigError(HardenerError, TypeError):
    """Raised at construction when hardener options are invalid.

    The usual cause is a supplied fringe set that does not expose callable
    add() and has() methods.
    """

    pass


class TypeKindError(HardenerError, TypeError):
    """Raised when a composite value is neither object-like nor function-like.

    Unreachable with the bundled realm. Exists so that a host model adding a
    new value category fails loudly instead of being silently skipped.

    Attributes:
        kind: The category reported by the host model.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unexpected value kind: {kind!r}")


class ReadOnlyViolationError(HardenerError, TypeError):
    """Raised when assigning directly to a hardened property of its own node.

    Assignments that reach the property through a prototype chain do not
    raise; they shadow the property on the receiver instead.

    Attributes:
        key: The property key being assigned.
        node: The hardened node that owns the property.
    """

    def __init__(self, key: Any, node: Any) -> None:
        self.key = key
        self.node = node
        super().__init__(f"Cannot assign to read only property '{_render(key)}' of object '{_render(node)}'")


class UnreachablePrototypeError(HardenerError, TypeError):
    """Raised when a prototype in the hardened graph was left unprocessed.

    A single mutable prototype compromises every instance inheriting through
    it, so the whole call fails and nothing is committed to the fringe.

    Attributes:
        prototype: The offending prototype.
        path: Discovery path of the node the prototype belongs to.
    """

    def __init__(self, prototype: Any, path: str, message: str) -> None:
        self.prototype = prototype
        self.path = path
        super().__init__(message)


def _render(value: Any) -> str:
    # Host objects may run observer code when rendered; never let that mask
    # the violation being reported.
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"
