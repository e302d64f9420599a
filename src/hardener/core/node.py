# src/hardener/core/node.py
"""Per-node hardening: override-safe rewrite followed by structural freeze.

A plain freeze would make every inherited data property read-only for all
descendants too, so `child.p = v` would fail merely because an ancestor was
hardened (the "override mistake"). To keep shadow-on-write working, each
configurable data property is replaced by a non-configurable accessor pair:

- the getter returns the captured value;
- the setter raises ReadOnlyViolationError when the receiver is the node
  itself, and otherwise defines a fresh writable own property on the
  receiver.

Non-configurable properties are deliberately left for freeze() to clamp.
"""

from collections.abc import Callable
from typing import Any, TypeAlias

from hardener.contracts.descriptors import AccessorDescriptor, DataDescriptor, PropertyKey
from hardener.contracts.errors import ReadOnlyViolationError
from hardener.contracts.host import HostValueModel

Enqueue: TypeAlias = Callable[[Any, str], None]


class NodeHardener:
    """Rewrites and freezes one node at a time.

    Stateless apart from its collaborators; one instance serves every call
    of a hardener.
    """

    def __init__(self, model: HostValueModel, prepare_hook: Callable[[Any], None] | None = None) -> None:
        self._model = model
        self._prepare_hook = prepare_hook

    def harden(self, node: Any, path: str, enqueue: Enqueue) -> None:
        """Run the prepare hook (if any), then rewrite and freeze node.

        Args:
            node: Composite value to harden.
            path: Discovery path of node, used for the accessor functions.
            enqueue: Walker callback receiving every function created here.
        """
        if self._prepare_hook is not None:
            self._prepare_hook(node)
        self.freeze_with_override(node, path, enqueue)

    def freeze_with_override(self, node: Any, path: str, enqueue: Enqueue) -> None:
        model = self._model
        descriptors = model.get_own_property_descriptors(node)
        for key, desc in descriptors.items():
            if not desc.configurable:
                # Writable ones are clamped by freeze() below
                continue
            if isinstance(desc, DataDescriptor):
                getter, setter = self._make_override_pair(node, key, desc.value)
                model.freeze(getter)
                model.freeze(setter)
                enqueue(getter, f"{path}.{key}(get)")
                enqueue(setter, f"{path}.{key}(set)")
                model.define_property(
                    node,
                    key,
                    AccessorDescriptor(get=getter, set=setter, enumerable=desc.enumerable, configurable=False),
                )
            else:
                model.define_property(
                    node,
                    key,
                    AccessorDescriptor(get=desc.get, set=desc.set, enumerable=desc.enumerable, configurable=False),
                )
        model.freeze(node)

    def _make_override_pair(self, node: Any, key: PropertyKey, value: Any) -> tuple[Any, Any]:
        model = self._model

        def get_value(receiver: Any) -> Any:
            return value

        def set_value(receiver: Any, new_value: Any) -> None:
            if receiver is node:
                raise ReadOnlyViolationError(key, node)
            model.define_property(
                receiver,
                key,
                DataDescriptor(value=new_value, writable=True, enumerable=True, configurable=True),
            )

        getter = model.make_function(get_value, name=f"get {key}")
        setter = model.make_function(set_value, name=f"set {key}")
        # The captured value lives in a closure the walker cannot see; expose
        # it on the getter so traversal of the getter reaches it.
        model.define_property(getter, "value", DataDescriptor(value=value))
        return getter, setter
