# src/hardener/realm/model.py
"""The reference realm: a host value model with prototype inheritance.

Realm implements HostValueModel for HostObject values and adds ordinary
property access (get/set) with the assignment semantics the override-safe
rewrite is designed around: assigning to an inherited writable data
property creates a shadowing own property on the receiver, while an
inherited accessor's setter is called with the receiver.

Each realm owns two intrinsics, object_prototype and function_prototype,
plus the functions installed on them. Hardeners for a realm are seeded with
realm.intrinsics() so traversal stops at the realm's shared roots.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from hardener.contracts.descriptors import AccessorDescriptor, DataDescriptor, Descriptor, PropertyKey
from hardener.contracts.host import FUNCTION_KIND, OBJECT_KIND
from hardener.realm.values import HostFunction, HostObject, HostTypeError, clamp

if TYPE_CHECKING:
    from hardener.contracts.config import HardenerOptions
    from hardener.core.hardener import Hardener

# Distinguishes "argument omitted" from an explicit None (null prototype,
# undefined receiver).
_MISSING: Any = object()


class Realm:
    """A set of intrinsics plus the reflection operations over them.

    Example:
        realm = Realm()
        point = realm.new_object({"x": 1, "y": 2})
        realm.set(point, "x", 5)
        assert realm.get(point, "x") == 5
    """

    def __init__(self) -> None:
        self.object_prototype = HostObject(prototype=None)
        self.function_prototype = HostFunction(lambda receiver, *args: None, prototype=self.object_prototype)
        self._install_intrinsics()

    def _install_intrinsics(self) -> None:
        self._define_method(self.object_prototype, "toString", lambda receiver: str(receiver))
        self._define_method(
            self.object_prototype,
            "hasOwnProperty",
            lambda receiver, key: self.get_own_property_descriptor(receiver, key) is not None,
        )
        self._define_method(
            self.function_prototype,
            "call",
            lambda receiver, this_arg=None, *args: self.call(receiver, this_arg, *args),
        )

    def _define_method(self, target: HostObject, name: str, behavior: Callable[..., Any]) -> None:
        method = self.make_function(behavior, name=name)
        target.define_own_property(
            name, DataDescriptor(value=method, writable=True, enumerable=False, configurable=True)
        )

    def intrinsics(self) -> list[HostObject]:
        """Return the realm's shared roots and every function they carry."""
        roots: list[HostObject] = [self.object_prototype, self.function_prototype]
        for proto in (self.object_prototype, self.function_prototype):
            for key in proto.own_keys():
                desc = proto.get_own_property(key)
                if isinstance(desc, DataDescriptor) and isinstance(desc.value, HostObject):
                    roots.append(desc.value)
        return roots

    def create_hardener(
        self,
        options: HardenerOptions | Mapping[str, Any] | None = None,
        extra_fringe: Iterable[Any] = (),
    ) -> Hardener:
        """Create a hardener for this realm, seeded with its intrinsics."""
        from hardener.core.hardener import create_hardener

        return create_hardener([*self.intrinsics(), *extra_fringe], options, model=self)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def new_object(
        self,
        properties: Mapping[PropertyKey, Any] | None = None,
        prototype: HostObject | None = _MISSING,
    ) -> HostObject:
        """Create an ordinary object with writable, enumerable properties.

        Args:
            properties: Initial own data properties, in order.
            prototype: Prototype link; defaults to object_prototype, None
                for a null-prototype object.
        """
        obj = HostObject(prototype=self.object_prototype if prototype is _MISSING else prototype)
        for key, value in (properties or {}).items():
            obj.define_own_property(key, DataDescriptor(value=value, writable=True, enumerable=True, configurable=True))
        return obj

    def make_function(self, behavior: Callable[..., Any], *, name: str = "") -> HostFunction:
        fn = HostFunction(behavior, prototype=self.function_prototype)
        fn.define_own_property("name", DataDescriptor(value=name, writable=False, enumerable=False, configurable=True))
        return fn

    # ------------------------------------------------------------------
    # HostValueModel
    # ------------------------------------------------------------------

    def kind_of(self, value: Any) -> str | None:
        if isinstance(value, HostFunction):
            return FUNCTION_KIND
        if isinstance(value, HostObject):
            return OBJECT_KIND
        return None

    def freeze(self, node: HostObject) -> None:
        node.prevent_extensions()
        for key in node.own_keys():
            desc = node.get_own_property(key)
            if desc is not None:
                node.define_own_property(key, clamp(desc))

    def get_own_property_descriptors(self, node: HostObject) -> dict[PropertyKey, Descriptor]:
        descriptors: dict[PropertyKey, Descriptor] = {}
        for key in node.own_keys():
            desc = node.get_own_property(key)
            if desc is not None:
                descriptors[key] = desc
        return descriptors

    def define_property(self, node: Any, key: PropertyKey, descriptor: Descriptor) -> None:
        self._require_object(node).define_own_property(key, descriptor)

    def get_prototype_of(self, node: HostObject) -> HostObject | None:
        return node.get_prototype()

    # ------------------------------------------------------------------
    # Reflection helpers
    # ------------------------------------------------------------------

    def get_own_property_descriptor(self, node: HostObject, key: PropertyKey) -> Descriptor | None:
        return self._require_object(node).get_own_property(key)

    def set_prototype_of(self, node: HostObject, prototype: HostObject | None) -> None:
        self._require_object(node).set_prototype(prototype)

    def delete_property(self, node: HostObject, key: PropertyKey) -> None:
        self._require_object(node).delete_property(key)

    def prevent_extensions(self, node: HostObject) -> None:
        node.prevent_extensions()

    def is_extensible(self, node: HostObject) -> bool:
        return node.is_extensible()

    def is_frozen(self, node: HostObject) -> bool:
        """True if node is non-extensible and every own property is locked."""
        if node.is_extensible():
            return False
        for desc in self.get_own_property_descriptors(node).values():
            if desc.configurable:
                return False
            if isinstance(desc, DataDescriptor) and desc.writable:
                return False
        return True

    # ------------------------------------------------------------------
    # Property access
    # ------------------------------------------------------------------

    def call(self, fn: Any, receiver: Any, *args: Any) -> Any:
        if not isinstance(fn, HostFunction):
            raise HostTypeError(f"{fn!r} is not a function")
        return fn.call(receiver, *args)

    def get(self, obj: HostObject, key: PropertyKey, receiver: Any = _MISSING) -> Any:
        """Read key through the prototype chain. Missing properties read as None."""
        if receiver is _MISSING:
            receiver = obj
        desc = self._lookup(obj, key)
        if desc is None:
            return None
        if isinstance(desc, DataDescriptor):
            return desc.value
        if desc.get is None:
            return None
        return self.call(desc.get, receiver)

    def set(self, obj: HostObject, key: PropertyKey, value: Any, receiver: Any = _MISSING) -> None:
        """Assign key with ordinary (strict) assignment semantics.

        Raises:
            HostTypeError: If the assignment is rejected.
        """
        if receiver is _MISSING:
            receiver = obj
        desc = self._lookup(obj, key)
        if isinstance(desc, AccessorDescriptor):
            if desc.set is None:
                raise HostTypeError(f"Cannot set property {key} of {receiver} which has only a getter")
            self.call(desc.set, receiver, value)
            return
        if desc is not None and not desc.writable:
            raise HostTypeError(f"Cannot assign to read only property '{key}' of object '{receiver}'")

        target = self._require_object(receiver)
        existing = target.get_own_property(key)
        if existing is None:
            target.define_own_property(
                key, DataDescriptor(value=value, writable=True, enumerable=True, configurable=True)
            )
        elif isinstance(existing, AccessorDescriptor) or not existing.writable:
            raise HostTypeError(f"Cannot assign to property '{key}' of object '{receiver}'")
        else:
            target.define_own_property(key, replace(existing, value=value))

    def _lookup(self, obj: HostObject, key: PropertyKey) -> Descriptor | None:
        current: HostObject | None = self._require_object(obj)
        while current is not None:
            desc = current.get_own_property(key)
            if desc is not None:
                return desc
            current = current.get_prototype()
        return None

    def _require_object(self, value: Any) -> HostObject:
        if not isinstance(value, HostObject):
            raise HostTypeError(f"{value!r} is not an object")
        return value
