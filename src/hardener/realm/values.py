# src/hardener/realm/values.py
"""Value types of the reference realm.

HostObject is a property table plus a prototype link and an extensible
flag. The methods here are the object's internal operations; they enforce
the descriptor invariants (non-configurable properties can only be
tightened, non-extensible objects gain no properties). Reflection and
property access for callers go through hardener.realm.Realm.

Leaf module - no imports from hardener.core.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from hardener.contracts.descriptors import AccessorDescriptor, DataDescriptor, Descriptor, PropertyKey


class HostTypeError(TypeError):
    """Raised when the realm rejects an operation on a value.

    Covers assignments to read-only properties, additions to non-extensible
    objects and forbidden redefinitions of non-configurable properties.
    """

    pass


class Symbol:
    """A non-string property key, unique by identity.

    Example:
        tag = Symbol("tag")
        realm.define_property(obj, tag, DataDescriptor(value=1))
    """

    __slots__ = ("description",)

    def __init__(self, description: str = "") -> None:
        self.description = description

    def __str__(self) -> str:
        return f"Symbol({self.description})"

    __repr__ = __str__


class HostObject:
    """An ordinary object: ordered own properties and a prototype link."""

    __slots__ = ("__weakref__", "_extensible", "_properties", "_prototype")

    def __init__(self, prototype: HostObject | None = None) -> None:
        self._properties: dict[PropertyKey, Descriptor] = {}
        self._prototype = prototype
        self._extensible = True

    def __str__(self) -> str:
        return "[object Object]"

    def own_keys(self) -> list[PropertyKey]:
        return list(self._properties)

    def get_own_property(self, key: PropertyKey) -> Descriptor | None:
        return self._properties.get(key)

    def get_prototype(self) -> HostObject | None:
        return self._prototype

    def set_prototype(self, prototype: HostObject | None) -> None:
        if prototype is self._prototype:
            return
        if not self._extensible:
            raise HostTypeError(f"{self} is not extensible")
        self._prototype = prototype

    def is_extensible(self) -> bool:
        return self._extensible

    def prevent_extensions(self) -> None:
        self._extensible = False

    def delete_property(self, key: PropertyKey) -> None:
        current = self._properties.get(key)
        if current is None:
            return
        if not current.configurable:
            raise HostTypeError(f"Cannot delete property '{key}' of {self}")
        del self._properties[key]

    def define_own_property(self, key: PropertyKey, desc: Descriptor) -> None:
        """Define key, enforcing extensibility and non-configurable invariants.

        Raises:
            HostTypeError: If the definition is forbidden.
        """
        current = self._properties.get(key)
        if current is None:
            if not self._extensible:
                raise HostTypeError(f"Cannot define property '{key}', object is not extensible")
        elif not current.configurable:
            _check_redefinition(key, current, desc)
        self._properties[key] = desc


class HostFunction(HostObject):
    """A callable object. behavior is invoked as behavior(receiver, *args)."""

    __slots__ = ("_behavior",)

    def __init__(self, behavior: Callable[..., Any], prototype: HostObject | None = None) -> None:
        super().__init__(prototype)
        self._behavior = behavior

    def __str__(self) -> str:
        name = self.get_own_property("name")
        label = name.value if isinstance(name, DataDescriptor) else ""
        return f"function {label}() {{ [native code] }}"

    def call(self, receiver: Any, *args: Any) -> Any:
        return self._behavior(receiver, *args)


class ObservedObject(HostObject):
    """An object whose internal operations notify an observer first.

    Models virtualized or reactive objects: the observer runs arbitrary code
    before each operation, receiving (target, operation, key). Operations
    are "own_keys", "get_own_property", "define_own_property",
    "get_prototype" and "prevent_extensions".
    """

    __slots__ = ("_observer",)

    def __init__(
        self,
        observer: Callable[[ObservedObject, str, PropertyKey | None], None],
        prototype: HostObject | None = None,
    ) -> None:
        super().__init__(prototype)
        self._observer = observer

    def own_keys(self) -> list[PropertyKey]:
        self._observer(self, "own_keys", None)
        return super().own_keys()

    def get_own_property(self, key: PropertyKey) -> Descriptor | None:
        self._observer(self, "get_own_property", key)
        return super().get_own_property(key)

    def define_own_property(self, key: PropertyKey, desc: Descriptor) -> None:
        self._observer(self, "define_own_property", key)
        super().define_own_property(key, desc)

    def get_prototype(self) -> HostObject | None:
        self._observer(self, "get_prototype", None)
        return super().get_prototype()

    def prevent_extensions(self) -> None:
        self._observer(self, "prevent_extensions", None)
        super().prevent_extensions()


def clamp(desc: Descriptor) -> Descriptor:
    """Return desc as freeze() leaves it: non-configurable, data non-writable."""
    if isinstance(desc, DataDescriptor):
        return replace(desc, writable=False, configurable=False)
    return replace(desc, configurable=False)


def _check_redefinition(key: PropertyKey, current: Descriptor, desc: Descriptor) -> None:
    def reject() -> None:
        raise HostTypeError(f"Cannot redefine property: {key}")

    if desc.configurable or desc.enumerable != current.enumerable:
        reject()
    if isinstance(current, DataDescriptor):
        if not isinstance(desc, DataDescriptor):
            reject()
        elif not current.writable and (desc.writable or not _same_value(desc.value, current.value)):
            reject()
    elif not isinstance(desc, AccessorDescriptor) or desc.get is not current.get or desc.set is not current.set:
        reject()


def _same_value(a: Any, b: Any) -> bool:
    """Host SameValue: NaN equals itself, 0.0 and -0.0 differ."""
    if a is b:
        return True
    if isinstance(a, HostObject) or isinstance(b, HostObject):
        return False
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b
