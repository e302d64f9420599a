# src/hardener/realm/__init__.py
"""Reference host value model: objects, functions, symbols and a realm."""

from hardener.realm.model import Realm
from hardener.realm.values import HostFunction, HostObject, HostTypeError, ObservedObject, Symbol

__all__ = [
    "HostFunction",
    "HostObject",
    "HostTypeError",
    "ObservedObject",
    "Realm",
    "Symbol",
]
