# src/hardener/core/__init__.py
"""Core infrastructure: Fringe, Walker, Node hardening, Logging."""

from hardener.core.fringe import WeakFringe
from hardener.core.hardener import Hardener, create_hardener
from hardener.core.identity import IdentityMap, IdentitySet
from hardener.core.logging import configure_logging, get_logger
from hardener.core.node import NodeHardener
from hardener.core.walker import HardenPass

__all__ = [
    "HardenPass",
    "Hardener",
    "IdentityMap",
    "IdentitySet",
    "NodeHardener",
    "WeakFringe",
    "configure_logging",
    "create_hardener",
    "get_logger",
]
