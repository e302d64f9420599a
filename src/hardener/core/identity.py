# src/hardener/core/identity.py
"""Identity-keyed collections for per-call bookkeeping.

Host values may define __eq__/__hash__ (or be unhashable, like dict), so
every table the walker keeps is keyed by id(). Entries hold a strong
reference to their key object, which keeps the id stable for as long as
the entry exists. These tables live for one harden call only.
"""

from collections.abc import Iterator
from typing import Any


class IdentitySet:
    """Insertion-ordered set comparing members by identity.

    Iterating while adding is supported: members appended during iteration
    are visited by the same iteration. The walker's fixpoint relies on this.
    """

    def __init__(self) -> None:
        self._members: list[Any] = []
        self._ids: set[int] = set()

    def add(self, item: Any) -> None:
        if id(item) not in self._ids:
            self._ids.add(id(item))
            self._members.append(item)

    def has(self, item: Any) -> bool:
        return id(item) in self._ids

    __contains__ = has

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        index = 0
        while index < len(self._members):
            yield self._members[index]
            index += 1


class IdentityMap:
    """Insertion-ordered mapping keyed by object identity."""

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Any, Any]] = {}

    def set(self, key: Any, value: Any) -> None:
        self._entries[id(key)] = (key, value)

    def setdefault(self, key: Any, value: Any) -> Any:
        entry = self._entries.setdefault(id(key), (key, value))
        return entry[1]

    def get(self, key: Any, default: Any = None) -> Any:
        entry = self._entries.get(id(key))
        return default if entry is None else entry[1]

    def has(self, key: Any) -> bool:
        return id(key) in self._entries

    __contains__ = has

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in insertion order."""
        yield from self._entries.values()
