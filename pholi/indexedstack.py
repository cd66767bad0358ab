"""A stack of key/value pairs with an index for fast lookup of the latest binding."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IndexedStack(Generic[K, V]):
    """Stack of (key, value) pairs; ``find`` returns the most recent pair for a key."""

    def __init__(self) -> None:
        self._index: dict[K, list[int]] = {}
        self._stack: list[tuple[K, V]] = []

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(self._stack)

    def push(self, key: K, value: V) -> None:
        """Push a binding of ``key`` to ``value``."""
        self._index.setdefault(key, []).append(len(self._stack))
        self._stack.append((key, value))

    def pop(self) -> tuple[K, V]:
        """Remove and return the top pair."""
        if not self._stack:
            raise IndexError("pop from empty IndexedStack")
        key, value = self._stack.pop()
        positions = self._index[key]
        positions.pop()
        if not positions:
            del self._index[key]
        return key, value

    def restore(self, size: int) -> None:
        """Pop until at most ``size`` pairs remain."""
        while len(self._stack) > size:
            self.pop()

    def find(self, key: K) -> tuple[K, V] | None:
        """Return the most recently pushed pair for ``key``, or None."""
        positions = self._index.get(key)
        if positions is None:
            return None
        return self._stack[positions[-1]]

    def __str__(self) -> str:
        lines = ["Indexedstack:"]
        lines.extend(f"   {k} : {v}" for k, v in self._stack)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"IndexedStack({self._stack!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IndexedStack):
            return NotImplemented
        return self._stack == other._stack