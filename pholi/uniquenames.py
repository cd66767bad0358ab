"""Stack of unique variable names for pretty printing bound variables."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TRAILING_DIGITS = re.compile(r"[0-9]*\Z")


def _split(name: str) -> tuple[str, int]:
    """Split a name into its base and trailing numeric index."""
    match = _TRAILING_DIGITS.search(name)
    digits = match.group(0)
    base = name[: match.start()]
    return base, int(digits) if digits else 0


@dataclass(frozen=True)
class UniqueName:
    """A base name with an index; index 0 is printed as the bare base."""

    base: str
    index: int

    def __str__(self) -> str:
        return f"{self.base}{self.index}" if self.index else self.base


class UniqueNameStack:
    """Hands out names that are distinct from all names currently on the stack."""

    def __init__(self) -> None:
        self._names: list[UniqueName] = []
        self._indices: dict[str, list[int]] = {}

    def __len__(self) -> int:
        return len(self._names)

    def extend(self, name: str) -> UniqueName:
        """Push a fresh name derived from ``name`` and return it."""
        base, index = _split(name)
        if not base:
            base = "V"
        used = self._indices.setdefault(base, [])
        if used and used[-1] + 1 > index:
            index = used[-1] + 1
        used.append(index)
        unique = UniqueName(base, index)
        self._names.append(unique)
        return unique

    def restore(self, size: int) -> None:
        """Pop names until at most ``size`` remain."""
        while len(self._names) > size:
            base = self._names.pop().base
            used = self._indices[base]
            used.pop()
            if not used:
                del self._indices[base]

    def getname(self, index: int) -> UniqueName:
        """Look up a name by De Bruijn index."""
        if not 0 <= index < len(self._names):
            raise IndexError("bad De Bruijn index")
        return self._names[len(self._names) - index - 1]

    def issafe(self, name: str) -> bool:
        """True if the base of ``name`` is not in use."""
        base, _ = _split(name)
        return base not in self._indices

    def __str__(self) -> str:
        lines = ["Uniquenamestack:"]
        first = 1 - len(self._names)
        lines.extend(
            f"   #{first + offset} : {name}" for offset, name in enumerate(self._names)
        )
        return "\n".join(lines) + "\n"