"""Primitive types and values of finite interpretations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimType(Enum):
    """Primitive semantic types."""

    TRUTHVAL = "Truthval"
    OBJ = "Obj"

    def __str__(self) -> str:
        return self.value


_TRUTH_NAMES = {0: "ff", 1: "tt", 2: "ee"}


@dataclass(frozen=True)
class Value:
    """A value of a primitive type; truth values are 0 = false, 1 = true, 2 = error."""

    tp: PrimType
    index: int

    def __str__(self) -> str:
        if self.tp is PrimType.TRUTHVAL:
            return _TRUTH_NAMES.get(self.index, "???")
        if self.tp is PrimType.OBJ:
            return f"obj{self.index}"
        raise ValueError("unknown value type")


def preceq(val1: Value, val2: Value) -> bool:
    """True if val1 is below or equal to val2 in the information order."""
    if val1.tp is PrimType.TRUTHVAL and val1.index in (0, 1):
        return val1 == val2
    return True