"""Finite functions over sized primitive types, stored as value tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import prod

from pholi.values import PrimType, Value

SizedType = tuple[PrimType, int]


class Function:
    """A function table; arguments index the table in row-major order."""

    def __init__(
        self,
        argtypes: Iterable[SizedType],
        restype: SizedType,
        values: Iterable[int] | None = None,
    ) -> None:
        self.argtypes: list[SizedType] = list(argtypes)
        self.restype: SizedType = restype
        size = self.domain_size()
        if values is None:
            self.values: list[int] = [0] * size
        else:
            self.values = list(values)
            if len(self.values) != size:
                raise ValueError(
                    f"size of init table is wrong: it must be {size}"
                )

    def domain_size(self) -> int:
        """Number of argument tuples."""
        for tp, size in self.argtypes:
            if tp is PrimType.TRUTHVAL and size not in (2, 3):
                raise ValueError("truthval must have either 2 or 3 instances")
        return prod(size for _, size in self.argtypes)

    def allzeroes(self) -> bool:
        """True if every entry of the table is zero."""
        return not any(self.values)

    def can_exist(self) -> bool:
        """True if a function of this type can exist."""
        return bool(self.restype[1]) or not self.values

    def __call__(self, args: Sequence[Value]) -> Value:
        if len(args) != len(self.argtypes):
            raise ValueError("number of arguments does not fit to type")
        index = 0
        for arg, (_, size) in zip(args, self.argtypes):
            index = index * size + arg.index
        return Value(self.restype[0], self.values[index])

    def advance(self) -> Function:
        """Step to the next table, wrapping around to all zeroes."""
        limit = self.restype[1]
        for i in reversed(range(len(self.values))):
            self.values[i] += 1
            if self.values[i] < limit:
                return self
            self.values[i] = 0
        return self

    def _arguments(self, position: int) -> list[Value]:
        args = []
        for tp, size in reversed(self.argtypes):
            position, digit = divmod(position, size)
            args.append(Value(tp, digit))
        args.reverse()
        return args

    def __str__(self) -> str:
        signature = ", ".join(f"{tp}/{size}" for tp, size in self.argtypes)
        restp, ressize = self.restype
        lines = [f"function {signature} --> {restp}/{ressize}:"]
        for position, result in enumerate(self.values):
            args = ", ".join(str(v) for v in self._arguments(position))
            lines.append(f"   [{args}]: {Value(restp, result)}")
        return "\n".join(lines) + "\n"