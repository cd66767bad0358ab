"""Three-valued lattice operations and finite interpretations."""

from __future__ import annotations

from enum import Enum

from pholi.function import Function
from pholi.values import PrimType, Value


class Connective(Enum):
    """Connectives and quantifiers whose truth values form a lattice."""

    AND = "and"
    OR = "or"
    KLEENE_AND = "kleene_and"
    KLEENE_OR = "kleene_or"
    FORALL = "forall"
    EXISTS = "exists"
    KLEENE_FORALL = "kleene_forall"
    KLEENE_EXISTS = "kleene_exists"

    def __str__(self) -> str:
        return self.value


_FALSE, _TRUE, _ERROR = 0, 1, 2

_TOP = {
    Connective.AND: _TRUE,
    Connective.KLEENE_AND: _TRUE,
    Connective.FORALL: _TRUE,
    Connective.KLEENE_FORALL: _TRUE,
    Connective.OR: _FALSE,
    Connective.KLEENE_OR: _FALSE,
    Connective.EXISTS: _FALSE,
    Connective.KLEENE_EXISTS: _FALSE,
}

_BOTTOM = {
    Connective.KLEENE_AND: _FALSE,
    Connective.KLEENE_FORALL: _FALSE,
    Connective.KLEENE_OR: _TRUE,
    Connective.KLEENE_EXISTS: _TRUE,
    Connective.AND: _ERROR,
    Connective.FORALL: _ERROR,
    Connective.OR: _ERROR,
    Connective.EXISTS: _ERROR,
}

# Truth values in order of dominance when merging.
_PRIORITY = {
    Connective.AND: (_ERROR, _FALSE),
    Connective.FORALL: (_ERROR, _FALSE),
    Connective.KLEENE_AND: (_FALSE, _ERROR),
    Connective.KLEENE_FORALL: (_FALSE, _ERROR),
    Connective.OR: (_ERROR, _TRUE),
    Connective.EXISTS: (_ERROR, _TRUE),
    Connective.KLEENE_OR: (_TRUE, _ERROR),
    Connective.KLEENE_EXISTS: (_TRUE, _ERROR),
}


def _truth(index: int) -> Value:
    return Value(PrimType.TRUTHVAL, index)


def top(sel: Connective) -> Value:
    """The neutral value of ``sel``."""
    try:
        return _truth(_TOP[sel])
    except KeyError:
        raise ValueError(f"dont know top of {sel}") from None


def bottom(sel: Connective) -> Value:
    """The absorbing value of ``sel``."""
    try:
        return _truth(_BOTTOM[sel])
    except KeyError:
        raise ValueError(f"dont know bottom of {sel}") from None


def merge(sel: Connective, val1: Value, val2: Value) -> Value:
    """Combine two truth values under ``sel``; always moves towards the bottom."""
    if val1.tp is not PrimType.TRUTHVAL or val2.tp is not PrimType.TRUTHVAL:
        raise ValueError("only truth values can be merged")
    try:
        first, second = _PRIORITY[sel]
    except KeyError:
        raise ValueError(f"dont know how to merge {sel}") from None
    indices = (val1.index, val2.index)
    if first in indices:
        return _truth(first)
    if second in indices:
        return _truth(second)
    return top(sel)


class Interpretation:
    """Function tables for identifiers over a domain of ``nrobjects`` objects,
    together with a valuation stack for De Bruijn indices."""

    def __init__(self, nrobjects: int) -> None:
        self.nrobjects = nrobjects
        self.mp: dict[str, Function] = {}
        self.valuation: list[Function] = []

    def nr_identifiers(self) -> int:
        """Number of interpreted identifiers."""
        return len(self.mp)

    def extend(self, ident: str, function: Function) -> Function:
        """Interpret ``ident`` by ``function``; the identifier must be new."""
        if ident in self.mp:
            raise ValueError("extend: identifier is present")
        self.mp[ident] = function
        return function

    def retract(self, ident: str) -> None:
        """Remove the interpretation of ``ident``."""
        if ident not in self.mp:
            raise KeyError("retract: identifier not present")
        del self.mp[ident]

    def at(self, ident: str) -> Function:
        """The function interpreting ``ident``."""
        return self.mp[ident]

    def local(self, index: int) -> Function:
        """Look up a bound variable by De Bruijn index."""
        if not 0 <= index < len(self.valuation):
            raise IndexError("bad De Bruijn index")
        return self.valuation[len(self.valuation) - index - 1]

    def push(self, function: Function) -> Function:
        """Bind a new innermost variable."""
        self.valuation.append(function)
        return function

    def pop(self) -> Function:
        """Unbind the innermost variable."""
        if not self.valuation:
            raise IndexError("pop from empty valuation")
        return self.valuation.pop()

    def __str__(self) -> str:
        parts = [f"Interpretation( {self.nrobjects} ):\n"]
        parts.extend(f"{ident}:   {function}\n" for ident, function in self.mp.items())
        if self.valuation:
            parts.append("valuation:\n")
            first = 1 - len(self.valuation)
            parts.extend(
                f"   #{first + offset} : {function}\n"
                for offset, function in enumerate(self.valuation)
            )
        return "".join(parts)