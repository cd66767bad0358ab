"""Exact names: identifiers that have been resolved to a definition number."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Exact:
    """A resolved name; ordered by definition number."""

    nr: int

    def __post_init__(self) -> None:
        if self.nr < 0:
            raise ValueError("exact number must be non-negative")

    def __hash__(self) -> int:
        return self.nr

    def __str__(self) -> str:
        return f"${self.nr}"