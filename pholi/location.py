"""Source locations used by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Location:
    """A zero-based line and column position in an input."""

    line: int
    column: int

    def merge(self, other: Location) -> Location:
        """Merge with another location of the same span.

        A span is identified by where it starts, so the merged location
        is this one, unchanged.
        """
        return self

    def __str__(self) -> str:
        return f"{self.line + 1}/{self.column + 1}"