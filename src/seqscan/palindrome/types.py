"""Core types for the palindrome transform and radius engine."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum


class Marker(Enum):
    """Reserved buffer symbols. Never equal to any input symbol."""

    LEFT_GUARD = "^"
    SEPARATOR = "#"
    RIGHT_GUARD = "$"


type Symbol = Hashable | Marker


@dataclass(frozen=True, slots=True)
class TransformedBuffer:
    """Guarded, separator-interleaved view of an input sequence.

    ``symbols`` is ``LEFT_GUARD, SEP, s0, SEP, ..., s(n-1), SEP, RIGHT_GUARD``.
    The interleaved body between the guards has length ``2n + 1``.
    """

    symbols: tuple[Symbol, ...]
    source_length: int

    def __post_init__(self) -> None:
        if self.source_length < 0:
            raise ValueError(f"source_length must be >= 0, got {self.source_length}")
        if len(self.symbols) != 2 * self.source_length + 3:
            raise ValueError(
                "symbols length must equal 2 * source_length + 3, "
                f"got {len(self.symbols)} for source_length {self.source_length}",
            )
        if self.symbols[0] is not Marker.LEFT_GUARD:
            raise ValueError("symbols must start with LEFT_GUARD")
        if self.symbols[-1] is not Marker.RIGHT_GUARD:
            raise ValueError("symbols must end with RIGHT_GUARD")

    @property
    def interleaved_length(self) -> int:
        return 2 * self.source_length + 1

    def body_to_source(self, body_index: int, radius: int) -> tuple[int, int]:
        """Map a body center and radius to a half-open source range."""
        start = (body_index - radius) // 2
        return start, start + radius


@dataclass(frozen=True, slots=True)
class PalindromeSpan:
    """Half-open ``[start, end)`` range of a palindrome in the source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end must be >= start, got {self.end} < {self.start}")

    @property
    def length(self) -> int:
        return self.end - self.start
