"""Guard/separator interleaving for palindrome-center scans."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from seqscan.palindrome.types import Marker, Symbol, TransformedBuffer


def transform(seq: Sequence[Hashable]) -> TransformedBuffer:
    """Interleave ``seq`` with separators and wrap it in guards.

    Every body position becomes a uniform palindrome center: odd body
    offsets hold source symbols, even offsets hold separators. Empty
    input yields ``(LEFT_GUARD, SEPARATOR, RIGHT_GUARD)``.
    """

    symbols: list[Symbol] = [Marker.LEFT_GUARD, Marker.SEPARATOR]
    for item in seq:
        symbols.append(item)
        symbols.append(Marker.SEPARATOR)
    symbols.append(Marker.RIGHT_GUARD)
    return TransformedBuffer(symbols=tuple(symbols), source_length=len(seq))
