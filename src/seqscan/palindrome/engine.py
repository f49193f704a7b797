"""Linear-time longest palindrome search (Manacher's algorithm).

Works over the guarded buffer from :mod:`seqscan.palindrome.transform`.
Guards never compare equal to anything else in the buffer, so outward
expansion needs no explicit bounds checks.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from seqscan.palindrome.transform import transform
from seqscan.palindrome.types import PalindromeSpan, Symbol, TransformedBuffer


def _scan(symbols: tuple[Symbol, ...]) -> tuple[list[int], int, int]:
    """Fill radii for every buffer position.

    Returns (radii, best_position, best_radius). Ties keep the first
    (leftmost) maximal center.
    """
    radii = [0] * len(symbols)
    center = right = 0
    best_pos, best_radius = 1, 0

    for i in range(1, len(symbols) - 1):
        if i < right:
            radii[i] = min(right - i, radii[2 * center - i])
        while symbols[i + radii[i] + 1] == symbols[i - radii[i] - 1]:
            radii[i] += 1
        if i + radii[i] > right:
            center, right = i, i + radii[i]
        if radii[i] > best_radius:
            best_pos, best_radius = i, radii[i]

    return radii, best_pos, best_radius


def palindrome_radii(buffer: TransformedBuffer) -> list[int]:
    """Radius of the longest palindrome centered at each body position.

    The result has ``buffer.interleaved_length`` entries. A radius equals
    the length of the matching palindrome in the source sequence.
    """
    radii, _, _ = _scan(buffer.symbols)
    return radii[1:-1]


def find_longest_palindrome(seq: Sequence[Hashable]) -> PalindromeSpan:
    """Locate the leftmost longest palindromic run in ``seq``.

    Empty input gives ``PalindromeSpan(0, 0)``.
    """
    buffer = transform(seq)
    _, best_pos, best_radius = _scan(buffer.symbols)
    start, end = buffer.body_to_source(best_pos - 1, best_radius)
    return PalindromeSpan(start=start, end=end)


def longest_palindromic_substring(text: str) -> str:
    """Return the leftmost longest palindromic substring of ``text``.

    >>> longest_palindromic_substring("abcded")
    'ded'
    """
    span = find_longest_palindrome(text)
    return text[span.start:span.end]
