"""Palindrome transform and radius engine."""

from seqscan.palindrome.engine import (
    find_longest_palindrome,
    longest_palindromic_substring,
    palindrome_radii,
)
from seqscan.palindrome.transform import transform
from seqscan.palindrome.types import (
    Marker,
    PalindromeSpan,
    Symbol,
    TransformedBuffer,
)

__all__ = [
    "Marker",
    "PalindromeSpan",
    "Symbol",
    "TransformedBuffer",
    "find_longest_palindrome",
    "longest_palindromic_substring",
    "palindrome_radii",
    "transform",
]
