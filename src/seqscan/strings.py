"""Simple string checks: anagram, two-pointer palindrome, brackets.

Indexing is by code point (plain ``str``).
"""
from __future__ import annotations


_CLOSING_TO_OPENING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def is_anagram(first: str, second: str) -> bool:
    """True if both strings hold the same characters with the same counts."""
    if len(first) != len(second):
        return False

    diff: dict[str, int] = {}
    for a, b in zip(first, second):
        diff[a] = diff.get(a, 0) + 1
        diff[b] = diff.get(b, 0) - 1
    return not any(diff.values())


def is_palindrome(word: str, *, case_sensitive: bool = False) -> bool:
    """Two-pointer palindrome check over alphabetic characters only.

    Non-alphabetic characters are skipped from both ends. The empty string
    is a palindrome.

    Args:
        word: Text to check.
        case_sensitive: If True, ``"L"`` and ``"l"`` differ.

    Returns:
        True if the alphabetic characters form a palindrome.
    """
    left, right = 0, len(word) - 1
    while left < right:
        if not word[left].isalpha():
            left += 1
            continue
        if not word[right].isalpha():
            right -= 1
            continue

        a, b = word[left], word[right]
        if not case_sensitive:
            a, b = a.casefold(), b.casefold()
        if a != b:
            return False

        left += 1
        right -= 1
    return True


def is_balanced(text: str) -> bool:
    """True if every ``()[]{}`` bracket closes in order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _CLOSING_TO_OPENING:
            if not stack or stack.pop() != _CLOSING_TO_OPENING[ch]:
                return False
    return not stack


def length_of_last_word(text: str) -> int:
    """Length of the last whitespace-delimited word.

    Punctuation and other symbols are dropped first, so
    ``"Hello world!"`` gives 5. Returns 0 when there is no word.
    """
    kept = "".join(ch for ch in text if ch.isalnum() or ch.isspace())
    words = kept.split()
    return len(words[-1]) if words else 0
