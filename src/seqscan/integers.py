"""Integer property checks."""
from __future__ import annotations


def is_palindrome_number(x: int) -> bool:
    """True if the decimal digits of ``x`` read the same both ways.

    Negatives never qualify. Only half the digits are reversed.
    """
    if x < 0 or (x % 10 == 0 and x != 0):
        return False

    rev = 0
    while x > rev:
        rev = rev * 10 + x % 10
        x //= 10

    # Odd digit counts leave the middle digit on rev.
    return x == rev or x == rev // 10


def is_odd(x: int) -> bool:
    return x & 1 == 1


def is_even(x: int) -> bool:
    return x & 1 == 0
