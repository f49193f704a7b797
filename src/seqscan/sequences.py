"""Single-pass scans over generic collections, plus binary search.

Every function reports "not found" as ``False`` or ``None``; none raise
on well-formed input.
"""
from __future__ import annotations

import operator
from collections.abc import Hashable, Iterable, Sequence
from functools import reduce
from typing import Any, TypeVar


T = TypeVar("T", bound=Hashable)


def is_duplicate(items: Iterable[T]) -> bool:
    """True if any element occurs more than once."""
    seen: set[T] = set()
    for item in items:
        if item in seen:
            return True
        seen.add(item)
    return False


def find_duplicate(items: Iterable[T]) -> T | None:
    """Return the first element seen a second time, or None."""
    seen: set[T] = set()
    for item in items:
        if item in seen:
            return item
        seen.add(item)
    return None


def majority_element(items: Sequence[T]) -> T | None:
    """Return the element occurring more than ``len(items) // 2`` times.

    Stops as soon as one element reaches the ``len // 2 + 1`` threshold.
    """
    threshold = len(items) // 2 + 1
    counts: dict[T, int] = {}
    for item in items:
        counts[item] = counts.get(item, 0) + 1
        if counts[item] >= threshold:
            return item
    return None


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices ``(i, j)``, ``i < j``, with ``nums[i] + nums[j] == target``."""
    index_of: dict[int, int] = {}
    for j, value in enumerate(nums):
        i = index_of.get(target - value)
        if i is not None:
            return i, j
        index_of.setdefault(value, j)
    return None


def missing_number(nums: Sequence[int]) -> int:
    """Missing value of a ``0..n`` run given ``n`` distinct members of it."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def single_number(nums: Iterable[int]) -> int:
    """The one value not paired; every other value appears exactly twice."""
    return reduce(operator.xor, nums, 0)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in ascending ``items``, or None if absent."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return None
