"""Named-operation table for batch runs.

Maps a stable op name to a library function and its positional arity,
and turns results into JSON-ready values.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from seqscan.integers import is_even, is_odd, is_palindrome_number
from seqscan.palindrome import (
    PalindromeSpan,
    find_longest_palindrome,
    longest_palindromic_substring,
)
from seqscan.sequences import (
    binary_search,
    find_duplicate,
    is_duplicate,
    majority_element,
    missing_number,
    single_number,
    two_sum,
)
from seqscan.strings import (
    is_anagram,
    is_balanced,
    is_palindrome,
    length_of_last_word,
)
from seqscan.window import (
    WordPatternResult,
    check_inclusion,
    check_inclusion_any,
    is_word_pattern,
    match_word_pattern,
)


class UnknownOperationError(ValueError):
    """Requested op name is not registered."""


class OperationArgumentError(ValueError):
    """Wrong number of arguments for an op."""


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    func: Callable[..., Any]
    arity: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name cannot be empty")
        if self.arity < 1:
            raise ValueError(f"arity must be >= 1, got {self.arity}")


def _case_sensitive_palindrome(word: str) -> bool:
    return is_palindrome(word, case_sensitive=True)


_OPERATION_LIST: tuple[Operation, ...] = (
    Operation("longest_palindrome", longest_palindromic_substring, 1),
    Operation("longest_palindrome_span", find_longest_palindrome, 1),
    Operation("check_inclusion", check_inclusion, 2),
    Operation("check_inclusion_any", check_inclusion_any, 2),
    Operation("word_pattern", is_word_pattern, 2),
    Operation("word_pattern_detail", match_word_pattern, 2),
    Operation("is_anagram", is_anagram, 2),
    Operation("is_palindrome", is_palindrome, 1),
    Operation("is_palindrome_case_sensitive", _case_sensitive_palindrome, 1),
    Operation("is_balanced", is_balanced, 1),
    Operation("length_of_last_word", length_of_last_word, 1),
    Operation("is_duplicate", is_duplicate, 1),
    Operation("find_duplicate", find_duplicate, 1),
    Operation("majority_element", majority_element, 1),
    Operation("two_sum", two_sum, 2),
    Operation("missing_number", missing_number, 1),
    Operation("single_number", single_number, 1),
    Operation("binary_search", binary_search, 2),
    Operation("is_palindrome_number", is_palindrome_number, 1),
    Operation("is_odd", is_odd, 1),
    Operation("is_even", is_even, 1),
)

OPERATIONS: dict[str, Operation] = {op.name: op for op in _OPERATION_LIST}


def result_to_json(value: Any) -> Any:
    """Convert op results to plain JSON values."""
    if isinstance(value, PalindromeSpan):
        return {"start": value.start, "end": value.end, "length": value.length}
    if isinstance(value, WordPatternResult):
        return {
            "status": value.status,
            "reason": value.reason,
            "position": value.position,
            "symbol_to_token": dict(value.symbol_to_token),
        }
    if isinstance(value, tuple):
        return [result_to_json(v) for v in value]
    return value


def run_operation(name: str, args: Sequence[Any]) -> Any:
    """Run a registered op and return its JSON-ready result.

    Raises:
        UnknownOperationError: ``name`` is not in OPERATIONS.
        OperationArgumentError: ``len(args)`` differs from the op's arity.
    """
    op = OPERATIONS.get(name)
    if op is None:
        raise UnknownOperationError(f"unknown operation: {name!r}")
    if len(args) != op.arity:
        raise OperationArgumentError(
            f"{name} takes {op.arity} argument(s), got {len(args)}",
        )
    return result_to_json(op.func(*args))
