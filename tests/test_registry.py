"""Tests for the named-operation registry."""
import pytest

from seqscan.palindrome import PalindromeSpan
from seqscan.registry import (
    OPERATIONS,
    Operation,
    OperationArgumentError,
    UnknownOperationError,
    result_to_json,
    run_operation,
)


class TestRunOperation:
    def test_longest_palindrome(self) -> None:
        assert run_operation("longest_palindrome", ["abcded"]) == "ded"

    def test_span_is_json_ready(self) -> None:
        assert run_operation("longest_palindrome_span", ["abcded"]) == {
            "start": 3, "end": 6, "length": 3,
        }

    def test_word_pattern_detail(self) -> None:
        result = run_operation("word_pattern_detail", ["abc", "lol kek"])
        assert result == {
            "status": "malformed",
            "reason": "token_count_mismatch",
            "position": None,
            "symbol_to_token": {},
        }

    def test_two_sum_tuple_becomes_list(self) -> None:
        assert run_operation("two_sum", [[2, 7, 11, 15], 9]) == [0, 1]

    def test_case_sensitive_palindrome(self) -> None:
        assert run_operation("is_palindrome", ["loL"]) is True
        assert run_operation("is_palindrome_case_sensitive", ["loL"]) is False

    def test_unknown_operation(self) -> None:
        with pytest.raises(UnknownOperationError, match="nope"):
            run_operation("nope", [])

    def test_wrong_arity(self) -> None:
        with pytest.raises(OperationArgumentError, match="takes 2 argument"):
            run_operation("check_inclusion", ["abc"])

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(UnknownOperationError, ValueError)
        assert issubclass(OperationArgumentError, ValueError)


class TestOperations:
    def test_names_match_keys(self) -> None:
        for name, op in OPERATIONS.items():
            assert op.name == name
            assert op.arity >= 1

    def test_core_operations_registered(self) -> None:
        for name in ["longest_palindrome", "check_inclusion", "word_pattern"]:
            assert name in OPERATIONS

    def test_operation_contract(self) -> None:
        with pytest.raises(ValueError, match="arity"):
            Operation("x", len, 0)
        with pytest.raises(ValueError, match="name"):
            Operation("", len, 1)


class TestResultToJson:
    def test_passthrough(self) -> None:
        assert result_to_json(None) is None
        assert result_to_json("abc") == "abc"

    def test_nested_tuple(self) -> None:
        assert result_to_json((PalindromeSpan(0, 1), 2)) == [
            {"start": 0, "end": 1, "length": 1}, 2,
        ]
