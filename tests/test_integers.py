"""Tests for seqscan.integers."""
from seqscan.integers import is_even, is_odd, is_palindrome_number


class TestIsPalindromeNumber:
    def test_single_digits(self) -> None:
        assert all(is_palindrome_number(x) for x in range(10))

    def test_palindromes(self) -> None:
        for x in [11, 212, 222, 3333, 52225]:
            assert is_palindrome_number(x) is True, x

    def test_non_palindromes(self) -> None:
        for x in [12, 223, 3334, 4441, 52226, 55251]:
            assert is_palindrome_number(x) is False, x

    def test_negative(self) -> None:
        assert is_palindrome_number(-121) is False

    def test_trailing_zero(self) -> None:
        assert is_palindrome_number(10) is False
        assert is_palindrome_number(1210) is False

    def test_matches_string_reversal(self) -> None:
        for x in range(0, 2000):
            assert is_palindrome_number(x) == (str(x) == str(x)[::-1]), x


class TestParity:
    def test_is_odd(self) -> None:
        assert is_odd(21) is True
        assert is_odd(20) is False
        assert is_odd(-3) is True

    def test_is_even(self) -> None:
        assert is_even(20) is True
        assert is_even(21) is False
        assert is_even(0) is True
