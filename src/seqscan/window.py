"""Window matchers over raw (untransformed) input.

Two independent checks:

- sliding-window inclusion: does any length-k window of the text hold a
  permutation of the pattern?
- word-pattern bijection: do pattern symbols and whitespace tokens map
  one-to-one onto each other?

Both resolve malformed input to the same ``False`` as a genuine
non-match. ``match_word_pattern`` additionally reports which case it was.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal


ALPHABET_SIZE = 26
_ORD_A = ord("a")

type WordPatternStatus = Literal["match", "mismatch", "malformed"]


def _slot(ch: str) -> int:
    return ord(ch) - _ORD_A


def _is_lowercase_ascii(text: str) -> bool:
    return all("a" <= ch <= "z" for ch in text)


def _length_precheck(pattern_len: int, text_len: int) -> bool | None:
    """Shared length rules. ``None`` means "run the scan"."""
    if pattern_len > text_len:
        return False
    if pattern_len == 0:
        return text_len == 0
    return None


def check_inclusion(pattern: str, text: str) -> bool:
    """Check whether some window of ``text`` is a permutation of ``pattern``.

    Restricted to lowercase ASCII letters; any other character makes the
    call return False. An empty pattern only matches an empty text.
    """
    early = _length_precheck(len(pattern), len(text))
    if early is not None:
        return early
    if not _is_lowercase_ascii(pattern) or not _is_lowercase_ascii(text):
        return False

    k = len(pattern)
    table = [0] * ALPHABET_SIZE
    for ch in pattern:
        table[_slot(ch)] += 1
    for ch in text[:k]:
        table[_slot(ch)] -= 1

    if not any(table):
        return True

    for leaving, entering in zip(text, text[k:]):
        table[_slot(leaving)] += 1
        table[_slot(entering)] -= 1
        if not any(table):
            return True

    return False


def check_inclusion_any(pattern: Sequence[Hashable], text: Sequence[Hashable]) -> bool:
    """General-alphabet ``check_inclusion`` using a sparse difference map.

    Tracks how many symbols have a non-zero difference so each slide
    stays O(1).
    """
    early = _length_precheck(len(pattern), len(text))
    if early is not None:
        return early

    k = len(pattern)
    diff: dict[Hashable, int] = {}
    nonzero = 0

    def bump(symbol: Hashable, delta: int) -> None:
        nonlocal nonzero
        before = diff.get(symbol, 0)
        after = before + delta
        if after:
            diff[symbol] = after
        else:
            diff.pop(symbol, None)
        if before == 0 and after != 0:
            nonzero += 1
        elif before != 0 and after == 0:
            nonzero -= 1

    for symbol in pattern:
        bump(symbol, 1)
    for symbol in text[:k]:
        bump(symbol, -1)

    if nonzero == 0:
        return True

    for i in range(k, len(text)):
        bump(text[i - k], 1)
        bump(text[i], -1)
        if nonzero == 0:
            return True

    return False


@dataclass(frozen=True, slots=True)
class WordPatternResult:
    """Outcome of a word-pattern check.

    ``position`` is the index of the first conflicting symbol/token pair,
    or None when the check did not reach the scan or matched.
    """

    status: WordPatternStatus
    reason: str = ""
    position: int | None = None
    symbol_to_token: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.status != "match" and not self.reason:
            raise ValueError(f"{self.status} result must include a reason")
        if self.position is not None and self.position < 0:
            raise ValueError("position must be >= 0")
        # Read-only snapshot; later changes to the source dict do not leak in.
        object.__setattr__(
            self, "symbol_to_token", MappingProxyType(dict(self.symbol_to_token)),
        )

    @property
    def matched(self) -> bool:
        return self.status == "match"


def _is_word_text(s: str) -> bool:
    return all(ch.isalnum() or ch.isspace() for ch in s)


def match_word_pattern(pattern: str, s: str) -> WordPatternResult:
    """Check for a bijection between ``pattern`` symbols and tokens of ``s``.

    ``s`` must hold only alphanumerics and whitespace, and split into
    exactly ``len(pattern)`` tokens; otherwise the result is malformed.
    The first symbol->token or token->symbol disagreement short-circuits
    to a mismatch.
    """
    if not _is_word_text(s):
        return WordPatternResult(status="malformed", reason="invalid_characters")
    tokens = s.split()
    if len(tokens) != len(pattern):
        return WordPatternResult(status="malformed", reason="token_count_mismatch")

    symbol_to_token: dict[str, str] = {}
    token_to_symbol: dict[str, str] = {}
    for position, (symbol, token) in enumerate(zip(pattern, tokens)):
        if symbol_to_token.get(symbol, token) != token:
            return WordPatternResult(
                status="mismatch",
                reason="symbol_conflict",
                position=position,
                symbol_to_token=symbol_to_token,
            )
        if token_to_symbol.get(token, symbol) != symbol:
            return WordPatternResult(
                status="mismatch",
                reason="token_conflict",
                position=position,
                symbol_to_token=symbol_to_token,
            )
        # First-seen pairing wins; both maps only grow.
        symbol_to_token.setdefault(symbol, token)
        token_to_symbol.setdefault(token, symbol)

    return WordPatternResult(status="match", symbol_to_token=symbol_to_token)


def is_word_pattern(pattern: str, s: str) -> bool:
    """Boolean form of :func:`match_word_pattern`.

    >>> is_word_pattern("abba", "lol kek kek lol")
    True
    >>> is_word_pattern("aaa", "lol kek lol")
    False
    """
    return match_word_pattern(pattern, s).matched
