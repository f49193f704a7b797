"""Tests for the guarded palindrome transform."""
import pytest

from seqscan.palindrome.transform import transform
from seqscan.palindrome.types import Marker, TransformedBuffer

SEP = Marker.SEPARATOR


class TestTransform:
    def test_interleaves_with_guards(self) -> None:
        buffer = transform("ab")
        assert buffer.symbols == (Marker.LEFT_GUARD, SEP, "a", SEP, "b", SEP, Marker.RIGHT_GUARD)
        assert buffer.source_length == 2

    def test_lengths(self) -> None:
        for text in ["", "a", "abc", "abcdcbaaerfqsfq"]:
            buffer = transform(text)
            assert buffer.interleaved_length == 2 * len(text) + 1
            assert len(buffer.symbols) == 2 * len(text) + 3

    def test_empty_input(self) -> None:
        buffer = transform("")
        assert buffer.symbols == (Marker.LEFT_GUARD, SEP, Marker.RIGHT_GUARD)
        assert buffer.interleaved_length == 1

    def test_reserved_lookalikes_do_not_collide(self) -> None:
        buffer = transform("^#$")
        assert buffer.symbols[2] == "^"
        assert buffer.symbols[2] != Marker.LEFT_GUARD
        assert buffer.symbols[3] is SEP
        assert "#" != SEP

    def test_source_positions_at_odd_body_offsets(self) -> None:
        text = "xyz"
        body = transform(text).symbols[1:-1]
        assert [body[j] for j in range(1, len(body), 2)] == list(text)
        assert all(body[j] is SEP for j in range(0, len(body), 2))

    def test_generic_sequence(self) -> None:
        buffer = transform([1, 2])
        assert buffer.symbols[2] == 1
        assert buffer.symbols[4] == 2

    def test_does_not_mutate_input(self) -> None:
        items = [3, 1, 3]
        transform(items)
        assert items == [3, 1, 3]


class TestTransformedBufferContract:
    def test_rejects_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="2 \\* source_length \\+ 3"):
            TransformedBuffer(symbols=(Marker.LEFT_GUARD, Marker.RIGHT_GUARD), source_length=0)

    def test_rejects_missing_guards(self) -> None:
        with pytest.raises(ValueError, match="LEFT_GUARD"):
            TransformedBuffer(symbols=(SEP, SEP, Marker.RIGHT_GUARD), source_length=0)
        with pytest.raises(ValueError, match="RIGHT_GUARD"):
            TransformedBuffer(symbols=(Marker.LEFT_GUARD, SEP, SEP), source_length=0)

    def test_rejects_negative_source_length(self) -> None:
        with pytest.raises(ValueError, match="source_length"):
            TransformedBuffer(symbols=(), source_length=-1)

    def test_body_to_source(self) -> None:
        buffer = transform("aba")
        # body "#a#b#a#": center 3, radius 3 covers the whole source
        assert buffer.body_to_source(3, 3) == (0, 3)
        assert buffer.body_to_source(0, 0) == (0, 0)
