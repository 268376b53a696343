"""Tests for the case-aware single-byte rotation."""

from __future__ import annotations

import string

import pytest

from rotstream.core.rotation import (
    is_ascii_letter,
    normalize_offset,
    rotate,
    set_case,
    to_lowerish,
    try_rotate,
)

LETTERS = [ord(c) for c in string.ascii_letters]
NON_LETTERS = [b for b in range(256) if b not in LETTERS]


class TestClassification:
    def test_letters(self) -> None:
        assert all(is_ascii_letter(b) for b in LETTERS)

    def test_non_letters(self) -> None:
        assert not any(is_ascii_letter(b) for b in NON_LETTERS)

    @pytest.mark.parametrize("byte", [0xC1, 0xDA, 0xE1, 0xFA])
    def test_high_bit_lookalikes_rejected(self, byte: int) -> None:
        # Same low seven bits as an ASCII letter.
        assert not is_ascii_letter(byte)


class TestCaseBits:
    def test_to_lowerish(self) -> None:
        assert to_lowerish(ord("Q")) == ord("q")
        assert to_lowerish(ord("q")) == ord("q")

    def test_set_case_upper(self) -> None:
        assert set_case(ord("b"), ord("A")) == ord("B")

    def test_set_case_lower(self) -> None:
        assert set_case(ord("b"), ord("a")) == ord("b")


class TestRotate:
    def test_simple_shift(self) -> None:
        assert rotate(ord("a"), 1) == ord("b")
        assert rotate(ord("A"), 1) == ord("B")

    def test_wraps_at_end_of_alphabet(self) -> None:
        assert rotate(ord("z"), 1) == ord("a")
        assert rotate(ord("Z"), 3) == ord("C")

    def test_offset_26_is_identity(self) -> None:
        assert all(rotate(b, 26) == b for b in LETTERS)

    def test_negative_offset(self) -> None:
        assert rotate(ord("a"), -1) == ord("z")

    def test_non_letters_unchanged(self) -> None:
        assert all(rotate(b, 7) == b for b in NON_LETTERS)

    def test_try_rotate_signals_no_mapping(self) -> None:
        assert try_rotate(ord("!"), 5) is None
        assert try_rotate(ord("a"), 0) == ord("a")

    @pytest.mark.parametrize("offset", range(27))
    def test_case_preserved(self, offset: int) -> None:
        for b in LETTERS:
            out = rotate(b, offset)
            assert chr(out).isupper() == chr(b).isupper()


def test_normalize_offset() -> None:
    assert normalize_offset(26) == 0
    assert normalize_offset(27) == 1
    assert normalize_offset(-3) == 23
