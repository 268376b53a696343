"""Case-aware alphabetic rotation on single bytes.

ASCII upper- and lower-case letters differ only in bit 0x20, so a letter
can be lowered with ``byte | 0x20`` and upper-cased again by clearing that
bit. The trick is only valid on letters: every helper that uses it is
gated on ``is_ascii_letter`` first, otherwise punctuation and digits would
be silently corrupted.
"""

from __future__ import annotations

ALPHABET_SIZE = 26
CASE_BIT = 0x20

_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")


def is_ascii_letter(byte: int) -> bool:
    """True for ``A..Z`` and ``a..z`` only. High-bit bytes are never letters."""
    return _UPPER_A <= byte <= _UPPER_Z or _LOWER_A <= byte <= _LOWER_Z


def to_lowerish(byte: int) -> int:
    """Set the case bit. Lowercases an ASCII letter."""
    return byte | CASE_BIT


def set_case(new: int, original: int) -> int:
    """Give ``new`` the case of ``original``."""
    if original | CASE_BIT == original:
        return new
    return new & ~CASE_BIT


def normalize_offset(offset: int) -> int:
    """Reduce an offset into [0, 26). Accepts 26 and negative values."""
    return offset % ALPHABET_SIZE


def try_rotate(byte: int, offset: int) -> int | None:
    """Rotate a letter forward by ``offset``, or None if ``byte`` is not a letter."""
    if not is_ascii_letter(byte):
        return None
    position = to_lowerish(byte) - _LOWER_A
    shifted = _LOWER_A + (position + normalize_offset(offset)) % ALPHABET_SIZE
    return set_case(shifted, byte)


def rotate(byte: int, offset: int) -> int:
    """Total form of ``try_rotate``: non-letters map to themselves."""
    rotated = try_rotate(byte, offset)
    return byte if rotated is None else rotated
