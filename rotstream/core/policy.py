"""Substitution policies: map one byte to an optional replacement byte.

Two variants exist and the set is closed:
  Rot13     fixed offset 13, its own inverse
  RotateBy  parametric offset, optionally reversed at construction time

Both are frozen Pydantic models, so they are immutable and hashable once
built from configuration.
"""

from __future__ import annotations

import functools
from typing import ClassVar, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field

from rotstream.core.rotation import ALPHABET_SIZE, normalize_offset, try_rotate


@runtime_checkable
class SubstitutionPolicy(Protocol):
    """Protocol for all byte substitution policies."""

    def get(self, byte: int) -> int | None:
        """Replacement for ``byte``, or None when the byte has no mapping."""
        ...

    def describe(self) -> str:
        """Human-readable description of this policy."""
        ...


class _PolicyBase(BaseModel):
    """Shared helpers; subclasses supply ``get`` and ``describe``."""

    model_config = {"frozen": True, "extra": "forbid"}

    def map_bytes(self, data: bytes) -> bytes:
        """Apply the policy to every byte of ``data``."""
        return bytes(data).translate(translation_table(self))

    def map_text(self, text: str) -> str:
        """Apply the policy to every byte of ``text``.

        Only ASCII letters are ever replaced, so multi-byte UTF-8 sequences
        pass through intact and the result always decodes.
        """
        return self.map_bytes(text.encode("utf-8")).decode("utf-8")


class Rot13(_PolicyBase):
    """The classic fixed rotation by 13. Applying it twice is the identity."""

    OFFSET: ClassVar[int] = 13

    def get(self, byte: int) -> int | None:
        return try_rotate(byte, self.OFFSET)

    def describe(self) -> str:
        return "rot13"


class RotateBy(_PolicyBase):
    """Rotate letters forward by ``offset`` positions."""

    offset: int = Field(ge=0, lt=ALPHABET_SIZE)

    @classmethod
    def new(cls, n: int, reverse: bool = False) -> "RotateBy":
        """Build from a user-facing shift ``n`` in 0..26.

        Reverse rotation is forward rotation by ``26 - n``; the result is
        reduced mod 26 so ``n == 0`` with ``reverse`` gives offset 0.
        """
        if not 0 <= n <= ALPHABET_SIZE:
            raise ValueError(f"Rotation must be in 0..{ALPHABET_SIZE}, got {n}")
        if reverse:
            return cls(offset=normalize_offset(ALPHABET_SIZE - n))
        return cls(offset=normalize_offset(n))

    def inverse(self) -> "RotateBy":
        """The policy that undoes this one."""
        return RotateBy.new(self.offset, reverse=True)

    def get(self, byte: int) -> int | None:
        return try_rotate(byte, self.offset)

    def describe(self) -> str:
        return f"rotate-by-{self.offset}"


# Closed set of policies the pipeline driver can hold.
Policy = Union[Rot13, RotateBy]


@functools.lru_cache(maxsize=64)
def translation_table(policy: Policy) -> bytes:
    """256-byte table for ``bytes.translate``.

    Entry ``b`` is ``policy.get(b)`` when defined, else ``b`` itself.
    """
    table = bytearray(range(256))
    for byte in range(256):
        replacement = policy.get(byte)
        if replacement is not None:
            table[byte] = replacement
    return bytes(table)
