"""Shared fixtures for rotstream tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rotstream.core.policy import Rot13, RotateBy


@pytest.fixture
def rot13() -> Rot13:
    return Rot13()


@pytest.fixture
def rotate_by_one() -> RotateBy:
    return RotateBy.new(1, reverse=False)


@pytest.fixture
def unrotate_by_one() -> RotateBy:
    return RotateBy.new(1, reverse=True)


@pytest.fixture
def mixed_payload() -> bytes:
    """Letters, punctuation, digits, whitespace, UTF-8 and raw high-bit bytes."""
    text = "Hello, World! 123 The quick brown fox. Grüße\n\t"
    return (text.encode("utf-8") + bytes(range(256))) * 17


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_bytes(b"Hello, World!")
    return path
