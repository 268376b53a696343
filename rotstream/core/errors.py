"""Error taxonomy for the rotstream pipeline.

Every error keeps the underlying OSError as ``cause`` so the CLI can
report it; the driver also chains it (``raise ... from exc``).
"""

from __future__ import annotations

from pathlib import Path


class RotstreamError(Exception):
    """Base class for all pipeline failures."""


class SourceOpenError(RotstreamError):
    """The requested input file could not be opened."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot open {path}: {cause.strerror or cause}")


class ReadError(RotstreamError):
    """The active byte source failed mid-stream."""

    def __init__(self, source: str, cause: OSError) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"read failed on {source}: {cause.strerror or cause}")


class WriteError(RotstreamError):
    """The output sink failed (e.g. broken pipe)."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"write failed: {cause.strerror or cause}")
