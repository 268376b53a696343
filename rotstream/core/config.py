"""Run configuration: which policy, which source, how large a buffer."""

from __future__ import annotations

import io
from pathlib import Path

from pydantic import BaseModel, Field

from rotstream.core.policy import Policy, Rot13, RotateBy
from rotstream.core.rotation import ALPHABET_SIZE


class PipelineConfig(BaseModel):
    """Immutable configuration for a single pipeline run."""

    model_config = {"frozen": True, "extra": "forbid"}

    path: Path | None = None
    offset: int | None = Field(default=None, ge=0, le=ALPHABET_SIZE)
    reverse: bool = False
    buffer_size: int = Field(default=io.DEFAULT_BUFFER_SIZE, gt=0)

    @property
    def reverse_ignored(self) -> bool:
        """``reverse`` only has an effect together with ``offset``."""
        return self.reverse and self.offset is None

    def resolve_policy(self) -> Policy:
        """Rot13 unless an explicit offset was given."""
        if self.offset is None:
            return Rot13()
        return RotateBy.new(self.offset, self.reverse)

    def source_name(self) -> str:
        return "<stdin>" if self.path is None else str(self.path)
