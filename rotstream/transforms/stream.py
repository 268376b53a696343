"""StreamingTransform: a read-through filter applying a policy per byte.

The transform is an ``io.RawIOBase`` so it plugs into anything that reads
binary streams. Each ``readinto`` pulls whatever the source has ready, up to
one buffer, and rewrites those bytes in place; nothing is held between
calls, so arbitrarily large inputs run in O(buffer) memory.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from rotstream.core.policy import Policy, translation_table


class StreamingTransform(io.RawIOBase):
    """Apply ``policy`` to every byte read from ``source``.

    The source is borrowed: closing the transform leaves it open.
    Exceptions raised by the source propagate unchanged.
    """

    def __init__(self, policy: Policy, source: BinaryIO) -> None:
        super().__init__()
        self.policy = policy
        self._source = source
        self._table = translation_table(policy)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        count = self._read_source(view)
        if count:
            view[:count] = view[:count].tobytes().translate(self._table)
        return count

    def _read_source(self, view: memoryview) -> int:
        # readinto1 returns whatever is available instead of waiting for a
        # full buffer, so an open pipe streams.
        for name in ("readinto1", "readinto"):
            readinto = getattr(self._source, name, None)
            if readinto is not None:
                return readinto(view)
        data = self._source.read(len(view))
        view[: len(data)] = data
        return len(data)
