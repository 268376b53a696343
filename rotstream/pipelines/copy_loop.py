"""Pipeline driver: source -> StreamingTransform -> sink.

Resolves policy and source from a PipelineConfig, then copies one buffer
at a time until the source reports end of stream. Any failure aborts the
run and surfaces as a RotstreamError; there is no retry or partial
recovery.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from rotstream.core.config import PipelineConfig
from rotstream.core.errors import ReadError, SourceOpenError, WriteError
from rotstream.core.policy import Policy
from rotstream.transforms.stream import StreamingTransform


@dataclass
class PipelineResult:
    """Result of a completed pipeline run."""

    policy: Policy
    bytes_copied: int
    source_name: str


@contextmanager
def open_source(
    path: Path | None, stdin: BinaryIO | None = None,
) -> Iterator[BinaryIO]:
    """Yield the input stream for a run.

    A file is opened in binary mode and closed on every exit path. Standard
    input is borrowed and left open. Failing to open ``path`` raises
    SourceOpenError; there is no fallback to stdin.
    """
    if path is None:
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise SourceOpenError(path, exc) from exc

    with handle:
        yield handle


def copy_stream(
    reader: BinaryIO, sink: BinaryIO, buffer_size: int, source_name: str = "<input>",
) -> int:
    """Copy ``reader`` to ``sink`` through a fixed buffer; return bytes copied.

    Every chunk is flushed as soon as it is written, so output keeps pace
    with an open pipe and a failing read loses nothing already copied.
    """
    buffer = bytearray(buffer_size)
    view = memoryview(buffer)
    total = 0

    while True:
        try:
            count = reader.readinto(buffer)
        except OSError as exc:
            raise ReadError(source_name, exc) from exc
        if not count:
            break

        try:
            sink.write(view[:count])
            sink.flush()
        except OSError as exc:
            raise WriteError(exc) from exc
        total += count

    return total


def run_pipeline(
    config: PipelineConfig,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> PipelineResult:
    """Run the full pipeline described by ``config``.

    ``stdin`` and ``stdout`` default to the process's binary standard
    streams, looked up at call time.
    """
    policy = config.resolve_policy()
    sink = stdout if stdout is not None else sys.stdout.buffer
    source_name = config.source_name()

    with open_source(config.path, stdin) as source:
        transform = StreamingTransform(policy, source)
        copied = copy_stream(transform, sink, config.buffer_size, source_name)

    return PipelineResult(policy=policy, bytes_copied=copied, source_name=source_name)
