"""
Demultiplexer for Docker's combined stdout/stderr log stream.

When a container runs without a TTY, the logs and attach endpoints send a
single byte stream made of frames:

    [STREAM_TYPE, 0, 0, 0, SIZE1, SIZE2, SIZE3, SIZE4][payload]

STREAM_TYPE is 0 (stdin), 1 (stdout) or 2 (stderr) and SIZE is the
big-endian payload length. See the Engine API documentation for
ContainerAttach.

demux() keeps stdout and stderr lines interleaved in the exact order the
frames arrived. It never raises on a malformed stream: decoding stops at the
first short read or unexpected stream type and returns what was decoded.
"""

import struct
from dataclasses import dataclass
from typing import BinaryIO

HEADER_SIZE = 8
_HEADER = struct.Struct(">B3xI")

STDIN = 0
STDOUT = 1
STDERR = 2


@dataclass(frozen=True)
class StdOut:
    """A line written by the container to standard output."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StdErr:
    """A line written by the container to standard error."""

    text: str

    def __str__(self) -> str:
        return self.text


TtyLine = StdOut | StdErr


def _read_exact(stream: BinaryIO, size: int) -> bytes | None:
    """
    Read exactly size bytes from stream.

    Returns:
        The bytes read, or None if the stream ended first
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            return None
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _decode(payload: bytes) -> str:
    return payload.decode("utf-8", errors="replace").rstrip()


def demux(stream: BinaryIO) -> list[TtyLine]:
    """
    Decode a multiplexed log stream into ordered lines.

    Args:
        stream: Binary file-like object positioned at the first frame

    Returns:
        StdOut and StdErr lines in frame arrival order. Truncated or
        malformed input yields the lines decoded before the problem.
    """
    lines: list[TtyLine] = []
    while True:
        header = _read_exact(stream, HEADER_SIZE)
        if header is None:
            break
        stream_type, size = _HEADER.unpack(header)

        payload = _read_exact(stream, size)
        if payload is None:
            break

        if stream_type == STDOUT:
            lines.append(StdOut(_decode(payload)))
        elif stream_type == STDERR:
            lines.append(StdErr(_decode(payload)))
        else:
            # stdin frames are not displayed, unknown types end the stream
            break
    return lines
