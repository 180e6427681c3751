# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Marker scan over seekable byte streams.
"""

from typing import BinaryIO, Optional

from .errors import StreamCapabilityError

NOT_FOUND = -1
SCAN_CHUNK_SIZE = 4096


def require_capabilities(stream, read: bool = False, write: bool = False) -> None:
    """
    Check that a stream can seek and, optionally, read and/or write.

    Raises:
        StreamCapabilityError: If a required capability is missing
    """
    if not _supports(stream, "seekable"):
        raise StreamCapabilityError("Cannot seek in stream")
    if read and not _supports(stream, "readable"):
        raise StreamCapabilityError("Cannot read from stream")
    if write and not _supports(stream, "writable"):
        raise StreamCapabilityError("Cannot write to stream")


def find_marker(stream: BinaryIO, target: int, start: Optional[int] = None) -> int:
    """
    Find the next occurrence of a byte in a stream.

    The stream position is the same on return as on entry.

    Args:
        stream: Seekable, readable binary stream
        target: Byte value to look for (0-255)
        start: Absolute position to start at, inclusive (default: current)

    Returns:
        Absolute position of the byte, or NOT_FOUND

    Raises:
        StreamCapabilityError: If the stream cannot seek or read
    """
    require_capabilities(stream, read=True)

    origin = stream.tell()
    position = origin if start is None else start
    marker = bytes([target])

    try:
        stream.seek(position)
        while True:
            chunk = stream.read(SCAN_CHUNK_SIZE)
            if not chunk:
                return NOT_FOUND
            idx = chunk.find(marker)
            if idx >= 0:
                return position + idx
            position += len(chunk)
    finally:
        stream.seek(origin)


def _supports(stream, capability: str) -> bool:
    check = getattr(stream, capability, None)
    return bool(check and check())
