# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Fostrian decoder.

Reconstructs a tree from a seekable byte stream. Any structural problem
aborts the whole decode with FormatError; no partial tree is returned.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from .encoding import encoding_of
from .errors import ArgumentError, FormatError
from .node import RootNode, TreeNode
from .scan import NOT_FOUND, find_marker, require_capabilities
from .wire import HEADER_SIZE, TRAILER_SIZE, decode_child_count

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1000


def decode(
    stream: BinaryIO,
    stop_position: Optional[int] = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> RootNode:
    """
    Decode a tree starting at the current stream position.

    Args:
        stream: Readable, seekable binary stream
        stop_position: Absolute position no byte may be read beyond
                       (default: end of stream)
        max_depth: Maximum nesting depth below the root

    Returns:
        Root node of the decoded tree; the stream is left at stop_position

    Raises:
        ArgumentError: If stream is None
        StreamCapabilityError: If the stream cannot seek or read
        UnsupportedEncoding: If the header names an unknown encoding code
        FormatError: If the data is truncated or malformed
    """
    if stream is None:
        raise ArgumentError("stream must not be None")
    require_capabilities(stream, read=True)

    start = stream.tell()
    stop = _stream_end(stream) if stop_position is None else stop_position

    if stop <= start:
        raise FormatError("End of stream reached prematurely")
    if stop - start < HEADER_SIZE:
        raise FormatError(f"Truncated header at offset {start}")

    start_marker, end_marker, code = _read_exact(stream, HEADER_SIZE, "header")
    root = RootNode(start_marker, end_marker, encoding_of(code))
    reader = _NodeReader(stream, start_marker, end_marker, stop)

    # Frames are [parent, children still expected]; None reads until stop
    stack = [[root, None]]
    nodes = 0

    while stack:
        frame = stack[-1]
        parent, remaining = frame

        if remaining == 0:
            stack.pop()
            continue

        if stream.tell() >= stop:
            if remaining is None:
                stack.pop()
                continue
            raise FormatError(
                f"Node declares {remaining} more children than fit before offset {stop}"
            )

        node, count = reader.read_node()
        parent.add(node)
        nodes += 1

        if remaining is not None:
            frame[1] = remaining - 1

        if count > 0:
            if len(stack) >= max_depth:
                raise FormatError(f"Nesting exceeds maximum depth of {max_depth}")
            stack.append([node, count])

    logger.debug("Decoded %d nodes from offset %d to %d", nodes, start, stop)
    return root


def decode_bytes(data: bytes, **kwargs) -> RootNode:
    """Decode a tree from an in-memory buffer."""
    return decode(io.BytesIO(data), **kwargs)


def decode_file(path: Union[str, Path], **kwargs) -> RootNode:
    """
    Decode a tree from a file.

    Raises:
        FileNotFoundError: If the file does not exist
        FormatError: If the file is not a valid Fostrian tree
    """
    with Path(path).open("rb") as f:
        return decode(f, **kwargs)


class _NodeReader:
    """Reads single node frames, never past the stop boundary."""

    def __init__(self, stream: BinaryIO, start_marker: int, end_marker: int, stop: int):
        self._stream = stream
        self._start_marker = start_marker
        self._end_marker = end_marker
        self._stop = stop

    def read_node(self) -> Tuple[TreeNode, int]:
        """
        Read one frame at the current position.

        Returns:
            Tuple of (node with payload, declared child count)
        """
        entry = self._stream.tell()

        (marker,) = _read_exact(self._stream, 1, "start marker")
        if marker != self._start_marker:
            raise FormatError(
                f"Expected start marker 0x{self._start_marker:02x} at offset {entry}, "
                f"found 0x{marker:02x}"
            )

        end = find_marker(self._stream, self._end_marker, entry + 1)
        if end == NOT_FOUND or end >= self._stop:
            raise FormatError(
                f"End marker 0x{self._end_marker:02x} not found after offset {entry}"
            )
        if end + TRAILER_SIZE > self._stop:
            raise FormatError(f"Truncated child count at offset {end + 1}")

        # Payload is the e - p - 1 bytes between the two markers
        data = _read_exact(self._stream, end - entry - 1 + TRAILER_SIZE, "node")
        payload = data[:-TRAILER_SIZE]
        count = decode_child_count(data[-TRAILER_SIZE + 1:])

        if count < 0:
            raise FormatError(f"Negative child count {count} at offset {end + 1}")

        return TreeNode(payload), count


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly size bytes or fail with FormatError."""
    data = stream.read(size)
    if data is None or len(data) < size:
        got = 0 if data is None else len(data)
        raise FormatError(f"Unexpected end of stream reading {what}: expected {size} bytes, got {got}")
    return data


def _stream_end(stream: BinaryIO) -> int:
    position = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return end
