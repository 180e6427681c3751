# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""Shared fixtures for Fostrian tests."""

import io

import pytest

from fostrian import RootNode, TextEncoding

# Header for start 0x02, end 0x03, UTF-8
HEADER = b"\x02\x03\x02"


def frame(payload: bytes, count: int = 0, start: int = 0x02, end: int = 0x03) -> bytes:
    """Build a node frame by hand."""
    return bytes([start]) + payload + bytes([end]) + count.to_bytes(4, "little", signed=True)


class UnseekableStream:
    """Stream that can read and write but not seek (like a pipe)."""

    def __init__(self, data: bytes = b""):
        self._buf = io.BytesIO(data)

    def seekable(self) -> bool:
        return False

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        return self._buf.read(size)

    def write(self, data: bytes) -> int:
        return self._buf.write(data)


class ReadOnlyStream(io.BytesIO):
    """Seekable stream that refuses writes."""

    def writable(self) -> bool:
        return False


@pytest.fixture
def sample_tree() -> RootNode:
    """Root with children a, b (x, y), c."""
    root = RootNode(0x02, 0x03, TextEncoding.UTF8)
    root.add(b"a")
    b = root.add(b"b")
    b.add(b"x")
    b.add(b"y")
    root.add(b"c")
    return root


@pytest.fixture
def sample_bytes() -> bytes:
    """Wire form of sample_tree."""
    return (
        HEADER
        + frame(b"a")
        + frame(b"b", 2)
        + frame(b"x")
        + frame(b"y")
        + frame(b"c")
    )
