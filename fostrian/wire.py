# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Fostrian wire layout.

    TreeFile   := Header Node*
    Header     := StartMarker EndMarker EncodingCode
    Node       := StartMarker Payload EndMarker ChildCount Node{ChildCount}
    ChildCount := int32, little-endian

Legacy producers wrote the child count in host byte order; every known
file comes from a little-endian host, so the order is fixed here.
"""

import struct

HEADER_SIZE = 3
CHILD_COUNT = struct.Struct("<i")

# Bytes following a payload: end marker + child count
TRAILER_SIZE = 1 + CHILD_COUNT.size


def encode_header(start_marker: int, end_marker: int, encoding_code: int) -> bytes:
    """Encode the 3-byte tree header."""
    return bytes([start_marker, end_marker, encoding_code])


def encode_frame(payload: bytes, child_count: int, start_marker: int, end_marker: int) -> bytes:
    """Encode one node frame (without its children)."""
    return (
        bytes([start_marker])
        + payload
        + bytes([end_marker])
        + CHILD_COUNT.pack(child_count)
    )


def decode_child_count(data: bytes) -> int:
    """Decode a 4-byte child count."""
    return CHILD_COUNT.unpack(data)[0]
