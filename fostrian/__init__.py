# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Fostrian - self-delimiting binary format for trees of byte payloads.

Example usage:
    from fostrian import new_root, encode_bytes, decode_bytes, TextEncoding

    root = new_root(0x02, 0x03, TextEncoding.UTF8)
    user = root.add(b"user")
    user.add("alice")
    user.add(42)

    data = encode_bytes(root)
    tree = decode_bytes(data)
    print(tree[0][0].text())        # alice
    print(tree[0][1].value("int32"))  # 42
"""

from .decoder import DEFAULT_MAX_DEPTH, decode, decode_bytes, decode_file
from .encoder import encode, encode_bytes, encode_to_file
from .encoding import TextEncoding, code_of, encoding_of
from .errors import (
    FostrianError,
    StreamCapabilityError,
    FormatError,
    UnsupportedEncoding,
    ArgumentError,
    DetachedNodeError,
)
from .node import (
    DEFAULT_START_MARKER,
    DEFAULT_END_MARKER,
    DEFAULT_ENCODING,
    TreeNode,
    RootNode,
    new_root,
)
from .payload import KINDS, pack, unpack
from .scan import NOT_FOUND, find_marker

__version__ = "0.1.0"

__all__ = [
    # Codec
    "decode",
    "decode_bytes",
    "decode_file",
    "encode",
    "encode_bytes",
    "encode_to_file",
    "DEFAULT_MAX_DEPTH",
    # Tree
    "TreeNode",
    "RootNode",
    "new_root",
    "DEFAULT_START_MARKER",
    "DEFAULT_END_MARKER",
    "DEFAULT_ENCODING",
    # Encodings
    "TextEncoding",
    "code_of",
    "encoding_of",
    # Payloads
    "KINDS",
    "pack",
    "unpack",
    # Marker scan
    "NOT_FOUND",
    "find_marker",
    # Errors
    "FostrianError",
    "StreamCapabilityError",
    "FormatError",
    "UnsupportedEncoding",
    "ArgumentError",
    "DetachedNodeError",
]
