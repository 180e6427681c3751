# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Fostrian encoder.

Writes a tree depth-first, pre-order. Encoding a RootNode produces a
complete tree file (header followed by the root's children); encoding
any other node produces that node's frames only, using the markers of
the root it belongs to.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from .encoding import code_of
from .errors import ArgumentError, DetachedNodeError, FormatError
from .node import TreeNode
from .scan import require_capabilities
from .wire import encode_frame, encode_header

logger = logging.getLogger(__name__)


def encode(node: TreeNode, stream: BinaryIO, *, check_payloads: bool = False) -> None:
    """
    Encode a node and its descendants into a stream.

    Args:
        node: Node to encode (normally a RootNode)
        stream: Writable, seekable binary stream
        check_payloads: Reject payloads that contain the end marker
                        (such trees do not decode back to the same shape)

    Raises:
        ArgumentError: If node or stream is None, or the root header is unset
        StreamCapabilityError: If the stream cannot seek or write
        DetachedNodeError: If the node does not belong to a root
        UnsupportedEncoding: If the tree's text encoding has no code
        FormatError: If check_payloads is set and a payload holds the end marker
    """
    if node is None:
        raise ArgumentError("node must not be None")
    if stream is None:
        raise ArgumentError("stream must not be None")
    require_capabilities(stream, write=True)

    root = node.root
    if root is None:
        raise DetachedNodeError("Node is not attached to a root node")

    start_marker = root.start_marker
    end_marker = root.end_marker
    if start_marker is None or end_marker is None:
        raise ArgumentError("Root node has no start/end marker set")

    header = b""
    if node.is_root:
        if root.text_encoding is None:
            raise ArgumentError("Root node has no text encoding set")
        header = encode_header(start_marker, end_marker, code_of(root.text_encoding))

    if check_payloads:
        for item in node.walk():
            if end_marker in item.payload:
                raise FormatError(
                    f"Payload {item.payload!r} contains end marker 0x{end_marker:02x}"
                )

    begin = stream.tell()
    stream.write(header)

    stack = list(reversed(node.children if node.is_root else (node,)))
    nodes = 0
    while stack:
        current = stack.pop()
        stream.write(encode_frame(current.payload, len(current), start_marker, end_marker))
        stack.extend(reversed(current.children))
        nodes += 1

    logger.debug("Encoded %d nodes from offset %d to %d", nodes, begin, stream.tell())


def encode_bytes(node: TreeNode, **kwargs) -> bytes:
    """Encode a node into a new bytes object."""
    buf = io.BytesIO()
    encode(node, buf, **kwargs)
    return buf.getvalue()


def encode_to_file(node: TreeNode, path: Union[str, Path], **kwargs) -> None:
    """Encode a node into a file, replacing its contents."""
    with Path(path).open("wb") as f:
        encode(node, f, **kwargs)
