# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Fostrian tree model.

A tree is a RootNode holding the three format parameters (start marker,
end marker, text encoding) and an ordered list of TreeNode children.
Children own nothing upward: the parent link is a weak reference used
only to find the root.
"""

import weakref
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .encoding import EncodingLike, TextEncoding, resolve
from .errors import ArgumentError, DetachedNodeError
from .payload import Value, decode_text, encode_text, pack, unpack

DEFAULT_START_MARKER = 0x02
DEFAULT_END_MARKER = 0x03
DEFAULT_ENCODING = TextEncoding.UTF8

ChildLike = Union["TreeNode", bytes, bytearray, memoryview, Value]


class TreeNode:
    """
    A node carrying an opaque payload and ordered children.

    Tree-wide parameters (start_marker, end_marker, text_encoding) are
    read from the root this node is attached to. They can only be
    assigned on a RootNode.

    Building a tree:
        root = new_root(0x02, 0x03, TextEncoding.UTF8)
        user = root.add(b"user")
        user.add("alice")
        user.add(42)              # int32
        user.add(7, kind="uint16")

    Parent links are weak: keep a reference to the root for as long as
    its descendants are used. In `decode_bytes(data)[0].text()` the root
    is released at once and the child raises DetachedNodeError.

    Creating a cycle (adding a node under its own descendant) is not
    detected and makes encoding non-terminating.
    """

    is_root = False

    def __init__(self, payload: bytes = b"", children: Iterable[ChildLike] = ()):
        self._payload = b""
        self._children: List[TreeNode] = []
        self._parent: Optional[weakref.ref] = None
        self.payload = payload
        self.extend(children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(payload={self._payload!r}, children={len(self._children)})"

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, index: int) -> "TreeNode":
        return self._children[index]

    def __iter__(self) -> Iterator["TreeNode"]:
        return iter(self._children)

    def __contains__(self, node: object) -> bool:
        return any(child is node for child in self._children)

    @property
    def payload(self) -> bytes:
        """Raw payload bytes."""
        return self._payload

    @payload.setter
    def payload(self, data: bytes):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise ArgumentError(f"Payload must be bytes, got {type(data).__name__}")
        self._payload = bytes(data)

    @property
    def children(self) -> Tuple["TreeNode", ...]:
        """Children in order (read-only view)."""
        return tuple(self._children)

    @property
    def parent(self) -> Optional["TreeNode"]:
        """Owning node, or None for a root or a detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def root(self) -> Optional["RootNode"]:
        """The RootNode this node belongs to, or None if detached."""
        node = self
        while not node.is_root:
            node = node.parent
            if node is None:
                return None
        return node

    @property
    def start_marker(self) -> Optional[int]:
        return self._require_root().start_marker

    @property
    def end_marker(self) -> Optional[int]:
        return self._require_root().end_marker

    @property
    def text_encoding(self) -> Optional[TextEncoding]:
        return self._require_root().text_encoding

    def add(self, item: ChildLike, kind: Optional[str] = None) -> "TreeNode":
        """
        Append a child.

        Args:
            item: A TreeNode, raw bytes, text (encoded with the tree's
                  encoding) or a value packed with payload.pack()
            kind: Payload layout for non-bytes values (see payload.KINDS)

        Returns:
            The child node
        """
        child = self._coerce(item, kind)
        self._attach(child)
        self._children.append(child)
        return child

    def extend(self, items: Iterable[ChildLike]) -> "TreeNode":
        """Append several children. Returns self."""
        for item in items:
            self.add(item)
        return self

    def insert(self, index: int, item: ChildLike, kind: Optional[str] = None) -> "TreeNode":
        """
        Insert a child before the node currently at index.

        Moving an existing child keeps that meaning: inserting the first
        of [a, b, c] at 2 gives [b, a, c].

        Returns:
            The child node
        """
        child = self._coerce(item, kind)
        if child.parent is self and 0 <= index and self.index(child) < index:
            index -= 1
        self._attach(child)
        self._children.insert(index, child)
        return child

    def index(self, node: "TreeNode") -> int:
        """Position of a child (by identity)."""
        for i, child in enumerate(self._children):
            if child is node:
                return i
        raise ValueError(f"{node!r} is not a child of {self!r}")

    def remove(self, node: "TreeNode") -> "TreeNode":
        """Remove a child (by identity) and clear its parent. Returns the child."""
        return self.remove_at(self.index(node))

    def remove_at(self, index: int) -> "TreeNode":
        """Remove the child at index and clear its parent. Returns the child."""
        child = self._children.pop(index)
        child._parent = None
        return child

    def clear(self) -> "TreeNode":
        """Remove all children. Returns self."""
        for child in self._children:
            child._parent = None
        self._children.clear()
        return self

    def detach(self) -> "TreeNode":
        """Remove this node from its parent, if any. Returns self."""
        parent = self.parent
        if parent is not None:
            parent.remove(self)
        return self

    def walk(self) -> Iterator["TreeNode"]:
        """Iterate over this node and all descendants, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def structure(self) -> tuple:
        """Nested (payload, children) tuples, for shape comparison."""
        return (self._payload, tuple(child.structure() for child in self._children))

    def value(self, kind: str) -> Value:
        """Interpret the payload as a fixed-width value (see payload.KINDS)."""
        return unpack(self._payload, kind)

    def text(self, encoding: Optional[EncodingLike] = None) -> str:
        """Decode the payload as text, using the tree's encoding by default."""
        if encoding is None:
            encoding = self.text_encoding
            if encoding is None:
                raise ArgumentError("Tree has no text encoding set")
        return decode_text(self._payload, encoding)

    def _require_root(self) -> "RootNode":
        root = self.root
        if root is None:
            raise DetachedNodeError("Node is not attached to a root node")
        return root

    def _coerce(self, item: ChildLike, kind: Optional[str]) -> "TreeNode":
        if isinstance(item, TreeNode):
            return item
        if isinstance(item, (bytes, bytearray, memoryview)):
            return TreeNode(item)
        if isinstance(item, str) and kind is None:
            encoding = self.text_encoding
            if encoding is None:
                raise ArgumentError("Tree has no text encoding set")
            return TreeNode(encode_text(item, encoding))
        return TreeNode(pack(item, kind))

    def _attach(self, child: "TreeNode") -> None:
        if child.is_root:
            raise ArgumentError("A root node cannot be added as a child")
        if child is self:
            raise ArgumentError("A node cannot be its own child")
        child.detach()
        child._parent = weakref.ref(self)


class RootNode(TreeNode):
    """
    Top-level node of a tree, holding the format parameters.

    The root has no payload of its own: on the wire it is represented by
    the 3-byte header, followed by its children.
    """

    is_root = True

    def __init__(
        self,
        start_marker: Optional[int] = None,
        end_marker: Optional[int] = None,
        text_encoding: Optional[EncodingLike] = None,
        children: Iterable[ChildLike] = (),
    ):
        self._start_marker: Optional[int] = None
        self._end_marker: Optional[int] = None
        self._text_encoding: Optional[TextEncoding] = None
        self.start_marker = start_marker
        self.end_marker = end_marker
        self.text_encoding = text_encoding
        super().__init__(b"", children)

    def __repr__(self) -> str:
        return (
            f"RootNode(start_marker={self._start_marker!r}, "
            f"end_marker={self._end_marker!r}, "
            f"text_encoding={self._text_encoding!s}, children={len(self)})"
        )

    @TreeNode.payload.setter
    def payload(self, data: bytes):
        if data:
            raise ArgumentError("Root node cannot carry a payload")
        self._payload = b""

    @property
    def start_marker(self) -> Optional[int]:
        return self._start_marker

    @start_marker.setter
    def start_marker(self, value: Optional[int]):
        self._start_marker = _check_marker("start_marker", value)

    @property
    def end_marker(self) -> Optional[int]:
        return self._end_marker

    @end_marker.setter
    def end_marker(self, value: Optional[int]):
        self._end_marker = _check_marker("end_marker", value)

    @property
    def text_encoding(self) -> Optional[TextEncoding]:
        return self._text_encoding

    @text_encoding.setter
    def text_encoding(self, value: Optional[EncodingLike]):
        self._text_encoding = None if value is None else resolve(value)


def new_root(
    start_marker: Optional[int] = None,
    end_marker: Optional[int] = None,
    text_encoding: Optional[EncodingLike] = None,
) -> RootNode:
    """Create an empty root. Header values stay unset unless given."""
    return RootNode(start_marker, end_marker, text_encoding)


def _check_marker(name: str, value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ArgumentError(f"{name} must be a byte value (0-255), got {value!r}")
    return value
