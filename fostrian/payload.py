# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Typed views over raw node payloads.

Payloads are opaque bytes on the wire. These helpers convert between
Python values and the fixed-width little-endian layouts used by
Fostrian producers.
"""

import struct
from typing import Optional, Union

from .encoding import EncodingLike, resolve
from .errors import ArgumentError, FormatError

_FORMATS = {
    "int16": struct.Struct("<h"),
    "uint16": struct.Struct("<H"),
    "int32": struct.Struct("<i"),
    "uint32": struct.Struct("<I"),
    "int64": struct.Struct("<q"),
    "uint64": struct.Struct("<Q"),
    "float": struct.Struct("<f"),
    "double": struct.Struct("<d"),
    "bool": struct.Struct("<?"),
}

KINDS = tuple(_FORMATS) + ("char",)

Value = Union[bool, int, float, str]


def pack(value: Value, kind: Optional[str] = None) -> bytes:
    """
    Pack a value into its fixed-width payload layout.

    Args:
        value: Value to pack
        kind: Layout name (see KINDS); inferred from the value type
              when omitted (bool, int32, double)

    Returns:
        Payload bytes

    Raises:
        ArgumentError: If the kind is unknown or the value does not fit
    """
    if kind is None:
        kind = _infer_kind(value)

    if kind == "char":
        if not isinstance(value, str) or len(value) != 1:
            raise ArgumentError(f"char payload needs a single character, got {value!r}")
        data = value.encode("utf-16-le")
        if len(data) != 2:
            raise ArgumentError(f"Character outside the UTF-16 BMP: {value!r}")
        return data

    fmt = _lookup(kind)
    try:
        return fmt.pack(value)
    except struct.error as e:
        raise ArgumentError(f"Cannot pack {value!r} as {kind}: {e}") from None


def unpack(data: bytes, kind: str) -> Value:
    """
    Interpret a payload as a fixed-width value.

    Raises:
        ArgumentError: If the kind is unknown
        FormatError: If the payload length does not match the kind
    """
    if kind == "char":
        if len(data) != 2:
            raise FormatError(f"char payload must be 2 bytes, got {len(data)}")
        return bytes(data).decode("utf-16-le", errors="surrogatepass")

    fmt = _lookup(kind)
    if len(data) != fmt.size:
        raise FormatError(f"{kind} payload must be {fmt.size} bytes, got {len(data)}")
    return fmt.unpack(data)[0]


def encode_text(text: str, encoding: EncodingLike) -> bytes:
    """Encode text with a Fostrian text encoding."""
    return text.encode(resolve(encoding).codec_name)


def decode_text(data: bytes, encoding: EncodingLike) -> str:
    """Decode a text payload with a Fostrian text encoding."""
    return bytes(data).decode(resolve(encoding).codec_name)


def _infer_kind(value) -> str:
    # bool subclasses int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int32"
    if isinstance(value, float):
        return "double"
    raise ArgumentError(f"Cannot infer payload kind for {type(value).__name__}")


def _lookup(kind: str) -> struct.Struct:
    try:
        return _FORMATS[kind]
    except KeyError:
        raise ArgumentError(f"Unknown payload kind: {kind!r}") from None
