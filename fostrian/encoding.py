# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Fostrian encoding table.

The third header byte of a tree selects the text encoding used for text
payloads. The table is fixed; codes never depend on what the running
interpreter happens to support.
"""

import codecs
import locale
from enum import IntEnum
from typing import Union

from .errors import UnsupportedEncoding


class TextEncoding(IntEnum):
    """Text encodings with an assigned Fostrian code."""
    ASCII = 0
    DEFAULT = 1
    UTF8 = 2
    UTF16_LE = 3
    UTF16_BE = 4
    UTF32 = 5

    def __str__(self) -> str:
        return self.name

    @property
    def codec_name(self) -> str:
        """Python codec used for text payloads in this encoding."""
        if self is TextEncoding.DEFAULT:
            return codecs.lookup(locale.getpreferredencoding(False)).name
        return _CODEC_NAMES[self]


_CODEC_NAMES = {
    TextEncoding.ASCII: "ascii",
    TextEncoding.UTF8: "utf-8",
    TextEncoding.UTF16_LE: "utf-16-le",
    TextEncoding.UTF16_BE: "utf-16-be",
    TextEncoding.UTF32: "utf-32-le",
}

# Normalized codec names accepted by code_of()
_CODES_BY_NAME = {name: code for code, name in _CODEC_NAMES.items()}
_CODES_BY_NAME["utf-32"] = TextEncoding.UTF32

EncodingLike = Union[TextEncoding, str]


def code_of(encoding: EncodingLike) -> int:
    """
    Get the header code of a text encoding.

    Args:
        encoding: TextEncoding member or Python codec name (e.g. "utf-8")

    Returns:
        Encoding code byte

    Raises:
        UnsupportedEncoding: If the encoding has no assigned code
    """
    if isinstance(encoding, TextEncoding):
        return int(encoding)

    if isinstance(encoding, str):
        try:
            name = codecs.lookup(encoding).name
        except LookupError:
            raise UnsupportedEncoding(f"Unknown text encoding: {encoding!r}") from None
        if name in _CODES_BY_NAME:
            return int(_CODES_BY_NAME[name])

    raise UnsupportedEncoding(f"No Fostrian code for text encoding: {encoding!r}")


def encoding_of(code: int) -> TextEncoding:
    """
    Get the text encoding for a header code.

    Args:
        code: Encoding code byte

    Returns:
        TextEncoding member

    Raises:
        UnsupportedEncoding: If the code is not assigned
    """
    try:
        return TextEncoding(code)
    except ValueError:
        raise UnsupportedEncoding(f"Unknown encoding code: 0x{code:02x}") from None


def resolve(encoding: EncodingLike) -> TextEncoding:
    """Normalize a codec name or TextEncoding to a TextEncoding member."""
    return TextEncoding(code_of(encoding))
