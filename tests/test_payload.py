# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""Tests for typed payload conversions."""

import pytest
from fostrian.encoding import TextEncoding
from fostrian.errors import ArgumentError, FormatError
from fostrian.payload import KINDS, decode_text, encode_text, pack, unpack


class TestPack:
    """Tests for pack function."""

    def test_int_defaults_to_int32(self):
        """Python ints pack as little-endian int32."""
        assert pack(1) == b"\x01\x00\x00\x00"
        assert pack(-1) == b"\xff\xff\xff\xff"

    def test_bool_before_int(self):
        """bool is packed as one byte, not int32."""
        assert pack(True) == b"\x01"
        assert pack(False) == b"\x00"

    def test_float_defaults_to_double(self):
        """Python floats pack as 8-byte doubles."""
        assert len(pack(1.5)) == 8

    def test_explicit_kinds(self):
        """Explicit kinds select the layout."""
        assert pack(0x1234, "uint16") == b"\x34\x12"
        assert pack(-2, "int16") == b"\xfe\xff"
        assert pack(1, "int64") == b"\x01" + b"\x00" * 7
        assert pack(0xFFFFFFFF, "uint32") == b"\xff\xff\xff\xff"
        assert len(pack(1.0, "float")) == 4

    def test_char(self):
        """char packs as one UTF-16 code unit."""
        assert pack("A", "char") == b"A\x00"

    def test_char_outside_bmp_raises(self):
        """Characters needing surrogate pairs do not fit."""
        with pytest.raises(ArgumentError, match="BMP"):
            pack("\U0001F600", "char")

    def test_out_of_range_raises(self):
        """Values that do not fit the kind are rejected."""
        with pytest.raises(ArgumentError, match="Cannot pack"):
            pack(70000, "int16")
        with pytest.raises(ArgumentError):
            pack(-1, "uint32")

    def test_unknown_kind_raises(self):
        """Unknown kinds are rejected."""
        with pytest.raises(ArgumentError, match="Unknown payload kind"):
            pack(1, "int128")

    def test_uninferable_type_raises(self):
        """Values without a default layout need an explicit kind."""
        with pytest.raises(ArgumentError, match="Cannot infer"):
            pack("text")


class TestUnpack:
    """Tests for unpack function."""

    def test_all_kinds(self):
        """Every kind unpacks what it packs."""
        samples = {
            "int16": -5, "uint16": 5, "int32": -70000, "uint32": 70000,
            "int64": -(2 ** 40), "uint64": 2 ** 40, "float": 0.5,
            "double": 0.1, "bool": True, "char": "z",
        }
        assert set(samples) == set(KINDS)
        for kind, value in samples.items():
            assert unpack(pack(value, kind), kind) == value

    def test_wrong_length_raises(self):
        """Payload width must match the kind exactly."""
        with pytest.raises(FormatError, match="int32 payload must be 4 bytes, got 3"):
            unpack(b"\x00\x00\x00", "int32")
        with pytest.raises(FormatError, match="char payload"):
            unpack(b"A", "char")


class TestText:
    """Tests for text helpers."""

    def test_encode_utf16(self):
        """Text is encoded with the table's codec."""
        assert encode_text("hi", TextEncoding.UTF16_LE) == b"h\x00i\x00"
        assert encode_text("hi", TextEncoding.UTF16_BE) == b"\x00h\x00i"

    def test_utf32_has_no_bom(self):
        """UTF-32 payloads are little-endian without BOM."""
        assert encode_text("A", TextEncoding.UTF32) == b"A\x00\x00\x00"

    def test_decode(self):
        """Text payloads decode with the given encoding."""
        assert decode_text("héllo".encode("utf-8"), "utf-8") == "héllo"
