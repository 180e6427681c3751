# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""Tests for the encoding table."""

import locale

import pytest
from fostrian.encoding import TextEncoding, code_of, encoding_of, resolve
from fostrian.errors import FormatError, UnsupportedEncoding


class TestTextEncodingEnum:
    """Tests for TextEncoding enum."""

    def test_values(self):
        """Codes match the wire table."""
        assert TextEncoding.ASCII == 0
        assert TextEncoding.DEFAULT == 1
        assert TextEncoding.UTF8 == 2
        assert TextEncoding.UTF16_LE == 3
        assert TextEncoding.UTF16_BE == 4
        assert TextEncoding.UTF32 == 5

    def test_all_members(self):
        """The table is fixed at six entries."""
        assert len(TextEncoding) == 6

    def test_str(self):
        """__str__ returns name."""
        assert str(TextEncoding.UTF8) == "UTF8"

    def test_codec_names(self):
        """Each member maps to a Python codec."""
        assert TextEncoding.ASCII.codec_name == "ascii"
        assert TextEncoding.UTF8.codec_name == "utf-8"
        assert TextEncoding.UTF16_LE.codec_name == "utf-16-le"
        assert TextEncoding.UTF16_BE.codec_name == "utf-16-be"
        assert TextEncoding.UTF32.codec_name == "utf-32-le"

    def test_default_uses_preferred_encoding(self, monkeypatch):
        """DEFAULT follows the platform's preferred encoding."""
        monkeypatch.setattr(locale, "getpreferredencoding", lambda do_setlocale=True: "UTF8")
        assert TextEncoding.DEFAULT.codec_name == "utf-8"


class TestCodeOf:
    """Tests for code_of function."""

    def test_members(self):
        """Members map to their own value."""
        for encoding in TextEncoding:
            assert code_of(encoding) == int(encoding)

    def test_codec_names(self):
        """Python codec names and aliases are accepted."""
        assert code_of("ascii") == 0
        assert code_of("utf-8") == 2
        assert code_of("UTF8") == 2
        assert code_of("utf_16_le") == 3
        assert code_of("utf-16-be") == 4
        assert code_of("utf-32") == 5
        assert code_of("utf-32-le") == 5

    def test_unassigned_codec_raises(self):
        """A real codec without a code is rejected."""
        with pytest.raises(UnsupportedEncoding, match="No Fostrian code"):
            code_of("latin-1")

    def test_unknown_codec_raises(self):
        """An unknown codec name is rejected."""
        with pytest.raises(UnsupportedEncoding, match="Unknown text encoding"):
            code_of("not-a-codec")

    def test_wrong_type_raises(self):
        """Plain integers are not encodings."""
        with pytest.raises(UnsupportedEncoding):
            code_of(2)


class TestEncodingOf:
    """Tests for encoding_of function."""

    def test_known_codes(self):
        """Every assigned code resolves."""
        assert encoding_of(0) is TextEncoding.ASCII
        assert encoding_of(2) is TextEncoding.UTF8
        assert encoding_of(5) is TextEncoding.UTF32

    def test_unknown_code_raises(self):
        """Unassigned codes are a format error."""
        with pytest.raises(UnsupportedEncoding, match="0xff"):
            encoding_of(0xFF)
        with pytest.raises(FormatError):
            encoding_of(6)


class TestResolve:
    """Tests for resolve function."""

    def test_name_to_member(self):
        """Codec names normalize to members."""
        assert resolve("utf-16-le") is TextEncoding.UTF16_LE
        assert resolve(TextEncoding.ASCII) is TextEncoding.ASCII
