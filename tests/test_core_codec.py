"""Tests for ISO-8859-1 encoding, decoding and verification."""
import logging
import tempfile
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st
from iso8859_editor.core.codec import (
    CORRUPTION_MARKER,
    LEGACY_ENCODING,
    count_unmappable,
    decode,
    encode,
    read_text,
    verify_encoding,
)
from iso8859_editor.exceptions import FileIOError

latin1_text = st.text(alphabet=st.characters(min_codepoint=0, max_codepoint=0xFF))


class TestEncodeDecode:
    """Test the conversion functions."""

    def test_encode_latin1_characters(self) -> None:
        """Accented characters map to their single-byte codes."""
        assert encode("Café, niño") == b"Caf\xe9, ni\xf1o"

    def test_decode_every_byte(self) -> None:
        """Decoding is total: each of the 256 bytes gives one character."""
        data = bytes(range(256))
        text = decode(data)

        assert len(text) == 256
        assert [ord(c) for c in text] == list(range(256))
        assert encode(text) == data

    def test_unmappable_character_replaced(self) -> None:
        """Characters outside ISO-8859-1 become '?' without raising."""
        assert encode("price: 5€") == b"price: 5?"
        assert encode("—") == b"?"

    def test_astral_character_becomes_two_fallbacks(self) -> None:
        """Characters beyond the BMP are replaced once per UTF-16 code unit."""
        assert encode("a\U0001f600b") == b"a??b"

    def test_lossy_encode_logs_warning(self, caplog) -> None:
        """Lossy encodes are reported in the log."""
        with caplog.at_level(logging.WARNING, logger="iso8859_editor.core.codec"):
            encode("€€")

        assert "2 character(s)" in caplog.text

    def test_clean_encode_does_not_warn(self, caplog) -> None:
        """Nothing is logged when every character fits."""
        with caplog.at_level(logging.WARNING, logger="iso8859_editor.core.codec"):
            encode("Zürich")

        assert caplog.records == []

    def test_count_unmappable(self) -> None:
        """Only code points above 0xFF count as unmappable."""
        assert count_unmappable("ÿĀ€") == 2
        assert count_unmappable("plain") == 0

    def test_empty_text(self) -> None:
        """Empty text encodes to empty bytes."""
        assert encode("") == b""
        assert decode(b"") == ""

    @given(text=latin1_text)
    def test_round_trip(self, text: str) -> None:
        """Text inside the repertoire survives encode then decode unchanged."""
        assert decode(encode(text)) == text

    @given(text=st.text())
    def test_encoded_length(self, text: str) -> None:
        """Every UTF-16 code unit produces exactly one byte."""
        units = len(text.encode("utf-16-le", errors="surrogatepass")) // 2
        assert len(encode(text)) == units


class TestVerifyEncoding:
    """Test post-write verification."""

    def setup_method(self) -> None:
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_file = Path(self.temp_dir) / "verify.txt"

    def teardown_method(self) -> None:
        """Clean up test environment."""
        import shutil

        shutil.rmtree(self.temp_dir)

    def test_clean_file(self) -> None:
        """A plain Latin-1 file has no corruption."""
        self.test_file.write_bytes(encode("Valid Latin-1: café"))

        result = verify_encoding(self.test_file)

        assert result.encoding == LEGACY_ENCODING
        assert result.corruption_count == 0
        assert result.is_clean

    def test_marker_detected(self) -> None:
        """UTF-8 replacement characters read as Latin-1 are counted."""
        self.test_file.write_bytes(b"bad \xef\xbf\xbd here and \xef\xbf\xbd there")

        result = verify_encoding(self.test_file)

        assert result.corruption_count == 2
        assert not result.is_clean

    def test_marker_constant(self) -> None:
        """The marker is U+FFFD encoded as UTF-8 and decoded as Latin-1."""
        assert CORRUPTION_MARKER == "�".encode("utf-8").decode("latin-1")

    def test_missing_file(self) -> None:
        """Unreadable files raise FileIOError."""
        with pytest.raises(FileIOError):
            verify_encoding(Path(self.temp_dir) / "missing.txt")

    def test_read_text(self) -> None:
        """read_text decodes file bytes as Latin-1."""
        self.test_file.write_bytes(b"na\xefve")
        assert read_text(self.test_file) == "naïve"
