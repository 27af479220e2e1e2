"""Conversion between Unicode text and ISO-8859-1 bytes.

Encoding is lossy by policy: a character with no ISO-8859-1 equivalent is
written as ``?`` (0x3F), once per UTF-16 code unit, so a character outside the
Basic Multilingual Plane becomes ``??``. This is the fallback of the legacy
single-byte codec that produced earlier files and backups, kept for
bit-compatibility. Decoding is total: every byte maps to exactly one
character.
"""
import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..exceptions import FileIOError

logger = logging.getLogger(__name__)

LEGACY_ENCODING = "iso-8859-1"

# UTF-8 bytes of U+FFFD (EF BF BD) as they read back through ISO-8859-1
CORRUPTION_MARKER = "ï¿½"

FALLBACK_CHAR = "?"
_ERROR_HANDLER = "iso8859-editor-fallback"


def _fallback(error: UnicodeError) -> tuple[str, int]:
    if not isinstance(error, UnicodeEncodeError):
        raise error

    unmapped = error.object[error.start:error.end]
    replacement = "".join(
        FALLBACK_CHAR * 2 if ord(char) > 0xFFFF else FALLBACK_CHAR for char in unmapped
    )
    return replacement, error.end


codecs.register_error(_ERROR_HANDLER, _fallback)


@dataclass(frozen=True)
class EncodingVerification:
    """Result of scanning a just-written file for corruption markers."""

    encoding: str
    corruption_count: int

    @property
    def is_clean(self) -> bool:
        return self.corruption_count == 0


def count_unmappable(text: str) -> int:
    """Count characters that have no ISO-8859-1 representation."""
    return sum(1 for char in text if ord(char) > 0xFF)


def encode(text: str) -> bytes:
    """Encode text to ISO-8859-1, replacing unmappable characters.

    Args:
        text: Unicode text

    Returns:
        Encoded bytes
    """
    unmappable = count_unmappable(text)
    if unmappable:
        logger.warning(
            f"{unmappable} character(s) have no {LEGACY_ENCODING} equivalent "
            f"and were replaced with '{FALLBACK_CHAR}'"
        )
    return text.encode(LEGACY_ENCODING, errors=_ERROR_HANDLER)


def decode(data: bytes) -> str:
    """Decode ISO-8859-1 bytes. Never fails."""
    return data.decode(LEGACY_ENCODING)


def read_text(file_path: Union[str, Path]) -> str:
    """Read and decode an ISO-8859-1 file.

    Raises:
        FileIOError: If the file cannot be read
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        raise FileIOError(f"Failed to read {file_path}: {e}") from e
    return decode(data)


def verify_encoding(file_path: Union[str, Path]) -> EncodingVerification:
    """Scan a file for signs of a failed round trip.

    This is a heuristic, not a proof: it finds the byte pattern left behind
    when text already damaged by a UTF-8 decoder is written again. It
    misses other encoding mismatches, and a file that legitimately contains
    the bytes ``EF BF BD`` is reported as corrupted.

    Args:
        file_path: File to verify

    Returns:
        EncodingVerification with the number of markers found
    """
    content = read_text(file_path)
    return EncodingVerification(
        encoding=LEGACY_ENCODING,
        corruption_count=content.count(CORRUPTION_MARKER),
    )
