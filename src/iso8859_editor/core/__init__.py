"""Core encoding, line editing and persistence modules."""

from .backup import BackupManager
from .codec import (
    CORRUPTION_MARKER,
    LEGACY_ENCODING,
    EncodingVerification,
    decode,
    encode,
    verify_encoding,
)
from .line_editor import LineBuffer, LineEdit, replace_line_range, validate_line_range
from .line_endings import LineEnding, detect_line_ending, split_lines
from .paths import PathResolver
from .safety import AtomicFileWrite, atomic_write_bytes

__all__ = [
    # Encoding
    'LEGACY_ENCODING',
    'CORRUPTION_MARKER',
    'EncodingVerification',
    'encode',
    'decode',
    'verify_encoding',

    # Line handling
    'LineEnding',
    'detect_line_ending',
    'split_lines',
    'LineBuffer',
    'LineEdit',
    'replace_line_range',
    'validate_line_range',

    # Filesystem
    'PathResolver',
    'BackupManager',
    'AtomicFileWrite',
    'atomic_write_bytes',
]
