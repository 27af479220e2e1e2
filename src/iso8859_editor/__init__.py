"""Encoding-safe line editing of ISO-8859-1 files for UTF-8 agents."""

from .agent import IsoFileSystem
from .config import EditorConfig
from .core import (
    BackupManager,
    EncodingVerification,
    LineBuffer,
    LineEnding,
    PathResolver,
    decode,
    detect_line_ending,
    encode,
    replace_line_range,
    verify_encoding,
)
from .exceptions import (
    BackupError,
    FileIOError,
    IsoEditorError,
    LineRangeError,
    NotFoundError,
    PathError,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "EditorConfig",
    # Core
    "encode",
    "decode",
    "verify_encoding",
    "EncodingVerification",
    "LineEnding",
    "detect_line_ending",
    "LineBuffer",
    "replace_line_range",
    "PathResolver",
    "BackupManager",
    # Errors
    "IsoEditorError",
    "PathError",
    "NotFoundError",
    "LineRangeError",
    "BackupError",
    "FileIOError",
    # Agent interface
    "IsoFileSystem",
]
