#!/usr/bin/env python3
"""Basic usage examples for the iso8859-editor library."""

import os
import tempfile
from pathlib import Path

from iso8859_editor import EditorConfig, IsoFileSystem


def file_system_example():
    """Create, edit and read an ISO-8859-1 file."""
    print("=== ISO-8859-1 File System Example ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(os.path.abspath(temp_dir))
        fs = IsoFileSystem(EditorConfig(base_path=root, backup_root=root))
        path = str(root / "legacy.txt")

        # Create a CRLF file with accented text
        result = fs.create_file(path, "Café\r\nniño\r\nZürich")
        print(f"Created {result['path']} (clean: {result['is_clean']})")
        print(f"Raw bytes: {Path(path).read_bytes()!r}")

        # Replace line 2 with two lines; LF in the input becomes CRLF on disk
        result = fs.edit_file(path, 2, 2, "señor\nmañana")
        print(
            f"Replaced {result['lines_replaced']} line(s), "
            f"now {result['total_lines']} lines"
        )
        print(f"Backup: {result['backup_path']}")

        # Read it back as Unicode
        result = fs.read_file(path)
        print(f"Line ending: {result['line_ending']}, lines: {result['lines']}")
        print(repr(result["content"]))

        # Characters outside ISO-8859-1 are replaced with '?'
        result = fs.create_file(path, "Price: 10€")
        print(f"Lossy write: {Path(path).read_bytes()!r}")

        # Errors come back as data
        result = fs.edit_file(path, 5, 9, "nope")
        print(f"Error response: {result}")


if __name__ == "__main__":
    file_system_example()
