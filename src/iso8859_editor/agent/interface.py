"""Agent-facing operations on ISO-8859-1 files."""
import logging
from pathlib import Path
from typing import Any, Optional

from ..config import EditorConfig
from ..core.backup import BackupManager
from ..core.codec import encode, read_text, verify_encoding
from ..core.line_editor import LineBuffer, replace_line_range
from ..core.paths import PathResolver
from ..core.safety import atomic_write_bytes
from ..exceptions import FileIOError, NotFoundError

logger = logging.getLogger(__name__)


def error_response(message: str) -> dict[str, Any]:
    """Uniform failure shape returned by every operation."""
    return {"isError": True, "message": message}


class IsoFileSystem:
    """ISO-8859-1 file operations for AI agents.

    Agents send and receive Unicode text; files are stored in ISO-8859-1.
    Every operation re-reads the filesystem, so no state is shared between
    calls, and every failure is returned as ``{"isError": True, "message":
    ...}`` instead of being raised.
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        """Initialize file system.

        Args:
            config: Editor configuration (defaults to environment settings)
        """
        self.config = config if config is not None else EditorConfig.from_env()
        self.resolver = PathResolver(self.config)
        self.backups = BackupManager(self.config)

    def _existing_file(self, file_path: str) -> Path:
        """Resolve a path and require that it names an existing file."""
        full_path = self.resolver.resolve(file_path)
        if not full_path.exists():
            raise NotFoundError(f"File does not exist: {full_path}")
        if not full_path.is_file():
            raise NotFoundError(f"Not a regular file: {full_path}")
        return full_path

    def _write(self, full_path: Path, text: str) -> dict[str, Any]:
        """Encode, persist and verify; return the verification fields."""
        atomic_write_bytes(full_path, encode(text))
        logger.info(f"File written: {full_path}")

        verification = verify_encoding(full_path)
        if not verification.is_clean:
            logger.warning(
                f"{verification.corruption_count} corruption marker(s) in {full_path}"
            )

        return {
            "success": True,
            "path": str(full_path),
            "encoding": verification.encoding,
            "corruption_count": verification.corruption_count,
            "is_clean": verification.is_clean,
        }

    def create_file(self, file_path: str, text: str) -> dict[str, Any]:
        """Create or overwrite a file with Unicode text stored as ISO-8859-1.

        Args:
            file_path: Absolute path of the file
            text: File content

        Returns:
            Dictionary with ``success``, ``path``, ``encoding``,
            ``corruption_count`` and ``is_clean``, or an error response
        """
        try:
            full_path = self.resolver.resolve(file_path)

            try:
                full_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FileIOError(f"Failed to create {full_path.parent}: {e}") from e

            return self._write(full_path, text)

        except Exception as e:
            logger.error(f"write_file_iso error: {e}")
            return error_response(str(e))

    def edit_file(
        self, file_path: str, start_line: int, end_line: int, replacement_text: str
    ) -> dict[str, Any]:
        """Replace a line range, keeping the file's encoding and line endings.

        A backup of the file is taken before anything else is read or
        changed; if it cannot be made the file is left untouched.

        Args:
            file_path: Absolute path of an existing file
            start_line: First line to replace (1-based)
            end_line: Last line to replace (1-based, inclusive)
            replacement_text: New content for the range

        Returns:
            Dictionary with the verification fields plus ``lines_replaced``,
            ``total_lines`` and ``backup_path``, or an error response
        """
        try:
            full_path = self._existing_file(file_path)
            backup_path = self.backups.create_backup(full_path)

            buffer = LineBuffer.from_text(read_text(full_path))
            logger.info(f"Detected line ending: {buffer.line_ending.name}")

            edit = replace_line_range(buffer, start_line, end_line, replacement_text)

            result = self._write(full_path, edit.buffer.to_text())
            result.update(
                {
                    "lines_replaced": edit.lines_replaced,
                    "total_lines": edit.total_lines,
                    "backup_path": str(backup_path),
                }
            )
            return result

        except Exception as e:
            logger.error(f"edit_file_iso error: {e}")
            return error_response(str(e))

    def read_file(self, file_path: str) -> dict[str, Any]:
        """Read an ISO-8859-1 file as Unicode text.

        Args:
            file_path: Absolute path of an existing file

        Returns:
            Dictionary with ``success``, ``path``, ``content``, ``lines`` and
            ``line_ending`` (``"CRLF"`` or ``"LF"``), or an error response
        """
        try:
            full_path = self._existing_file(file_path)
            content = read_text(full_path)
            buffer = LineBuffer.from_text(content)

            return {
                "success": True,
                "path": str(full_path),
                "content": content,
                "lines": len(buffer),
                "line_ending": buffer.line_ending.name,
            }

        except Exception as e:
            logger.error(f"read_file_iso error: {e}")
            return error_response(str(e))
