"""Atomic file replacement."""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..exceptions import FileIOError

logger = logging.getLogger(__name__)


def _default_mode() -> int:
    """Mode for a newly created file: 0o666 masked by the process umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class AtomicFileWrite:
    """Context manager that replaces a file through a sibling temp file.

    The new content is written to a temporary file in the target's
    directory and renamed over the target. An interrupted write leaves the
    target untouched and the temp file is cleaned up on exit.
    """

    def __init__(self, file_path: Union[str, Path]):
        """Initialize atomic write.

        Args:
            file_path: Path of the file to create or replace. A symlink is
                followed so the link survives and its target is rewritten.
        """
        if os.path.islink(file_path):
            file_path = os.path.realpath(file_path)
        self.file_path = Path(file_path)
        self.temp_path: Optional[Path] = None

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager."""
        if self.temp_path is not None and self.temp_path.exists():
            os.remove(self.temp_path)
            if exc_type is not None:
                logger.error(f"Discarded partial write of {self.file_path}: {exc_val}")

    def get_temp_file(self) -> Path:
        """Get a temporary file in the same directory."""
        if self.temp_path is None:
            with tempfile.NamedTemporaryFile(
                dir=self.file_path.parent,
                prefix=f".{self.file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                self.temp_path = Path(tmp.name)

        return self.temp_path

    def write(self, data: bytes):
        """Write bytes to the temp file and flush them to disk."""
        temp_file = self.get_temp_file()
        with open(temp_file, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        # keep the permissions of the file being replaced
        if self.file_path.exists():
            shutil.copymode(self.file_path, temp_file)
        else:
            os.chmod(temp_file, _default_mode())

    def atomic_replace(self):
        """Atomically move the temp file over the target."""
        if self.temp_path is None or not self.temp_path.exists():
            raise FileNotFoundError(f"Nothing written for {self.file_path}")

        os.replace(self.temp_path, self.file_path)
        logger.info(f"Atomically replaced {self.file_path}")
        self.temp_path = None


def atomic_write_bytes(file_path: Union[str, Path], data: bytes):
    """Atomically create or replace a file with ``data``.

    Args:
        file_path: Target file
        data: Complete new content

    Raises:
        FileIOError: If writing or renaming fails
    """
    try:
        with AtomicFileWrite(file_path) as writer:
            writer.write(data)
            writer.atomic_replace()
    except OSError as e:
        raise FileIOError(f"Failed to write {file_path}: {e}") from e
