"""Centralized pre-edit backups."""
import logging
import os
import shutil
import time
from pathlib import Path
from typing import Union

from ..config import EditorConfig
from ..exceptions import BackupError

logger = logging.getLogger(__name__)

BACKUP_DIR_NAME = ".mcp-iso8859-writer"
EXTERNAL_DIR_NAME = "external"


class BackupManager:
    """Snapshots files into a backup store that mirrors the project layout.

    A file at ``<root>/src/app/data.txt`` is copied to
    ``<root>/.mcp-iso8859-writer/src/app/data.txt.backup.<millis>``. Files outside
    the backup root land in ``<root>/.mcp-iso8859-writer/external/``. Backups are
    never deleted or read back by the editor.
    """

    def __init__(self, config: EditorConfig):
        """Initialize backup manager.

        Args:
            config: Editor configuration holding the backup root
        """
        self.backup_root = config.backup_root
        self.store = self.backup_root / BACKUP_DIR_NAME

    def backup_dir_for(self, file_path: Path) -> Path:
        """Directory that holds backups of ``file_path``."""
        try:
            relative_dir = file_path.parent.relative_to(self.backup_root)
        except ValueError:
            return self.store / EXTERNAL_DIR_NAME
        return self.store / relative_dir

    def create_backup(self, file_path: Union[str, Path]) -> Path:
        """Copy a file into the backup store.

        Args:
            file_path: Normalized absolute path of the file about to be edited

        Returns:
            Path of the backup copy

        Raises:
            BackupError: If the directory or the copy cannot be created
        """
        file_path = Path(os.path.normpath(file_path))
        backup_dir = self.backup_dir_for(file_path)

        try:
            backup_dir.mkdir(parents=True, exist_ok=True)

            timestamp = int(time.time() * 1000)
            backup_path = backup_dir / f"{file_path.name}.backup.{timestamp}"
            while backup_path.exists():
                timestamp += 1
                backup_path = backup_dir / f"{file_path.name}.backup.{timestamp}"

            shutil.copy2(file_path, backup_path)

        except OSError as e:
            raise BackupError(f"Failed to back up {file_path}: {e}") from e

        logger.info(f"Created backup: {backup_path}")
        return backup_path
