"""Process-wide configuration for the editor."""
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

BASE_PATH_ENV = "MCP_ISO_BASE_PATH"
BACKUP_ROOT_ENV = "MCP_ISO_BACKUP_ROOT"
LOG_LEVEL_ENV = "MCP_ISO_LOG_LEVEL"


def _absolute(path: Union[str, Path]) -> Path:
    return Path(os.path.abspath(path))


@dataclass(frozen=True)
class EditorConfig:
    """Immutable settings shared by the path resolver and backup manager.

    Built once at startup and passed explicitly to the components that need
    it. Neither component reads the environment on its own.

    Attributes:
        base_path: Sandbox root. ``None`` disables the sandbox check.
        backup_root: Directory under which the backup store is created.
    """

    base_path: Optional[Path] = None
    backup_root: Path = field(default_factory=Path.cwd)

    def __post_init__(self):
        if self.base_path is not None:
            object.__setattr__(self, "base_path", _absolute(self.base_path))
        object.__setattr__(self, "backup_root", _absolute(self.backup_root))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            EditorConfig where unset or empty variables fall back to the
            current working directory
        """
        if environ is None:
            environ = os.environ

        cwd = Path.cwd()
        base_path = environ.get(BASE_PATH_ENV) or cwd
        backup_root = environ.get(BACKUP_ROOT_ENV) or cwd
        return cls(base_path=Path(base_path), backup_root=Path(backup_root))
