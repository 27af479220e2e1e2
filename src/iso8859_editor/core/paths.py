"""Validation and normalization of user-supplied file paths."""
import logging
import os
from pathlib import Path

from ..config import EditorConfig
from ..exceptions import InvalidPathError, NotAbsoluteError, OutsideSandboxError

logger = logging.getLogger(__name__)


class PathResolver:
    """Turns a candidate path into a normalized absolute path.

    Normalization is lexical: ``.`` and ``..`` segments are collapsed but
    symbolic links are not followed and the filesystem is never touched.
    """

    def __init__(self, config: EditorConfig):
        """Initialize resolver.

        Args:
            config: Editor configuration holding the optional sandbox root
        """
        self.base_path = config.base_path

    def resolve(self, file_path: str) -> Path:
        """Validate and normalize a path.

        Args:
            file_path: Absolute path supplied by the caller

        Returns:
            Normalized absolute path

        Raises:
            NotAbsoluteError: If the path is relative
            OutsideSandboxError: If the path lies outside the base directory
            InvalidPathError: If the path cannot be normalized
        """
        if not isinstance(file_path, str):
            raise InvalidPathError(
                f"Path must be a string, got {type(file_path).__name__}"
            )

        if not os.path.isabs(file_path):
            raise NotAbsoluteError("Path must be absolute")

        if "\x00" in file_path:
            raise InvalidPathError("Path contains a null byte")

        try:
            normalized = Path(os.path.normpath(file_path))
        except (TypeError, ValueError, OSError) as e:
            raise InvalidPathError(f"Invalid path '{file_path}': {e}") from e

        if self.base_path is not None:
            try:
                normalized.relative_to(self.base_path)
            except ValueError:
                raise OutsideSandboxError(f"Path must be inside {self.base_path}")

        return normalized
