"""Exception hierarchy for ISO-8859-1 file operations."""


class IsoEditorError(Exception):
    """Base class for every error raised by the editor."""


class PathError(IsoEditorError, ValueError):
    """A user-supplied path could not be accepted."""


class NotAbsoluteError(PathError):
    """The path is relative."""


class OutsideSandboxError(PathError):
    """The path resolves outside the configured base directory."""


class InvalidPathError(PathError):
    """The path could not be normalized (NUL bytes, wrong type, OS failure)."""


class NotFoundError(IsoEditorError, FileNotFoundError):
    """The target file does not exist."""


class LineRangeError(IsoEditorError, ValueError):
    """A line range is out of bounds or inconsistent."""


class BackupError(IsoEditorError, OSError):
    """The pre-edit backup copy could not be created."""


class FileIOError(IsoEditorError, OSError):
    """Reading, writing or renaming the target file failed."""
