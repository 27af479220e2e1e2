"""Line-range replacement on decoded text buffers."""
import logging
from dataclasses import dataclass
from typing import Any

from ..exceptions import LineRangeError
from .line_endings import LineEnding, detect_line_ending, split_lines

logger = logging.getLogger(__name__)


@dataclass
class LineBuffer:
    """Lines of a decoded file together with its line terminator.

    ``len(lines)`` is always the number of terminators plus one, so a
    trailing terminator shows up as a final empty line and joining the
    lines back with ``line_ending`` restores the text.
    """

    lines: list[str]
    line_ending: LineEnding

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        """Split text into lines and detect its line ending."""
        return cls(split_lines(text), detect_line_ending(text))

    def to_text(self) -> str:
        """Join lines with the buffer's line ending."""
        return self.line_ending.terminator.join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class LineEdit:
    """Outcome of a line-range replacement."""

    buffer: LineBuffer
    lines_replaced: int

    @property
    def total_lines(self) -> int:
        return len(self.buffer)


def _check_line_number(name: str, value: Any):
    if isinstance(value, bool) or not isinstance(value, int):
        raise LineRangeError(f"{name} must be an integer (got {value!r})")


def validate_line_range(start_line: int, end_line: int, total_lines: int):
    """Check a 1-based inclusive line range against a file length.

    Args:
        start_line: First line to replace
        end_line: Last line to replace
        total_lines: Number of lines in the file

    Raises:
        LineRangeError: Describing the first violated bound
    """
    _check_line_number("startLine", start_line)
    _check_line_number("endLine", end_line)

    if start_line < 1:
        raise LineRangeError(f"startLine must be >= 1 (got {start_line})")
    if end_line < 1:
        raise LineRangeError(f"endLine must be >= 1 (got {end_line})")
    if start_line > end_line:
        raise LineRangeError(f"startLine ({start_line}) > endLine ({end_line})")
    if start_line > total_lines:
        raise LineRangeError(
            f"startLine ({start_line}) exceeds file length ({total_lines} lines)"
        )
    if end_line > total_lines:
        raise LineRangeError(
            f"endLine ({end_line}) exceeds file length ({total_lines} lines)"
        )


def replace_line_range(
    buffer: LineBuffer, start_line: int, end_line: int, replacement_text: str
) -> LineEdit:
    """Replace lines ``start_line``..``end_line`` with new text.

    The replacement is split on ``\\n`` or ``\\r\\n`` whatever its own
    convention, and the result keeps the buffer's original line ending.
    Lines outside the range keep their content and order. The input buffer
    is left unchanged.

    Args:
        buffer: Lines of the current file
        start_line: First line to replace (1-based)
        end_line: Last line to replace (1-based, inclusive)
        replacement_text: New content; an empty string yields one empty line

    Returns:
        LineEdit holding the new buffer and the number of replaced lines

    Raises:
        LineRangeError: If the range is invalid for this buffer
    """
    validate_line_range(start_line, end_line, len(buffer))

    new_lines = split_lines(replacement_text)
    lines_replaced = end_line - start_line + 1

    logger.info(
        f"Replacing lines {start_line}-{end_line} ({lines_replaced} lines) "
        f"with {len(new_lines)} new lines"
    )

    lines = buffer.lines[: start_line - 1] + new_lines + buffer.lines[end_line:]
    return LineEdit(LineBuffer(lines, buffer.line_ending), lines_replaced)
