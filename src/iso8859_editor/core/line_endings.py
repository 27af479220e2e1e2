"""Line terminator detection and terminator-agnostic line splitting."""
import os
import re
from enum import Enum

_TERMINATOR = re.compile(r"\r?\n")


class LineEnding(Enum):
    """Line terminator convention of a text buffer."""

    CRLF = "\r\n"
    LF = "\n"

    @property
    def terminator(self) -> str:
        return self.value

    @classmethod
    def platform_default(cls) -> "LineEnding":
        """Native terminator of the host platform."""
        return cls.CRLF if os.linesep == "\r\n" else cls.LF


def detect_line_ending(text: str) -> LineEnding:
    """Classify the dominant line terminator of decoded text.

    CRLF wins only on a strict majority over bare LF, so equal counts
    resolve to LF. Text without any terminator gets the platform default.

    Args:
        text: Decoded text

    Returns:
        Detected line ending
    """
    crlf = text.count("\r\n")
    # every CRLF holds exactly one "\n", so this counts LFs with no CR before them
    lf_only = text.count("\n") - crlf

    if crlf > lf_only:
        return LineEnding.CRLF
    if lf_only > 0:
        return LineEnding.LF
    return LineEnding.platform_default()


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` or ``\\r\\n``.

    The result always has one more element than there are terminators: an
    empty string yields ``[""]`` and a trailing terminator yields a final
    empty line. A lone ``\\r`` is kept as content.
    """
    return _TERMINATOR.split(text)
