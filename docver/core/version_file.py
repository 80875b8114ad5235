"""
Grammar of the generated version file.

The version file is read by the document build as plain text, so its shape
is fixed. The version is taken from the first line of the form::

    Version: <digits>

with at least one space after the colon. Leading and trailing whitespace on
the line is ignored; anything else on the line makes it a non-match.
"""

import re
from dataclasses import dataclass

from ..config.constants import VERSION_PREFIX
from ..exceptions import VersionArithmeticError, VersionParseError

VERSION_LINE_RE = re.compile(r"^\s*" + re.escape(VERSION_PREFIX) + r" +([0-9]+)\s*$")


@dataclass(frozen=True)
class VersionLine:
    """A parsed version line."""

    value: int
    line_number: int  # 0-based index of the matching line


def parse_version_text(text: str) -> VersionLine:
    """Extract the version from the first matching line of ``text``.

    Raises:
        VersionParseError: If no line matches the grammar
    """
    for line_number, line in enumerate(text.splitlines()):
        match = VERSION_LINE_RE.match(line)
        if match:
            return VersionLine(value=int(match.group(1)), line_number=line_number)
    raise VersionParseError()


def next_version(current: int) -> int:
    """Return ``current + 1``.

    Raises:
        VersionArithmeticError: If ``current`` is not a non-negative integer
    """
    if isinstance(current, bool) or not isinstance(current, int) or current < 0:
        raise VersionArithmeticError(
            f"Cannot increment version {current!r}", value=repr(current)
        )
    return current + 1


def format_version_line(version: int) -> str:
    """Render the version file content, without trailing newline."""
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise VersionArithmeticError(
            f"Cannot write version {version!r}", value=repr(version)
        )
    return f"{VERSION_PREFIX} {version}"
