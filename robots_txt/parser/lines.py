# File: robots_txt/parser/lines.py
"""robots_txt.parser.lines: splitting a raw robots.txt body into logical lines."""

from __future__ import annotations

import re
from typing import Final, Iterator, Tuple

from robots_txt.logger import logger

__all__ = ["MAX_LINE_LENGTH", "UTF8_BOM", "skip_bom", "iter_lines"]

# Certain browsers limit the URL length to 2083 bytes. Any sane robots.txt line
# fits in a few times that, with room for UTF-8 and stray bytes; whatever lies
# past this bound on a single line is ignored.
MAX_LINE_LENGTH: Final[int] = 2083 * 8

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"

_LINE_BREAK = re.compile(rb"\r\n|\r|\n")


def skip_bom(body: bytes) -> bytes:
    """Drop a full or partial UTF-8 byte order mark from the start of *body*.

    Only the first three positions are inspected. A broken mark is not
    restored: for ``EF 11 BF`` the ``EF`` is gone and scanning resumes at
    ``11``.
    """
    for size in (3, 2, 1):
        if body.startswith(UTF8_BOM[:size]):
            return body[size:]
    return body


def iter_lines(body: bytes, max_line_length: int = MAX_LINE_LENGTH) -> Iterator[Tuple[int, bytes]]:
    """Yield ``(line_num, line)`` for every logical line of *body*.

    ``\\n``, ``\\r`` and ``\\r\\n`` all end a line. The last line is yielded
    even without a terminator (possibly empty). Lines longer than
    *max_line_length* are truncated, the rest of the line is discarded.
    """
    for line_num, line in enumerate(_LINE_BREAK.split(skip_bom(body)), start=1):
        if len(line) > max_line_length:
            logger.debug("Line %d truncated from %d to %d bytes", line_num, len(line), max_line_length)
            line = line[:max_line_length]
        yield line_num, line
