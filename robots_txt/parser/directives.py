# File: robots_txt/parser/directives.py
"""robots_txt.parser.directives: key/value extraction, key classification and
percent-escaping of rule values for single robots.txt lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Tuple

__all__ = [
    "DirectiveKind",
    "Directive",
    "get_key_and_value",
    "classify_key",
    "escape_pattern",
    "needs_escaping",
]

_WHITESPACE: Final[bytes] = b" \t"
_WHITESPACE_RE = re.compile(rb"[ \t]")

# Well-formed escape first, so that "%e3" is uppercased as a unit.
_ESCAPE_RE = re.compile(rb"%[0-9A-Fa-f]{2}|[\x80-\xff]")

# Frequent typos are accepted on purpose; order of the prefixes does not matter.
_USER_AGENT_KEYS: Final = (b"user-agent", b"useragent", b"user agent")
_ALLOW_KEYS: Final = (b"allow",)
_DISALLOW_KEYS: Final = (
    b"disallow",
    b"dissallow",
    b"dissalow",
    b"disalow",
    b"diasllow",
    b"disallaw",
)
_SITEMAP_KEYS: Final = (b"sitemap", b"site-map")


class DirectiveKind(str, Enum):
    """Kind of a classified robots.txt line."""

    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    SITEMAP = "sitemap"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Directive:
    """One parsed line: its number, kind and value.

    ``key`` holds the original key bytes and is only set for
    :attr:`DirectiveKind.UNKNOWN`.
    """

    line_num: int
    kind: DirectiveKind
    value: bytes
    key: Optional[bytes] = None


def get_key_and_value(line: bytes) -> Optional[Tuple[bytes, bytes]]:
    """Split a logical line into ``(key, value)``.

    Rules look like ``<key>[ \\t]*:[ \\t]*<value>``. Some files forget the
    colon; whitespace is then accepted as the separator, but only when the
    line holds exactly two whitespace-delimited tokens. Returns ``None`` when
    no usable separator exists or the key is empty.
    """
    line = line.split(b"#", 1)[0].strip(_WHITESPACE)

    sep = line.find(b":")
    if sep == -1:
        match = _WHITESPACE_RE.search(line)
        if match is None:
            return None
        sep = match.start()
        # trailing whitespace is already gone, so any hit means a third token
        if _WHITESPACE_RE.search(line, sep + 1) is not None:
            return None

    key = line[:sep].strip(_WHITESPACE)
    if not key:
        return None
    return key, line[sep + 1:].strip(_WHITESPACE)


def classify_key(key: bytes) -> DirectiveKind:
    """Map a key to its :class:`DirectiveKind` by case-insensitive prefix."""
    lowered = key.lower()
    if lowered.startswith(_USER_AGENT_KEYS):
        return DirectiveKind.USER_AGENT
    if lowered.startswith(_ALLOW_KEYS):
        return DirectiveKind.ALLOW
    if lowered.startswith(_DISALLOW_KEYS):
        return DirectiveKind.DISALLOW
    if lowered.startswith(_SITEMAP_KEYS):
        return DirectiveKind.SITEMAP
    return DirectiveKind.UNKNOWN


def needs_escaping(kind: DirectiveKind) -> bool:
    """Only values that are matched against URLs get normalised."""
    return kind in (DirectiveKind.ALLOW, DirectiveKind.DISALLOW, DirectiveKind.SITEMAP)


def _escape(match: re.Match) -> bytes:
    token = match.group()
    if len(token) == 3:
        return token.upper()
    return b"%%%02X" % token[0]


def escape_pattern(value: bytes) -> bytes:
    """Percent-encode non-ASCII bytes and uppercase existing ``%xx`` escapes.

    >>> escape_pattern("/foo/ツ".encode())
    b'/foo/%E3%83%84'
    >>> escape_pattern(b"%aa")
    b'%AA'

    *value* itself is returned when nothing needs to change.
    """
    escaped = _ESCAPE_RE.sub(_escape, value)
    if escaped == value:
        return value
    return escaped
