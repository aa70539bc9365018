# File: robots_txt/matcher/match_strategy.py
"""
Longest-match strategy for robots.txt rules.

Each ``match_*`` function returns a match priority:

* ``< 0``  – no match;
* ``== 0`` – match, but as weak as an empty pattern;
* ``> 0``  – match; the priority is the length of the pattern.

The longest pattern wins, as opposed to the first-match rule of the old
internet draft: for ``Allow: /`` plus ``Disallow: /cgi-bin`` the webmaster
clearly means "everything but /cgi-bin".
"""
from __future__ import annotations

from typing import Final, List

__all__ = [
    "NO_MATCH_PRIORITY",
    "has_wildcards",
    "matches",
    "match_priority",
    "match_allow",
    "match_disallow",
]

NO_MATCH_PRIORITY: Final[int] = -1

_STAR: Final[int] = ord("*")
_DOLLAR: Final[int] = ord("$")


def has_wildcards(pattern: bytes) -> bool:
    """True if *pattern* needs the full matcher (a ``*`` or a trailing ``$``)."""
    return b"*" in pattern or pattern.endswith(b"$")


def _matches_wildcard(path: bytes, pattern: bytes) -> bool:
    # Offsets into ``path`` reachable after consuming pattern[:j], ascending.
    path_len = len(path)
    positions: List[int] = [0]
    last = len(pattern) - 1
    for j, ch in enumerate(pattern):
        if ch == _DOLLAR and j == last:
            return positions[-1] == path_len
        if ch == _STAR:
            positions = list(range(positions[0], path_len + 1))
        else:
            # includes '$' in the middle of a pattern, taken literally
            positions = [pos + 1 for pos in positions if pos < path_len and path[pos] == ch]
            if not positions:
                return False
    return True


def matches(path: bytes, pattern: bytes) -> bool:
    """Return True if *pattern* matches the beginning of *path*.

    ``*`` stands for any run of bytes (including none) and a final ``$``
    anchors the pattern to the end of the path. An empty pattern matches
    everything.
    """
    if not has_wildcards(pattern):
        return path.startswith(pattern)
    return _matches_wildcard(path, pattern)


def match_priority(path: bytes, pattern: bytes) -> int:
    """Length of *pattern* if it matches *path*, :data:`NO_MATCH_PRIORITY` otherwise."""
    return len(pattern) if matches(path, pattern) else NO_MATCH_PRIORITY


def match_allow(path: bytes, pattern: bytes) -> int:
    return match_priority(path, pattern)


def match_disallow(path: bytes, pattern: bytes) -> int:
    return match_priority(path, pattern)
