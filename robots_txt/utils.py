# File: robots_txt/utils.py
"""robots_txt.utils: URL-to-path extraction and reading robots.txt files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence, Union

from robots_txt.logger import logger

__all__: Sequence[str] = (
    "get_path_params_query",
    "read_robots_file",
)

_PATH_START_RE = re.compile(r"[/?;]")


def _find_path_start(url: str, pos: int) -> int:
    match = _PATH_START_RE.search(url, pos)
    return -1 if match is None else match.start()


def get_path_params_query(url: str) -> str:
    """Extract path, params and query from *url*; the fragment is dropped.

    The URL is expected to be %-encoded already; nothing is normalised here.
    Without a path the result is ``/``, and a leading ``/`` is added when the
    remainder would start with ``?`` or ``;``. A leading ``//`` marks a
    scheme-relative authority.

    >>> get_path_params_query("http://www.example.com/a/b?c=d&e=f#fragment")
    '/a/b?c=d&e=f'
    >>> get_path_params_query("example.com?a")
    '/?a'
    """
    search_start = 2 if url.startswith("//") else 0
    early_path = _find_path_start(url, search_start)
    protocol_end = url.find("://", search_start)
    if early_path < protocol_end:
        # "://" appears after the path started, e.g. inside the query
        protocol_end = -1
    protocol_end = search_start if protocol_end == -1 else protocol_end + 3

    path_start = _find_path_start(url, protocol_end)
    if path_start == -1:
        return "/"

    hash_pos = url.find("#", search_start)
    if 0 <= hash_pos < path_start:
        return "/"
    path_end = len(url) if hash_pos == -1 else hash_pos
    if url[path_start] != "/":
        return "/" + url[path_start:path_end]
    return url[path_start:path_end]


def read_robots_file(path: Union[str, Path]) -> bytes:
    """Read a robots.txt file as raw bytes, expanding ``~``."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("Robots file not found: %s", p)
        raise FileNotFoundError(f"Robots file not found: {p}")
    body = p.read_bytes()
    logger.debug("Loaded %d bytes from %s", len(body), p)
    return body
