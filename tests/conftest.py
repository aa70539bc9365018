# File: tests/conftest.py
from pathlib import Path
from typing import Callable

import pytest

from robots_txt.matcher.robots_matcher import RobotsMatcher


@pytest.fixture()
def is_user_agent_allowed() -> Callable[[str, str, str], bool]:
    """
    Return a helper evaluating a text robots.txt for one agent and one URL.
    A fresh RobotsMatcher is used on every call.
    """

    def _check(robots_txt: str, user_agent: str, url: str) -> bool:
        matcher = RobotsMatcher()
        return matcher.one_agent_allowed_by_robots(robots_txt.encode("utf-8"), user_agent, url)

    return _check


@pytest.fixture()
def robots_file(tmp_path) -> Callable[[bytes], Path]:
    """
    Return a factory writing the given bytes to a temporary robots.txt.
    """

    def _write(content: bytes, name: str = "robots.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture()
def sample_robots() -> bytes:
    """
    A small robots.txt with a global group, a specific group and a sitemap.
    """
    return (
        b"User-agent: *\n"
        b"Disallow: /private/\n"
        b"\n"
        b"User-agent: FooBot\n"
        b"Allow: /private/open/\n"
        b"Disallow: /\n"
        b"Crawl-delay: 10\n"
        b"\n"
        b"Sitemap: https://example.com/sitemap.xml\n"
    )
