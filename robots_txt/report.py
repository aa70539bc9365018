# robots_txt/report.py

"""
Parse diagnostics for robots.txt files.

:class:`RobotsStats` listens to the parser and records what a webmaster would
want to know about the file: how many directives were understood, which
sitemaps it announces and which lines used unknown keys. :func:`render_json`
writes that summary to disk.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict, Union

from robots_txt.parser.lines import MAX_LINE_LENGTH
from robots_txt.parser.robots_parser import RobotsParseHandler, parse_robots_txt

__all__ = ["UnknownDirectiveInfo", "RobotsStats", "collect_stats", "render_json"]


class UnknownDirectiveInfo(TypedDict):
    """A line whose key is not a known robots.txt directive."""

    line: int
    key: str
    value: str


def _text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


@dataclass
class RobotsStats(RobotsParseHandler):
    """Counts directives and collects sitemaps and unknown keys during a parse."""

    last_line_seen: int = 0
    valid_directives: int = 0
    sitemaps: List[str] = field(default_factory=list)
    unknown_directives: List[UnknownDirectiveInfo] = field(default_factory=list)

    def handle_robots_start(self) -> None:
        self.last_line_seen = 0
        self.valid_directives = 0
        self.sitemaps = []
        self.unknown_directives = []

    def handle_user_agent(self, line_num: int, value: bytes) -> None:
        self._digest(line_num)

    def handle_allow(self, line_num: int, value: bytes) -> None:
        self._digest(line_num)

    def handle_disallow(self, line_num: int, value: bytes) -> None:
        self._digest(line_num)

    def handle_sitemap(self, line_num: int, value: bytes) -> None:
        self._digest(line_num)
        self.sitemaps.append(_text(value))

    def handle_unknown_action(self, line_num: int, action: bytes, value: bytes) -> None:
        self.last_line_seen = line_num
        self.unknown_directives.append(
            UnknownDirectiveInfo(line=line_num, key=_text(action), value=_text(value))
        )

    def _digest(self, line_num: int) -> None:
        if line_num <= self.last_line_seen:
            raise ValueError(f"Line numbers must increase: {line_num} after {self.last_line_seen}")
        self.last_line_seen = line_num
        self.valid_directives += 1

    def as_dict(self) -> Dict[str, Any]:
        return {
            "valid_directives": self.valid_directives,
            "last_line_seen": self.last_line_seen,
            "sitemaps": list(self.sitemaps),
            "unknown_directives": list(self.unknown_directives),
        }


def collect_stats(robots_body: bytes, max_line_length: int = MAX_LINE_LENGTH) -> RobotsStats:
    """Parse *robots_body* once and return the collected :class:`RobotsStats`."""
    stats = RobotsStats()
    parse_robots_txt(robots_body, stats, max_line_length)
    return stats


def render_json(
    stats: RobotsStats,
    output_path: Union[str, Path],
    *,
    verdict: Optional[Dict[str, Any]] = None,
) -> Path:
    """
    Save *stats* (and an optional *verdict* block) as JSON.

    :param stats: collected parse statistics
    :param output_path: path to the JSON file; parent folders are created
    :param verdict: extra mapping stored under ``"verdict"``
    :return: Path of the written file

    Example:
    ```python
    from robots_txt.report import collect_stats, render_json
    report_path = render_json(collect_stats(body), 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = stats.as_dict()
    if verdict is not None:
        data["verdict"] = verdict

    with output.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
