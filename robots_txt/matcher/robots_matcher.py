# File: robots_txt/matcher/robots_matcher.py
"""
Decides whether a URL may be fetched according to a robots.txt body.

:class:`RobotsMatcher` is a :class:`~robots_txt.parser.RobotsParseHandler`:
while the body is being parsed it keeps, for the queried path, the best Allow
and Disallow priorities of the global group (``User-agent: *``) and of the
group(s) naming one of the queried agents. Nothing but those four numbers and
a handful of flags survives the parse.

Example::

    matcher = RobotsMatcher()
    matcher.one_agent_allowed_by_robots(body, "FooBot", "https://example.com/x")
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, List, Sequence, Union

from robots_txt.logger import logger
from robots_txt.matcher.match_strategy import NO_MATCH_PRIORITY, match_allow, match_disallow
from robots_txt.parser.lines import MAX_LINE_LENGTH
from robots_txt.parser.robots_parser import RobotsParseHandler, parse_robots_txt
from robots_txt.utils import get_path_params_query

__all__ = [
    "RobotsMatcher",
    "extract_user_agent",
    "is_valid_user_agent_to_obey",
    "is_allowed",
]

_AgentT = Union[str, bytes]

_INDEX_HTM: Final[bytes] = b"/index.htm"
_AGENT_CHARS: Final[frozenset] = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"
)


def _to_bytes(value: _AgentT) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def extract_user_agent(user_agent: bytes) -> bytes:
    """Return the leading ``[a-zA-Z_-]`` run of *user_agent* (``b"Googlebot/1.0"`` → ``b"Googlebot"``)."""
    for i, ch in enumerate(user_agent):
        if ch not in _AGENT_CHARS:
            return user_agent[:i]
    return user_agent


def is_valid_user_agent_to_obey(user_agent: _AgentT) -> bool:
    """A user agent is obeyable when it is non-empty and only made of ``[a-zA-Z_-]``."""
    raw = _to_bytes(user_agent)
    return bool(raw) and extract_user_agent(raw) == raw


def _is_global_agent(value: bytes) -> bool:
    # "* " followed by anything still counts as the global group
    return value[:1] == b"*" and (len(value) == 1 or value[1:2] in (b" ", b"\t"))


@dataclass(slots=True)
class Match:
    """Best priority seen so far for one kind of rule in one group."""

    priority: int = NO_MATCH_PRIORITY

    def raise_to(self, priority: int) -> None:
        if priority > self.priority:
            self.priority = priority

    def clear(self) -> None:
        self.priority = NO_MATCH_PRIORITY


@dataclass(slots=True)
class MatchHierarchy:
    """Global (``*``) and specific (queried agent) match of one rule kind."""

    global_: Match = field(default_factory=Match)
    specific: Match = field(default_factory=Match)

    def clear(self) -> None:
        self.global_.clear()
        self.specific.clear()


class RobotsMatcher(RobotsParseHandler):
    """Longest-match robots.txt evaluator.

    One instance evaluates one ``(body, agents, path)`` triple at a time; all
    state is reset when a parse starts. Use separate instances for concurrent
    evaluations.
    """

    def __init__(self, max_line_length: int = MAX_LINE_LENGTH) -> None:
        self.max_line_length = max_line_length
        self._allow = MatchHierarchy()
        self._disallow = MatchHierarchy()

        self._seen_global_agent = False  # inside a "*" block
        self._seen_specific_agent = False  # inside a block for one of our agents
        self._ever_seen_specific_agent = False  # any block for our agents, ever
        self._seen_separator = False  # any rule since the last user-agent line

        self._path: bytes = b"/"
        self._user_agents: List[bytes] = []

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #

    def allowed_by_robots(self, robots_body: bytes, user_agents: Sequence[_AgentT], url: str) -> bool:
        """Return True if any of *user_agents* may fetch *url*.

        *url* must already be %-encoded according to RFC 3986; only its path,
        params and query take part in matching.
        """
        path = get_path_params_query(url)
        return self.path_allowed_by_robots(robots_body, user_agents, path.encode("utf-8"))

    def one_agent_allowed_by_robots(self, robots_body: bytes, user_agent: _AgentT, url: str) -> bool:
        """Same as :meth:`allowed_by_robots` for a single agent."""
        return self.allowed_by_robots(robots_body, [user_agent], url)

    def path_allowed_by_robots(
        self, robots_body: bytes, user_agents: Sequence[_AgentT], path: Union[str, bytes]
    ) -> bool:
        """Evaluate an already extracted path (must start with ``/``)."""
        raw_path = _to_bytes(path)
        if not raw_path.startswith(b"/"):
            raise ValueError(f"Path must start with '/': {raw_path!r}")
        self._user_agents = [_to_bytes(agent) for agent in user_agents]
        self._path = raw_path
        parse_robots_txt(robots_body, self, self.max_line_length)
        allowed = not self.disallow()
        logger.debug("Path %r for agents %r: %s", raw_path, self._user_agents, "allowed" if allowed else "disallowed")
        return allowed

    def disallow(self) -> bool:
        """Verdict of the last parse: True when the path is disallowed."""
        allow, disallow = self._allow, self._disallow

        if allow.specific.priority > 0 or disallow.specific.priority > 0:
            return disallow.specific.priority > allow.specific.priority

        if self._ever_seen_specific_agent:
            # Group for our agent without any matching rule (or only empty ones).
            return False

        if allow.global_.priority > 0 or disallow.global_.priority > 0:
            return disallow.global_.priority > allow.global_.priority

        return False

    @property
    def ever_seen_specific_agent(self) -> bool:
        return self._ever_seen_specific_agent

    # ------------------------------------------------------------------ #
    # RobotsParseHandler callbacks                                       #
    # ------------------------------------------------------------------ #

    def handle_robots_start(self) -> None:
        self._allow.clear()
        self._disallow.clear()
        self._seen_global_agent = False
        self._seen_specific_agent = False
        self._ever_seen_specific_agent = False
        self._seen_separator = False

    def handle_user_agent(self, line_num: int, value: bytes) -> None:
        if self._seen_separator:
            self._seen_specific_agent = self._seen_global_agent = self._seen_separator = False

        if _is_global_agent(value):
            self._seen_global_agent = True
            return

        agent = extract_user_agent(value).lower()
        if any(agent == ua.lower() for ua in self._user_agents):
            self._ever_seen_specific_agent = self._seen_specific_agent = True

    def handle_allow(self, line_num: int, value: bytes) -> None:
        if not self._seen_any_agent:
            return
        self._seen_separator = True
        priority = match_allow(self._path, value)
        if priority < 0:
            priority = self._match_index_html(value)
        if priority >= 0:
            self._current(self._allow).raise_to(priority)

    def handle_disallow(self, line_num: int, value: bytes) -> None:
        if not self._seen_any_agent:
            return
        self._seen_separator = True
        priority = match_disallow(self._path, value)
        if priority >= 0:
            self._current(self._disallow).raise_to(priority)

    # ------------------------------------------------------------------ #
    # Internals                                                          #
    # ------------------------------------------------------------------ #

    @property
    def _seen_any_agent(self) -> bool:
        return self._seen_global_agent or self._seen_specific_agent

    def _current(self, hierarchy: MatchHierarchy) -> Match:
        return hierarchy.specific if self._seen_specific_agent else hierarchy.global_

    def _match_index_html(self, pattern: bytes) -> int:
        """'/index.htm' and '/index.html' at the end of an Allow pattern also allow the directory."""
        slash = pattern.rfind(b"/")
        if slash == -1 or not pattern.startswith(_INDEX_HTM, slash):
            return NO_MATCH_PRIORITY
        return match_allow(self._path, pattern[: slash + 1] + b"$")


def is_allowed(robots_body: bytes, user_agents: Union[_AgentT, Sequence[_AgentT]], url: str) -> bool:
    """Convenience wrapper: evaluate *url* with a fresh :class:`RobotsMatcher`."""
    if isinstance(user_agents, (str, bytes)):
        user_agents = [user_agents]
    return RobotsMatcher().allowed_by_robots(robots_body, user_agents, url)
