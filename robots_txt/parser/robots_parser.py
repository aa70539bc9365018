# File: robots_txt/parser/robots_parser.py
"""robots_txt.parser.robots_parser: turns a robots.txt body into a stream of
directives and feeds it to a :class:`RobotsParseHandler`."""

from __future__ import annotations

from typing import Iterator

from robots_txt.logger import logger
from robots_txt.parser.directives import (
    Directive,
    DirectiveKind,
    classify_key,
    escape_pattern,
    get_key_and_value,
    needs_escaping,
)
from robots_txt.parser.lines import MAX_LINE_LENGTH, iter_lines

__all__ = ["RobotsParseHandler", "iter_directives", "parse_robots_txt", "dispatch"]


class RobotsParseHandler:
    """Receives parse events. Every callback is a no-op here; override what you need.

    Line numbers are 1-based and strictly increasing within one parse.
    Values are raw bytes; Allow, Disallow and Sitemap values are already
    percent-escaped.
    """

    def handle_robots_start(self) -> None:
        pass

    def handle_robots_end(self) -> None:
        pass

    def handle_user_agent(self, line_num: int, value: bytes) -> None:
        pass

    def handle_allow(self, line_num: int, value: bytes) -> None:
        pass

    def handle_disallow(self, line_num: int, value: bytes) -> None:
        pass

    def handle_sitemap(self, line_num: int, value: bytes) -> None:
        pass

    def handle_unknown_action(self, line_num: int, action: bytes, value: bytes) -> None:
        pass


def iter_directives(body: bytes, max_line_length: int = MAX_LINE_LENGTH) -> Iterator[Directive]:
    """Yield one :class:`Directive` per line that has a key and a separator."""
    for line_num, line in iter_lines(body, max_line_length):
        pair = get_key_and_value(line)
        if pair is None:
            continue
        key, value = pair
        kind = classify_key(key)
        if needs_escaping(kind):
            value = escape_pattern(value)
        if kind is DirectiveKind.UNKNOWN:
            logger.debug("Unknown directive %r on line %d", key, line_num)
            yield Directive(line_num, kind, value, key)
        else:
            yield Directive(line_num, kind, value)


def dispatch(directive: Directive, handler: RobotsParseHandler) -> None:
    """Route a single directive to the matching handler callback."""
    kind = directive.kind
    if kind is DirectiveKind.USER_AGENT:
        handler.handle_user_agent(directive.line_num, directive.value)
    elif kind is DirectiveKind.ALLOW:
        handler.handle_allow(directive.line_num, directive.value)
    elif kind is DirectiveKind.DISALLOW:
        handler.handle_disallow(directive.line_num, directive.value)
    elif kind is DirectiveKind.SITEMAP:
        handler.handle_sitemap(directive.line_num, directive.value)
    elif kind is DirectiveKind.UNKNOWN:
        handler.handle_unknown_action(directive.line_num, directive.key or b"", directive.value)
    else:  # pragma: no cover
        raise ValueError(f"Unsupported directive kind: {kind!r}")


def parse_robots_txt(
    body: bytes,
    handler: RobotsParseHandler,
    max_line_length: int = MAX_LINE_LENGTH,
) -> None:
    """Parse *body* and report every directive to *handler*.

    Parsing never fails: malformed lines are skipped, unknown keys are
    reported through :meth:`RobotsParseHandler.handle_unknown_action`.
    """
    handler.handle_robots_start()
    for directive in iter_directives(body, max_line_length):
        dispatch(directive, handler)
    handler.handle_robots_end()
