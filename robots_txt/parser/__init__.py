"""robots_txt.parser: line splitting, directive classification and the parse driver."""

from .directives import Directive, DirectiveKind, classify_key, escape_pattern, get_key_and_value
from .lines import MAX_LINE_LENGTH, iter_lines
from .robots_parser import RobotsParseHandler, iter_directives, parse_robots_txt

__all__ = [
    "MAX_LINE_LENGTH",
    "Directive",
    "DirectiveKind",
    "RobotsParseHandler",
    "classify_key",
    "escape_pattern",
    "get_key_and_value",
    "iter_directives",
    "iter_lines",
    "parse_robots_txt",
]
