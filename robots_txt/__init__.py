# robots_txt/__init__.py
"""
robots_txt package initializer.
Defines the package version and exposes the evaluation API.
"""
__version__ = "0.1.0"

from .matcher.robots_matcher import RobotsMatcher, is_allowed, is_valid_user_agent_to_obey
from .parser.robots_parser import RobotsParseHandler, iter_directives, parse_robots_txt
from .utils import get_path_params_query

__all__ = [
    "__version__",
    "RobotsMatcher",
    "RobotsParseHandler",
    "get_path_params_query",
    "is_allowed",
    "is_valid_user_agent_to_obey",
    "iter_directives",
    "parse_robots_txt",
]
