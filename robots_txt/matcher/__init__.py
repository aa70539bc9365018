"""robots_txt.matcher: pattern matching and the allow/disallow decision."""

from .match_strategy import NO_MATCH_PRIORITY, match_priority, matches
from .robots_matcher import RobotsMatcher, extract_user_agent, is_allowed, is_valid_user_agent_to_obey

__all__ = [
    "NO_MATCH_PRIORITY",
    "RobotsMatcher",
    "extract_user_agent",
    "is_allowed",
    "is_valid_user_agent_to_obey",
    "match_priority",
    "matches",
]
