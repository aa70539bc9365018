# === FILE: robots_txt/config.py ===
"""
Loading and validation of the robots_txt command line configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from robots_txt.matcher.robots_matcher import is_valid_user_agent_to_obey
from robots_txt.parser.lines import MAX_LINE_LENGTH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MatcherConfig(BaseModel):
    """Settings shared by every check run from the command line."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agents: List[str] = Field(
        default_factory=list,
        description="Extra user agents obeyed together with the one given on the command line.",
    )
    max_line_length: int = Field(
        MAX_LINE_LENGTH, ge=1, description="Bytes kept per robots.txt line, the rest is dropped."
    )
    log_level: LogLevel = Field("WARNING", description="Logging level.")
    log_file: Optional[str] = Field(None, description="Log file (stderr only when empty).")

    @field_validator("log_level", mode="before")
    def _upper_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("user_agents")
    def _check_user_agents(cls, v: List[str]) -> List[str]:
        invalid = [ua for ua in v if not is_valid_user_agent_to_obey(ua)]
        if invalid:
            raise ValueError(f"user agents must only contain [a-zA-Z_-]: {invalid}")
        return v


_DEFAULT_CFG = Path("robots_txt.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> MatcherConfig:
    """
    Read YAML or JSON and return a validated MatcherConfig.
    Without *path*, ``robots_txt.yaml`` from the working directory is used when
    present and the defaults otherwise. An explicit missing path raises
    FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return MatcherConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return MatcherConfig(**data)
