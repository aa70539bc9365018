# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from robots_txt.config import MatcherConfig, load_config
from robots_txt.parser.lines import MAX_LINE_LENGTH


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("user_agents: [FooBot, Bar_Bot]\nlog_level: debug", ".yaml", None),
        (json.dumps({"user_agents": ["FooBot", "Bar_Bot"], "log_level": "DEBUG"}), ".json", None),
        ("user_agents: [FooBot, Bar_Bot]\nlog_level: debug", ".yml", None),
        ("unknown_field: 1", ".yaml", ValidationError),
        ("user_agents: ['Foo Bot']", ".yaml", ValidationError),
        ("max_line_length: 0", ".yaml", ValidationError),
        ("log_level: LOUD", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("{broken", ".json", ValueError),
        ("user_agents: []", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, MatcherConfig)
        assert cfg.user_agents == ["FooBot", "Bar_Bot"]
        assert cfg.log_level == "DEBUG"
        assert cfg.max_line_length == MAX_LINE_LENGTH


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == MatcherConfig()
    assert cfg.user_agents == []
    assert cfg.log_level == "WARNING"
    assert cfg.log_file is None


def test_load_config_picks_up_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("robots_txt.yaml").write_text("user_agents: [FooBot]\nmax_line_length: 100\n", encoding="utf-8")
    cfg = load_config(None)
    assert cfg.user_agents == ["FooBot"]
    assert cfg.max_line_length == 100


def test_load_config_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_yaml_gives_defaults(tmp_path):
    cfg = load_config(write_file(tmp_path, "", ".yaml"))
    assert cfg == MatcherConfig()


def test_config_is_frozen():
    cfg = MatcherConfig()
    with pytest.raises(ValidationError):
        cfg.max_line_length = 10
