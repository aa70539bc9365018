# File: tests/test_cli.py
"""Tests for the command line tool (`robots_txt/cli.py`) using click.testing.CliRunner.
They cover the verdict and its exit status, the help handling, configuration
files, JSON reports and error reporting.
"""
import json

import pytest
from click.testing import CliRunner

from robots_txt import __version__
from robots_txt.cli import cli


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep a stray robots_txt.yaml in the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def runner():
    return CliRunner()


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"robots_txt, version {__version__}" in result.output


@pytest.mark.parametrize("flag", ["-h", "-help", "--help"])
def test_help_flags(runner, flag):
    result = runner.invoke(cli, [flag])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "<robots.txt filename> <user_agent> <URI>" in result.output


@pytest.mark.parametrize("args", [[], ["robots.txt"], ["robots.txt", "FooBot"], ["a", "b", "c", "d"]])
def test_wrong_amount_of_arguments_shows_help(runner, args):
    result = runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Invalid amount of arguments. Showing help." in result.output
    assert "Usage:" in result.output


def test_allowed_url(runner, robots_file, sample_robots):
    path = robots_file(sample_robots)
    result = runner.invoke(cli, [str(path), "FooBot", "http://example.com/private/open/page"])
    assert result.exit_code == 0
    assert (
        "User-Agent 'FooBot' with URL 'http://example.com/private/open/page': ALLOWED"
        in result.output
    )


def test_disallowed_url(runner, robots_file, sample_robots):
    path = robots_file(sample_robots)
    result = runner.invoke(cli, [str(path), "FooBot", "http://example.com/public"])
    assert result.exit_code == 1
    assert "User-Agent 'FooBot' with URL 'http://example.com/public': DISALLOWED" in result.output


def test_global_group_applies_to_other_agents(runner, robots_file, sample_robots):
    path = robots_file(sample_robots)
    allowed = runner.invoke(cli, [str(path), "BarBot", "http://example.com/public"])
    denied = runner.invoke(cli, [str(path), "BarBot", "http://example.com/private/x"])
    assert allowed.exit_code == 0
    assert denied.exit_code == 1


def test_empty_robots_file_allows_everything(runner, robots_file):
    path = robots_file(b"")
    result = runner.invoke(cli, [str(path), "FooBot", "http://example.com/anything"])
    assert result.exit_code == 0
    assert "ALLOWED" in result.output
    assert "Notice: robots file is empty so all user-agents are allowed" in result.output


def test_missing_robots_file(runner, tmp_path):
    result = runner.invoke(cli, [str(tmp_path / "missing.txt"), "FooBot", "http://example.com/"])
    assert result.exit_code == 2
    assert "Failed to read robots file" in result.output


def test_config_adds_user_agents(runner, robots_file, tmp_path):
    path = robots_file(b"User-agent: BarBot\nDisallow: /\n")
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("user_agents: [BarBot]\n", encoding="utf-8")

    without_cfg = runner.invoke(cli, [str(path), "FooBot", "http://example.com/x"])
    with_cfg = runner.invoke(cli, ["--config", str(cfg), str(path), "FooBot", "http://example.com/x"])
    assert without_cfg.exit_code == 0
    assert with_cfg.exit_code == 1
    assert "DISALLOWED" in with_cfg.output


def test_default_config_file_is_picked_up(runner, robots_file, tmp_path):
    path = robots_file(b"User-agent: BarBot\nDisallow: /\n")
    (tmp_path / "robots_txt.yaml").write_text("user_agents: [BarBot]\n", encoding="utf-8")
    result = runner.invoke(cli, [str(path), "FooBot", "http://example.com/x"])
    assert result.exit_code == 1


def test_invalid_config_is_reported(runner, robots_file, tmp_path):
    path = robots_file(b"User-agent: *\nDisallow: /\n")
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("unknown_field: 1\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(cfg), str(path), "FooBot", "http://example.com/"])
    assert result.exit_code == 2
    assert "Failed to load configuration" in result.output


def test_missing_config_is_reported(runner, robots_file, tmp_path):
    path = robots_file(b"User-agent: *\n")
    result = runner.invoke(
        cli, ["-c", str(tmp_path / "nope.yaml"), str(path), "FooBot", "http://example.com/"]
    )
    assert result.exit_code == 2
    assert "Failed to load configuration" in result.output


def test_json_report(runner, robots_file, sample_robots, tmp_path):
    path = robots_file(sample_robots)
    report = tmp_path / "out" / "report.json"
    result = runner.invoke(
        cli, ["--json", str(report), str(path), "FooBot", "http://example.com/public"]
    )
    assert result.exit_code == 1
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["sitemaps"] == ["https://example.com/sitemap.xml"]
    assert data["valid_directives"] == 6
    assert data["unknown_directives"] == [{"line": 7, "key": "Crawl-delay", "value": "10"}]
    assert data["verdict"] == {
        "user_agents": ["FooBot"],
        "url": "http://example.com/public",
        "allowed": False,
    }


def test_log_file_option(runner, robots_file, sample_robots, tmp_path):
    path = robots_file(sample_robots)
    log = tmp_path / "robots.log"
    result = runner.invoke(
        cli,
        ["--log-level", "INFO", "--log-file", str(log), str(path), "FooBot", "http://example.com/"],
    )
    assert result.exit_code == 1
    assert "Checking http://example.com/" in log.read_text(encoding="utf-8")
