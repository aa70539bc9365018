# === FILE: robots_txt/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point: is a URL allowed for a user agent by a robots.txt file?

Usage:
  robots-txt [OPTIONS] <robots.txt filename> <user_agent> <URI>

Options:
  --config, -c PATH   YAML/JSON config (default: robots_txt.yaml when present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...), overrides the config
  --log-file PATH     Log file (stderr only when omitted)
  --json, -j PATH     Save a JSON parse report (sitemaps, unknown directives)
  --version, -v       Show the version
  -h, -help, --help   Show the help and exit

Exit status: 0 when the URI is allowed, 1 when it is disallowed, 2 on errors.
A wrong number of arguments prints the help and exits with 0.

Example:
  robots-txt robots.txt FooBot http://example.com/foo
"""
import sys
from pathlib import Path
from typing import NoReturn

import click

from robots_txt import __version__
from robots_txt.config import load_config
from robots_txt.logger import init_logging, logger
from robots_txt.matcher.robots_matcher import RobotsMatcher
from robots_txt.report import collect_stats, render_json
from robots_txt.utils import read_robots_file

CONTEXT_SETTINGS = dict(help_option_names=["-h", "-help", "--help"])

EXIT_ALLOWED = 0
EXIT_DISALLOWED = 1
EXIT_ERROR = 2


def print_error(message: str) -> NoReturn:
    click.secho(message, fg='red', err=True)
    sys.exit(EXIT_ERROR)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robots_txt, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level (overrides the configuration).'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only when omitted).'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON parse report to this file.'
)
@click.argument('args', nargs=-1, metavar='<robots.txt filename> <user_agent> <URI>')
@click.pass_context
def cli(ctx, config_path, log_level, log_file, json_output, args):
    """Shows whether the given user_agent and URI combination is allowed or
    disallowed by the given robots.txt file.

    The URI must be %-encoded according to RFC3986.

    \b
    Example:
      robots-txt robots.txt FooBot http://example.com/foo
    """
    if len(args) != 3:
        click.echo('Invalid amount of arguments. Showing help.', err=True)
        click.echo(ctx.get_help())
        ctx.exit(EXIT_ALLOWED)

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Failed to load configuration: {e}')

    init_logging(
        level=log_level or cfg.log_level,
        log_file=str(log_file) if log_file else cfg.log_file,
    )

    filename, user_agent, url = args
    try:
        robots_content = read_robots_file(filename)
    except OSError as e:
        print_error(f'Failed to read robots file: {e}')

    user_agents = [user_agent, *cfg.user_agents]
    logger.info("Checking %s for %s against %s", url, user_agents, filename)

    matcher = RobotsMatcher(max_line_length=cfg.max_line_length)
    allowed = matcher.allowed_by_robots(robots_content, user_agents, url)
    allowed_string = 'ALLOWED' if allowed else 'DISALLOWED'

    click.echo(f"User-Agent '{user_agent}' with URL '{url}': {allowed_string}")
    if not robots_content:
        click.echo('Notice: robots file is empty so all user-agents are allowed')

    if json_output:
        stats = collect_stats(robots_content, cfg.max_line_length)
        verdict = {'user_agents': user_agents, 'url': url, 'allowed': allowed}
        try:
            saved_json = render_json(stats, json_output, verdict=verdict)
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')
        logger.info("JSON report saved: %s", saved_json)

    ctx.exit(EXIT_ALLOWED if allowed else EXIT_DISALLOWED)


if __name__ == "__main__":
    cli()
