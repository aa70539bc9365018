"""Allow running as `python -m robots_txt`."""

from .cli import cli

cli(prog_name="robots-txt")
