"""Root CLI group for xkpass with global flags and command registration."""

from __future__ import annotations

import click

from xkpass import __version__
from xkpass.commands import register_commands
from xkpass.commands._base import XkGroup
from xkpass.commands._context import AppContext
from xkpass.config.settings import XkSettings

_CLI_EXAMPLES = [
    ("xkpass generate", "one password from the default preset"),
    ("xkpass generate --preset XKCD -n 5", "five XKCD-style passwords"),
    ("xkpass -q generate --preset WiFi", "bare 63-character WiFi key"),
    ("xkpass presets", "table of built-in presets"),
]


@click.group(cls=XkGroup, invoke_without_command=True, examples=_CLI_EXAMPLES)
@click.version_option(version=__version__, prog_name="xkpass")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare passwords only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """xkpass: XKCD-style passphrase generator."""
    settings = XkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
