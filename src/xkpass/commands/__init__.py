"""Subcommand modules for xkpass.

Provides register_commands() which uses deferred imports to keep
``xkpass --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from xkpass.commands.generate import generate
    from xkpass.commands.presets import presets

    cli.add_command(generate)
    cli.add_command(presets)
