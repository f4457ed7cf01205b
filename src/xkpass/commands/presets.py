"""Command: list the built-in presets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xkpass.commands._base import XkCommand

if TYPE_CHECKING:
    from xkpass.commands._context import AppContext


@click.command(
    cls=XkCommand,
    examples=[
        ("xkpass presets", "table of every preset"),
        ("xkpass -q presets", "preset names only"),
        ("xkpass --json presets", "full configuration of each preset"),
    ],
)
@click.pass_obj
def presets(app: AppContext) -> None:
    """List built-in presets and their settings."""
    from xkpass.services.synthesize import PassphraseService

    app.emit(PassphraseService(app.settings).list_presets())
