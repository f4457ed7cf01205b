"""Command: generate passwords from a preset or custom options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xkpass.commands._base import XkCommand

if TYPE_CHECKING:
    from xkpass.commands._context import AppContext


@click.command(
    cls=XkCommand,
    examples=[
        ("xkpass generate", "Default preset"),
        ("xkpass generate --preset XKCD", "four random-case words joined by -"),
        ("xkpass generate --preset wifi -n 3", "preset names ignore case"),
        (
            "xkpass generate --words 5 --case upper --separators None --digits-after 0",
            "custom options on top of Default",
        ),
        (
            "xkpass generate --min-length 6 --max-length 9 -d /usr/share/dict/words",
            "own word list",
        ),
        ("xkpass -q generate --preset Web32 | pbcopy", "bare password to the clipboard"),
        ("xkpass --json generate --preset AppleID", "password plus config and entropy"),
    ],
)
@click.option("-p", "--preset", default=None, help="Named preset (overrides custom options).")
@click.option("--words", "word_count", type=int, default=None, help="Number of words.")
@click.option("--min-length", type=int, default=None, help="Minimum word length.")
@click.option("--max-length", type=int, default=None, help="Maximum word length.")
@click.option(
    "--case",
    default=None,
    help="Case policy: none, first-letter-upper, random-upper-lower, "
    "every-other-upper-lower, lower, upper.",
)
@click.option("--separators", default=None, help="Separator characters ('None' disables).")
@click.option("--digits-before", type=int, default=None, help="Padding digits before (0-5).")
@click.option("--digits-after", type=int, default=None, help="Padding digits after (0-5).")
@click.option("--symbols", default=None, help="Padding symbol characters ('None' disables).")
@click.option("--symbols-before", type=int, default=None, help="Padding symbols before.")
@click.option("--symbols-after", type=int, default=None, help="Padding symbols after.")
@click.option("--pad-to-length", type=int, default=None, help="Pad with the symbol to this length.")
@click.option("-n", "--count", type=int, default=None, help="How many passwords to generate.")
@click.option("-d", "--dictionary", default=None, help="Word list file (one word per line).")
@click.pass_obj
def generate(
    app: AppContext,
    preset: str | None,
    word_count: int | None,
    min_length: int | None,
    max_length: int | None,
    case: str | None,
    separators: str | None,
    digits_before: int | None,
    digits_after: int | None,
    symbols: str | None,
    symbols_before: int | None,
    symbols_after: int | None,
    pad_to_length: int | None,
    count: int | None,
    dictionary: str | None,
) -> None:
    """Generate XKCD-style passwords."""
    from xkpass.domain.models import PresetMode
    from xkpass.services.synthesize import PassphraseService

    overrides = {
        "word_count": word_count,
        "min_length": min_length,
        "max_length": max_length,
        "case": case,
        "separators": separators,
        "digits_before": digits_before,
        "digits_after": digits_after,
        "symbols": symbols,
        "symbols_before": symbols_before,
        "symbols_after": symbols_after,
        "pad_to_length": pad_to_length,
    }
    app.emit(
        PassphraseService(app.settings).generate(
            PresetMode(preset) if preset else None,
            count=count,
            dictionary=dictionary,
            overrides=overrides,
        )
    )
