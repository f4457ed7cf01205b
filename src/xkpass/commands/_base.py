"""Click base classes with an ``--examples`` flag.

Examples are ``(command line, what it produces)`` pairs, printed as an
aligned two-column list so ``--help`` can stay short.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

Example = tuple[str, str]


def format_examples(examples: Sequence[Example]) -> str:
    """Render example pairs with the descriptions aligned as comments."""
    width = max(len(command) for command, _ in examples)
    lines = []
    for command, note in examples:
        lines.append(f"  {command:<{width}}  # {note}" if note else f"  {command}")
    return "\n".join(lines)


def _examples_option(examples: Sequence[Example]) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(format_examples(examples))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option(self.examples))


class XkCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=[(command, note), ...]``."""


class XkGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples``; its subcommands default to :class:`XkCommand`."""

    command_class = XkCommand
