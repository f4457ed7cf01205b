"""Rich Console factory and theme for xkpass output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

XK_THEME = Theme(
    {
        "xk.ok": "bold green",
        "xk.error": "bold red",
        "xk.warning": "bold yellow",
        "xk.op": "bold cyan",
        "xk.key": "dim",
        "xk.password": "bold",
        "xk.preset": "bold blue",
        "xk.entropy": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Emoji codes and highlighting are off: passwords may contain ``:``.
    """
    return Console(
        file=StringIO(),
        theme=XK_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
