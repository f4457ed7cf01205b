"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`, one per
service operation. Failed results of either op share :func:`_render_error`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from xkpass.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from xkpass.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: passwords or preset names only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "generate":
        return "\n".join(result.data.get("passwords", []))
    return "\n".join(result.data.get("presets", {}))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="xk.ok")
    line.append(f"  {result.op}", style="xk.op")
    console.print(line)


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    line = Text(f"  {key}: ", style="xk.key")
    line.append(str(value), style=style)
    console.print(line)


# Whitespace characters would render as blank table cells.
_VISIBLE_NAMES = {" ": "<space>", "\t": "<tab>"}


def _describe_charset(chars: str) -> str:
    if not chars:
        return "(none)"
    return "".join(_VISIBLE_NAMES.get(ch, ch) for ch in chars)


def _describe_length(cfg: dict[str, Any]) -> str:
    low, high = cfg.get("min_length"), cfg.get("max_length")
    if low is None and high is None:
        return "any"
    return f"{low if low is not None else 1}-{high if high is not None else ''}"


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "preset", data.get("preset") or "custom", "xk.preset")
    _field(
        console,
        "entropy",
        f"{data.get('entropy_bits')} bits from {data.get('candidates')} candidate words",
        "xk.entropy",
    )
    if verbose:
        for key, value in data.get("config", {}).items():
            if key in ("separators", "symbols"):
                value = _describe_charset(value)
            _field(console, key, value)
    console.print()
    for password in data.get("passwords", []):
        console.print(Text(password, style="xk.password"), soft_wrap=True)


def _render_presets(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    default = result.data.get("default")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Preset", style="xk.preset")
    table.add_column("Words", justify="right")
    table.add_column("Length")
    table.add_column("Case")
    table.add_column("Separators")
    table.add_column("Digits", justify="right")
    table.add_column("Symbols")
    table.add_column("Sym.", justify="right")
    table.add_column("Pad to", justify="right")
    for name, cfg in result.data.get("presets", {}).items():
        label = f"{name} *" if name == default else name
        table.add_row(
            label,
            str(cfg["word_count"]),
            _describe_length(cfg),
            str(cfg["case"]),
            _describe_charset(cfg["separators"]),
            f"{cfg['digits_before']}/{cfg['digits_after']}",
            _describe_charset(cfg["symbols"]),
            f"{cfg['symbols_before']}/{cfg['symbols_after']}",
            str(cfg["pad_to_length"] or "-"),
        )
    console.print(table)
    console.print(Text("* default preset", style="xk.key"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    code = result.error.code if result.error else "UNKNOWN"
    msg = result.error.message if result.error else "Unknown error"
    header = Text("ERROR", style="xk.error")
    header.append(f"  {result.op}", style="xk.op")
    console.print(header)
    console.print(Text(f"  {msg}"))
    if verbose:
        _field(console, "code", code)
        if result.error and result.error.detail:
            for key, value in result.error.detail.items():
                _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "generate": _render_generate,
    "list_presets": _render_presets,
}
