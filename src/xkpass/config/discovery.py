"""Locate the xkpass.toml for a run.

A file named on the command line or in ``$XKPASS_CONFIG`` must exist, since
silently generating with defaults would hide a typo. Otherwise the nearest
xkpass.toml from the working directory upwards is used, if any.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "xkpass.toml"
CONFIG_ENV_VAR = "XKPASS_CONFIG"


def config_search_path(start: Path | None = None) -> list[Path]:
    """Candidate xkpass.toml paths, nearest first."""
    here = (start or Path.cwd()).resolve()
    return [directory / CONFIG_FILENAME for directory in (here, *here.parents)]


def locate_config(explicit: str | Path | None = None, start: Path | None = None) -> Path | None:
    """Return the config file to load, or None to run on defaults.

    Precedence: *explicit* (``--config``), ``$XKPASS_CONFIG``, then the
    walk-up from *start* (default: cwd).

    Raises:
        click.ClickException: A named config file does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named).expanduser()
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise click.ClickException(msg)
        return path
    return next((path for path in config_search_path(start) if path.is_file()), None)
