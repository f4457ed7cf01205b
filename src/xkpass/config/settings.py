"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``XKPASS_*`` prefix (``XKPASS_GENERATE__PRESET=WiFi``)
  3. TOML file: ``xkpass.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from xkpass.config.discovery import locate_config
from xkpass.config.models import DictionaryConfig, GenerateConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``xkpass.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class XkSettings(BaseSettings):
    """Settings for the xkpass CLI, frozen after construction.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "XKPASS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    generate: GenerateConfig = Field(default_factory=GenerateConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> XkSettings:
        """Construct settings from a CLI invocation.

        The TOML file comes from :func:`locate_config` (*config_path*,
        ``$XKPASS_CONFIG``, then a walk-up from *search_from*). CLI flags are
        the highest-priority overrides.
        """
        toml_path = locate_config(config_path, search_from)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
