"""Pydantic settings sections with code-baked defaults.

Sparse TOML contract: defaults baked here, xkpass.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from xkpass.domain.presets import DEFAULT_PRESET

# --- xkpass.toml sections ---


class DictionaryConfig(BaseModel):
    """[dictionary] section."""

    model_config = {"frozen": True}

    # None selects the bundled word list.
    path: str | None = None


class GenerateConfig(BaseModel):
    """[generate] section."""

    model_config = {"frozen": True}

    preset: str = DEFAULT_PRESET
    count: int = Field(default=1, ge=1)
    min_entropy: float = 52.0
