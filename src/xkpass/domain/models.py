"""Passphrase configuration value object and generation modes.

A :class:`PassphraseConfig` is built once per invocation (from explicit
options or a resolved preset) and never mutated. The two ways of obtaining
one are modelled as a tagged variant: :class:`PresetMode` names a preset,
:class:`CustomMode` carries a ready configuration. The modes never merge.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from xkpass.domain.errors import InvalidConfiguration
from xkpass.domain.types import CasePolicy

# Digit groups are sliced from a single 5-digit draw.
MAX_PADDING_DIGITS = 5

# Symbol alphabets from xkpasswd.net.
DEFAULT_SYMBOLS = "!@$%^&*-_+=:|~?/.;"
WEB_SEPARATORS = "-+=.*_|~,"
WEB_SYMBOLS = "!@$%^&*+=:|~?"

_DISABLED_SENTINEL = "none"

_CASE_KEYS: dict[str, CasePolicy] = {
    re.sub(r"[^a-z]", "", policy.value): policy for policy in CasePolicy
}


def _case_key(value: str) -> str:
    key = re.sub(r"[^a-z]", "", value.lower())
    if key.endswith("case") and key != "case":
        key = key[: -len("case")]
    return key


class PassphraseConfig(BaseModel):
    """All tunable passphrase parameters, frozen after construction.

    Character sets are plain strings: each character is one candidate.
    An empty set (or the sentinel ``"None"``) disables it.

    Build instances with :func:`make_config`, which reports bad values as
    :class:`InvalidConfiguration`. Calling the model directly raises
    pydantic's ``ValidationError`` instead.
    """

    model_config = {"frozen": True}

    word_count: int = Field(default=3, ge=1)
    min_length: int | None = Field(default=4, ge=0)
    max_length: int | None = Field(default=8, ge=1)
    case: CasePolicy = CasePolicy.EVERY_OTHER_UPPER_LOWER
    separators: str = DEFAULT_SYMBOLS
    digits_before: int = Field(default=2, ge=0, le=MAX_PADDING_DIGITS)
    digits_after: int = Field(default=2, ge=0, le=MAX_PADDING_DIGITS)
    symbols: str = DEFAULT_SYMBOLS
    symbols_before: int = Field(default=2, ge=0)
    symbols_after: int = Field(default=2, ge=0)
    pad_to_length: int = Field(default=0, ge=0)

    @field_validator("separators", "symbols", mode="before")
    @classmethod
    def _normalize_charset(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            value = "".join(value)
        if isinstance(value, str):
            if value.strip().lower() == _DISABLED_SENTINEL:
                return ""
            return "".join(dict.fromkeys(value))
        return value

    @field_validator("case", mode="before")
    @classmethod
    def _parse_case(cls, value: Any) -> Any:
        """Accept ``"RandomUpperLowerCase"``-style names alongside enum values."""
        if value is None:
            return CasePolicy.NONE
        if isinstance(value, str) and not isinstance(value, CasePolicy):
            policy = _CASE_KEYS.get(_case_key(value))
            if policy is not None:
                return policy
        return value

    @model_validator(mode="after")
    def _check_length_bounds(self) -> PassphraseConfig:
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            msg = f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            raise ValueError(msg)
        return self

    @property
    def uses_separators(self) -> bool:
        return bool(self.separators)


def make_config(base: PassphraseConfig | None = None, **overrides: Any) -> PassphraseConfig:
    """Validate *overrides* on top of *base* (or the defaults).

    This is the public way to build a :class:`PassphraseConfig`. Passing an
    existing config as *base* with no overrides re-validates it.

    ``None`` overrides mean "not supplied" and keep the base value.

    Raises:
        InvalidConfiguration: If any field violates its constraints.
    """
    data = base.model_dump() if base is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return PassphraseConfig.model_validate(data)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InvalidConfiguration(
            "Invalid configuration: " + "; ".join(problems),
            errors=problems,
        ) from exc


# --- Generation modes ---


@dataclass(frozen=True)
class PresetMode:
    """Generate from a named preset."""

    name: str


@dataclass(frozen=True)
class CustomMode:
    """Generate from an explicit configuration."""

    config: PassphraseConfig


Mode = PresetMode | CustomMode
