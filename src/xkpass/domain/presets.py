"""Named configuration presets (after xkpasswd.net).

The table is built once at import and exposed read-only. A preset replaces
the whole configuration; it is never merged with custom options.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from xkpass.domain.errors import InvalidConfiguration
from xkpass.domain.models import (
    DEFAULT_SYMBOLS,
    WEB_SEPARATORS,
    WEB_SYMBOLS,
    CustomMode,
    Mode,
    PassphraseConfig,
    PresetMode,
    make_config,
)
from xkpass.domain.types import CasePolicy

DEFAULT_PRESET = "Default"

PRESETS: Mapping[str, PassphraseConfig] = MappingProxyType(
    {
        "AppleID": PassphraseConfig(
            word_count=3,
            min_length=5,
            max_length=7,
            case=CasePolicy.RANDOM_UPPER_LOWER,
            separators="-:.,",
            digits_before=2,
            digits_after=2,
            symbols="!?@&",
            symbols_before=1,
            symbols_after=1,
        ),
        "Default": PassphraseConfig(
            word_count=3,
            min_length=4,
            max_length=8,
            case=CasePolicy.EVERY_OTHER_UPPER_LOWER,
            separators=DEFAULT_SYMBOLS,
            digits_before=2,
            digits_after=2,
            symbols=DEFAULT_SYMBOLS,
            symbols_before=2,
            symbols_after=2,
        ),
        "NTLM": PassphraseConfig(
            word_count=3,
            min_length=5,
            max_length=7,
            case=CasePolicy.FIRST_LETTER_UPPER,
            separators=WEB_SEPARATORS,
            digits_before=1,
            digits_after=0,
            symbols=WEB_SYMBOLS,
            symbols_before=0,
            symbols_after=1,
        ),
        "SecurityQ": PassphraseConfig(
            word_count=6,
            min_length=4,
            max_length=8,
            case=CasePolicy.NONE,
            separators=" ",
            digits_before=0,
            digits_after=0,
            symbols=".!?",
            symbols_before=0,
            symbols_after=1,
        ),
        "Web16": PassphraseConfig(
            word_count=3,
            min_length=4,
            max_length=4,
            case=CasePolicy.RANDOM_UPPER_LOWER,
            separators=WEB_SEPARATORS,
            digits_before=0,
            digits_after=0,
            symbols=WEB_SYMBOLS,
            symbols_before=1,
            symbols_after=1,
        ),
        "Web32": PassphraseConfig(
            word_count=4,
            min_length=4,
            max_length=5,
            case=CasePolicy.EVERY_OTHER_UPPER_LOWER,
            separators=WEB_SEPARATORS,
            digits_before=2,
            digits_after=2,
            symbols=WEB_SYMBOLS,
            symbols_before=1,
            symbols_after=1,
        ),
        "WiFi": PassphraseConfig(
            word_count=6,
            min_length=4,
            max_length=8,
            case=CasePolicy.RANDOM_UPPER_LOWER,
            separators=WEB_SEPARATORS,
            digits_before=4,
            digits_after=4,
            symbols=WEB_SYMBOLS,
            symbols_before=0,
            symbols_after=0,
            pad_to_length=63,
        ),
        "XKCD": PassphraseConfig(
            word_count=4,
            min_length=4,
            max_length=8,
            case=CasePolicy.RANDOM_UPPER_LOWER,
            separators="-",
            digits_before=0,
            digits_after=0,
            symbols="",
            symbols_before=0,
            symbols_after=0,
        ),
    }
)

_BY_LOWER_NAME: Mapping[str, str] = MappingProxyType({name.lower(): name for name in PRESETS})


def canonical_preset_name(name: str) -> str:
    """Map *name* (any casing) to its canonical preset name.

    Raises:
        InvalidConfiguration: If no preset matches.
    """
    canonical = _BY_LOWER_NAME.get(name.strip().lower())
    if canonical is None:
        msg = f"Unknown preset '{name}'. Available: {', '.join(PRESETS)}"
        raise InvalidConfiguration(msg, preset=name, available=list(PRESETS))
    return canonical


def get_preset(name: str) -> PassphraseConfig:
    """Return the full configuration for preset *name*."""
    return PRESETS[canonical_preset_name(name)]


def resolve_mode(mode: Mode) -> PassphraseConfig:
    """Resolve a generation mode to one concrete configuration.

    Custom configurations are validated again, so any bad custom input
    surfaces as :class:`InvalidConfiguration`.

    Raises:
        InvalidConfiguration: Unknown preset, invalid custom configuration
            or an unsupported mode.
    """
    match mode:
        case PresetMode(name=name):
            return get_preset(name)
        case CustomMode(config=config):
            # model_copy(update=...) and model_construct() skip validation.
            return make_config(config)
    msg = f"Unsupported mode: {mode!r}"
    raise InvalidConfiguration(msg)
