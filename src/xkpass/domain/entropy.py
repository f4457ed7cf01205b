"""Search-space estimate for a configuration against a filtered dictionary.

Assumes the attacker knows the configuration and the word list, so only
the random choices count: word draws, random casing bits, the separator,
the padding symbol and the padding digits.
"""

from __future__ import annotations

import math

from xkpass.domain.models import PassphraseConfig
from xkpass.domain.types import CasePolicy


def _uses_symbol(config: PassphraseConfig) -> bool:
    slots = config.symbols_before + config.symbols_after
    return bool(config.symbols) and (slots > 0 or config.pad_to_length > 0)


def _uses_separator(config: PassphraseConfig) -> bool:
    gaps = config.word_count - 1
    gaps += int(config.digits_before > 0) + int(config.digits_after > 0)
    return config.uses_separators and gaps > 0


def estimate_entropy(config: PassphraseConfig, candidates: int) -> float:
    """Bits of entropy for one password drawn from *candidates* words."""
    if candidates <= 0:
        return 0.0
    bits = config.word_count * math.log2(candidates)
    if config.case is CasePolicy.RANDOM_UPPER_LOWER:
        bits += config.word_count
    if _uses_separator(config):
        bits += math.log2(len(config.separators))
    if _uses_symbol(config):
        bits += math.log2(len(config.symbols))
    bits += (config.digits_before + config.digits_after) * math.log2(10)
    return round(bits, 2)
