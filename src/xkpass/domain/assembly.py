"""Password assembly from transformed words plus padding rules.

The separator and padding symbol are drawn once per password by
:func:`draw_fillers` and passed in explicitly; every separator slot and
every symbol slot reuses the same character.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from xkpass.domain.models import MAX_PADDING_DIGITS, PassphraseConfig
from xkpass.domain.randomness import RandomSource

_DIGIT_RANGE = 10**MAX_PADDING_DIGITS


@dataclass(frozen=True)
class Fillers:
    """Characters drawn once and reused across a single password."""

    separator: str = ""
    symbol: str = ""


def draw_fillers(config: PassphraseConfig, random: RandomSource) -> Fillers:
    """Draw the separator (if enabled), then the padding symbol (if any)."""
    separator = ""
    if config.separators:
        separator = config.separators[random.next_int(0, len(config.separators))]
    symbol = ""
    if config.symbols:
        symbol = config.symbols[random.next_int(0, len(config.symbols))]
    return Fillers(separator=separator, symbol=symbol)


def draw_digits(count: int, random: RandomSource) -> str:
    """Leftmost *count* characters of a zero-padded 5-digit draw."""
    value = random.next_int(0, _DIGIT_RANGE)
    return f"{value:0{MAX_PADDING_DIGITS}d}"[:count]


def assemble_parts(
    words: Sequence[str],
    config: PassphraseConfig,
    fillers: Fillers,
    random: RandomSource,
) -> list[str]:
    """Build the ordered fragment list whose concatenation is the password."""
    parts: list[str] = []
    separator = fillers.separator if config.uses_separators else ""

    parts.extend(fillers.symbol for _ in range(config.symbols_before if fillers.symbol else 0))

    if config.digits_before > 0:
        parts.append(draw_digits(config.digits_before, random))
        if separator:
            parts.append(separator)

    for i, word in enumerate(words):
        if i and separator:
            parts.append(separator)
        parts.append(word)

    if config.digits_after > 0:
        if separator:
            parts.append(separator)
        parts.append(draw_digits(config.digits_after, random))

    parts.extend(fillers.symbol for _ in range(config.symbols_after if fillers.symbol else 0))

    if config.pad_to_length > 0 and fillers.symbol:
        shortfall = config.pad_to_length - sum(len(part) for part in parts)
        parts.extend(fillers.symbol for _ in range(max(shortfall, 0)))

    return parts


def assemble(
    words: Sequence[str],
    config: PassphraseConfig,
    fillers: Fillers,
    random: RandomSource,
) -> str:
    """Concatenate :func:`assemble_parts` in emission order."""
    return "".join(assemble_parts(words, config, fillers, random))
