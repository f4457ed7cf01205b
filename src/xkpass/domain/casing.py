"""Case transformation over an ordered word sequence."""

from __future__ import annotations

from collections.abc import Sequence

from xkpass.domain.randomness import RandomSource
from xkpass.domain.types import CasePolicy


def apply_case(
    words: Sequence[str],
    policy: CasePolicy,
    random: RandomSource | None = None,
) -> list[str]:
    """Return a new list with *policy* applied to each word.

    Words are never merged or reordered. Only
    ``RANDOM_UPPER_LOWER`` consumes random values (one bit per word).
    """
    match policy:
        case CasePolicy.FIRST_LETTER_UPPER:
            return [word[:1].upper() + word[1:] for word in words]
        case CasePolicy.RANDOM_UPPER_LOWER:
            if random is None:
                msg = "RANDOM_UPPER_LOWER requires a random source"
                raise ValueError(msg)
            return [word.upper() if random.next_int(0, 2) == 1 else word for word in words]
        case CasePolicy.EVERY_OTHER_UPPER_LOWER:
            return [word.upper() if i % 2 == 1 else word for i, word in enumerate(words)]
        case CasePolicy.LOWER:
            return [word.lower() for word in words]
        case CasePolicy.UPPER:
            return [word.upper() for word in words]
        case _:
            return list(words)
