"""Word filtering and sampling.

Filtering is a whole-token regex match over word characters, so entries
with apostrophes, hyphens or inner spaces never qualify.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from xkpass.domain.errors import InsufficientDictionary
from xkpass.domain.randomness import RandomSource


def length_pattern(min_length: int | None, max_length: int | None) -> re.Pattern[str]:
    """Build the whole-token pattern for the closed range ``[min, max]``.

    No bounds matches any non-empty token; a missing maximum is open-ended
    and a missing minimum defaults to 1.
    """
    if min_length is None and max_length is None:
        return re.compile(r"\w+")
    low = max(min_length or 1, 1)
    high = "" if max_length is None else str(max_length)
    return re.compile(rf"\w{{{low},{high}}}")


def filter_words(
    words: Iterable[str],
    min_length: int | None = None,
    max_length: int | None = None,
) -> list[str]:
    """Return every entry whose length falls within ``[min_length, max_length]``.

    Order is preserved; an empty result is not an error here.
    """
    pattern = length_pattern(min_length, max_length)
    return [word for word in (w.strip() for w in words) if pattern.fullmatch(word)]


def sample_words(candidates: list[str], count: int, random: RandomSource) -> list[str]:
    """Draw *count* words uniformly, with replacement, in draw order.

    Raises:
        InsufficientDictionary: If there are no candidates or fewer than *count*.
    """
    if not candidates or len(candidates) < count:
        msg = (
            f"Dictionary has {len(candidates)} matching word(s); "
            f"at least {max(count, 1)} required"
        )
        raise InsufficientDictionary(msg, candidates=len(candidates), required=count)
    return [candidates[random.next_int(0, len(candidates))] for _ in range(count)]
