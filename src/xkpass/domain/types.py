"""Case policies applied to sampled words."""

from __future__ import annotations

from enum import StrEnum


class CasePolicy(StrEnum):
    """Closed set of casing transformations."""

    NONE = "none"
    FIRST_LETTER_UPPER = "first-letter-upper"
    RANDOM_UPPER_LOWER = "random-upper-lower"
    EVERY_OTHER_UPPER_LOWER = "every-other-upper-lower"
    LOWER = "lower"
    UPPER = "upper"
