"""Random source contract and the default cryptographically secure source."""

from __future__ import annotations

import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Uniform integers over a half-open range ``[low, high)``."""

    def next_int(self, low: int, high: int) -> int: ...


class SecureRandom:
    """RandomSource backed by :mod:`secrets` (OS CSPRNG).

    Stateless, so a single instance is safe to share across threads.
    """

    def next_int(self, low: int, high: int) -> int:
        if low >= high:
            msg = f"Empty random range [{low}, {high})"
            raise ValueError(msg)
        return low + secrets.randbelow(high - low)
