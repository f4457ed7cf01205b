"""Shared pytest fixtures and test helpers for xkpass tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

# Lengths: 5, 6, 6, 4, 10, 3, 5, 4, 5, 5
WORDS = [
    "apple",
    "banana",
    "cherry",
    "date",
    "elderberry",
    "fig",
    "grape",
    "kiwi",
    "lemon",
    "mango",
]

# WORDS filtered to 4-8 characters, in dictionary order.
WORDS_4_TO_8 = ["apple", "banana", "cherry", "date", "grape", "kiwi", "lemon", "mango"]


class SequenceRandom:
    """RandomSource stub replaying scripted values.

    Every draw must fall inside the requested range, and drawing more
    values than scripted fails the test.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def next_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self._values:
            raise AssertionError(f"Unexpected random draw in [{low}, {high})")
        value = self._values.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        return value

    @property
    def exhausted(self) -> bool:
        return not self._values


class LowRandom:
    """RandomSource stub that always returns the low end of the range."""

    def __init__(self) -> None:
        self.calls = 0

    def next_int(self, low: int, high: int) -> int:
        self.calls += 1
        return low


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def words() -> list[str]:
    return list(WORDS)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """A word list file holding WORDS plus blank and unusable lines."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join([*WORDS, "", "it's", "  "]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config override.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("XKPASS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
