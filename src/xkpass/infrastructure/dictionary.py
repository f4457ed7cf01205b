"""Word list loading.

A dictionary is a UTF-8 text file with one candidate word per line.
When no path is given the bundled list shipped in ``xkpass/data`` is used.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from xkpass.domain.errors import DictionaryUnavailable

logger = logging.getLogger(__name__)

BUNDLED_WORDLIST = "words.txt"


def read_words(path: Path) -> list[str]:
    """Read every non-blank line of *path* as a raw word.

    Raises:
        DictionaryUnavailable: If the file is missing, unreadable or not UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read dictionary {path}: {exc}"
        raise DictionaryUnavailable(msg, path=str(path)) from exc
    words = [line.strip() for line in text.splitlines() if line.strip()]
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def load_bundled_words() -> list[str]:
    """Read the word list packaged with xkpass."""
    source = resources.files("xkpass.data").joinpath(BUNDLED_WORDLIST)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Bundled dictionary is unavailable: {exc}"
        raise DictionaryUnavailable(msg) from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_words(path: Path | str | None = None) -> list[str]:
    """Load a word list from *path*, or the bundled list when None."""
    if path is None:
        return load_bundled_words()
    return read_words(Path(path).expanduser())
