"""Error taxonomy for passphrase synthesis.

Every error carries a stable ``code`` so the service layer can surface it
as a :class:`~xkpass.services.result.ServiceError` without string matching.
"""

from __future__ import annotations

from typing import Any


class PassphraseError(Exception):
    """Base class for all synthesis failures."""

    code = "PASSPHRASE_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail = detail


class InvalidConfiguration(PassphraseError):
    """Unknown preset or a configuration violating numeric invariants."""

    code = "INVALID_CONFIGURATION"


class DictionaryUnavailable(PassphraseError):
    """The word source cannot be located or read."""

    code = "DICTIONARY_UNAVAILABLE"


class InsufficientDictionary(PassphraseError):
    """Too few candidate words survive length filtering."""

    code = "INSUFFICIENT_DICTIONARY"
