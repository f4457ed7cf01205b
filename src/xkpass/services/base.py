"""BaseService: shared foundation for xkpass services.

Every service receives the resolved :class:`XkSettings` at construction
time (or None, for library use with code defaults).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xkpass.services.result import Op, ServiceError, ServiceResult

if TYPE_CHECKING:
    from xkpass.config.settings import XkSettings
    from xkpass.domain.errors import PassphraseError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PassphraseService(BaseService):
            def generate(self, mode: Mode) -> ServiceResult:
                try:
                    ...
                except PassphraseError as exc:
                    return self._failure("generate", exc)
    """

    def __init__(self, settings: XkSettings | None = None) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: Op, exc: PassphraseError) -> ServiceResult:
        """Convert an engine exception into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc.code)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
