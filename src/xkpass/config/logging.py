"""structlog configuration for xkpass.

Everything goes to stderr so passwords on stdout stay pipeable, and
password values are masked before rendering, whichever logger emitted them.
Human mode uses the console renderer; ``--log-json`` emits JSON lines.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

LOGGER_NAME = "xkpass"
REDACTED = "<redacted>"

# Event keys whose values are generated secrets.
SECRET_KEYS = frozenset({"password", "passwords"})


def redact_secrets(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask generated passwords in a log event."""
    for key in SECRET_KEYS & event_dict.keys():
        event_dict[key] = REDACTED
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: DEBUG for the ``xkpass`` loggers instead of WARNING.
            Other libraries stay at WARNING either way.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
