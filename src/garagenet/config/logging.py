"""structlog setup for garagenet.

Everything goes to stderr, either as console lines or (``--log-json``)
one JSON object per line.  Library modules use plain
``logging.getLogger(__name__)``; their records pass through the same
structlog processors as native structlog calls.

Drafts carry phone numbers, emails and session tokens, so structured
values are masked by :func:`redact_sensitive` before rendering, including
values nested inside payload dicts and lists.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SENSITIVE_KEYS = frozenset({"token", "id_token", "api_key", "authorization", "email", "phone"})

MASK = "***"

# Request-level chatter from the HTTP stack; garagenet logs its own outcome.
_QUIET_LIBRARIES = ("httpx", "httpcore")


def _mask(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: MASK if k.lower() in SENSITIVE_KEYS else _mask(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_mask(item) for item in value]
    return value


def redact_sensitive(
    _logger: object, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Mask credentials and contact details passed as structured fields."""
    for key, value in event_dict.items():
        if key == "event":
            continue
        event_dict[key] = MASK if key.lower() in SENSITIVE_KEYS else _mask(value)
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_sensitive,
    ]


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to stderr.

    Args:
        verbose: DEBUG for the ``garagenet`` loggers; otherwise WARNING.
        log_json: JSON lines instead of console lines.

    Safe to call more than once; the root handler is replaced each time.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger("garagenet").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
