"""
Logging Configuration
structlog on top of stdlib logging. Console output for terminals, JSON lines
(python-json-logger) for log shippers. Everything goes to stderr; stdout
belongs to the form prompts.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, TextIO

import structlog
from pythonjsonlogger import jsonlogger

# Event keys whose values are never written out
REDACTED_KEYS = frozenset({"password", "payload", "values"})
REDACTED = "***"

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def redact_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: mask form input that may carry credentials."""
    for key in REDACTED_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _build_handler(stream: TextIO, json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler


def configure_logging(level: str = "INFO", json_logs: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Log level name; unknown names fall back to INFO
        json_logs: Emit one JSON object per line
        stream: Destination, stderr by default
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    handler = _build_handler(stream or sys.stderr, json_logs)
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    # one INFO line per request otherwise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            redact_secrets,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger bound to a module name."""
    return structlog.get_logger(name)


class LogContext:
    """
    Bind key/value pairs to every log line emitted inside the block.

    Nested contexts restore the outer values on exit.
    """

    def __init__(self, **context: Any) -> None:
        self.context = context
        self._tokens: Mapping[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._tokens = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)
