"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import ConfigFetchError, ConfigurationError, FormEngineError, SubmissionError
from .logging_config import configure_logging, get_logger, LogContext
from .json import decode_json, safe_json_dumps, JSONParseError


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "FormEngineError",
    "ConfigFetchError",
    "ConfigurationError",
    "SubmissionError",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json",
    "safe_json_dumps",
    "JSONParseError",
    # DI
    "create_container",
]
