"""
dynaform
Schema-driven form engine: a JSON blueprint describes the form, its rules
and its submission target.
"""

from .blueprint import Blueprint, BlueprintLoader, parse_blueprint
from .clients import FormClient
from .core.errors import ConfigFetchError, ConfigurationError, FormEngineError, SubmissionError
from .pipeline import (
    SubmissionFailed,
    SubmissionInProgress,
    Submitted,
    SubmitPhase,
    ValidationFailed,
)
from .session import FormSession

__version__ = "0.1.0"

__all__ = [
    "Blueprint",
    "BlueprintLoader",
    "parse_blueprint",
    "FormClient",
    "FormSession",
    "FormEngineError",
    "ConfigFetchError",
    "ConfigurationError",
    "SubmissionError",
    "SubmitPhase",
    "Submitted",
    "ValidationFailed",
    "SubmissionFailed",
    "SubmissionInProgress",
]
