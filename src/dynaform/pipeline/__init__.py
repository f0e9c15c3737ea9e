"""
Submission pipeline and its outcomes
"""

from .outcomes import (
    Outcome,
    SubmitFailure,
    SubmitPhase,
    Submitted,
    SubmissionFailed,
    SubmissionInProgress,
    ValidationFailed,
)
from .presenter import FormPresenter, NullPresenter
from .submission import SubmissionPipeline

__all__ = [
    "Outcome",
    "SubmitFailure",
    "SubmitPhase",
    "Submitted",
    "SubmissionFailed",
    "SubmissionInProgress",
    "ValidationFailed",
    "FormPresenter",
    "NullPresenter",
    "SubmissionPipeline",
]
