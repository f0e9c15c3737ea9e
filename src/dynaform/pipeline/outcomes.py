"""Submission outcomes handed to the presentation layer."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Union


class SubmitPhase(str, Enum):
    """Submit trigger state."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    INVALID = "invalid"  # idle, with validation errors on display


@dataclass(frozen=True)
class Submitted:
    """Form accepted by the endpoint; state has been cleared."""

    status_code: int = 200

    title: ClassVar[str] = "Success"
    message: ClassVar[str] = "Form submitted successfully"
    metric_label: ClassVar[str] = "submitted"


@dataclass(frozen=True)
class ValidationFailed:
    """One or more fields are invalid; nothing was sent."""

    errors: Mapping[str, str] = field(default_factory=dict)

    title: ClassVar[str] = "Validation Error"
    message: ClassVar[str] = "Please correct the errors in the form"
    metric_label: ClassVar[str] = "validation_failed"

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))


@dataclass(frozen=True)
class SubmissionFailed:
    """POST failed (transport or server rejection); input is preserved."""

    reason: str
    status_code: int | None = None

    title: ClassVar[str] = "Error"
    message: ClassVar[str] = "An error occurred while submitting the form"
    metric_label: ClassVar[str] = "submission_failed"


@dataclass(frozen=True)
class SubmissionInProgress:
    """Submit triggered while a previous submit is still in flight."""

    title: ClassVar[str] = "Please wait"
    message: ClassVar[str] = "The form is already being submitted"
    metric_label: ClassVar[str] = "in_progress"


SubmitFailure = Union[ValidationFailed, SubmissionFailed, SubmissionInProgress]
Outcome = Union[Submitted, SubmitFailure]
