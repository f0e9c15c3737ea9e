"""Error taxonomy for the form engine.

Validation problems are never raised: they travel as ErrorState data.
These exceptions cover the failures a presenter must tell apart from bad
user input.
"""


class FormEngineError(Exception):
    """Base class for form engine failures."""


class ConfigFetchError(FormEngineError):
    """Blueprint could not be retrieved, decoded or matched to the schema."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class ConfigurationError(FormEngineError):
    """Blueprint authoring bug, e.g. a malformed regular expression."""


class SubmissionError(FormEngineError):
    """POST of the form state failed (transport, timeout or non-2xx)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
