"""
Submission Pipeline
Validates the whole form, POSTs it when valid, and resets state on success.

Exactly one POST per submit action; no retries. While a POST is in flight the
trigger is locked and further submits are answered with SubmissionInProgress.
"""

from typing import Any, Protocol

from returns.result import Failure, Result, Success

from ..blueprint.models import Blueprint
from ..core.errors import SubmissionError
from ..core.logging_config import get_logger
from ..monitoring.metrics import metrics_collector
from ..state.store import FormStateStore
from ..validation.form import collect_failures
from .presenter import FormPresenter, NullPresenter
from .outcomes import (
    Outcome,
    Submitted,
    SubmissionFailed,
    SubmissionInProgress,
    SubmitFailure,
    SubmitPhase,
    ValidationFailed,
)

logger = get_logger(__name__)


class Submitter(Protocol):
    def submit(self, payload: dict[str, Any]) -> Any:
        ...


class SubmissionPipeline:
    """Runs submit attempts for one mounted form."""

    def __init__(
        self,
        client: Submitter,
        store: FormStateStore,
        presenter: FormPresenter | None = None,
    ) -> None:
        self.client = client
        self.store = store
        self.presenter = presenter or NullPresenter()
        self._phase = SubmitPhase.IDLE

    @property
    def phase(self) -> SubmitPhase:
        return self._phase

    @property
    def can_submit(self) -> bool:
        """False while a submission is in flight (disable the trigger)."""
        return self._phase is not SubmitPhase.SUBMITTING

    def submit(self, blueprint: Blueprint) -> Result[Submitted, SubmitFailure]:
        """
        Validate and submit the form.

        Args:
            blueprint: Blueprint of the mounted form

        Returns:
            Success(Submitted) or Failure(ValidationFailed | SubmissionFailed | SubmissionInProgress)

        Raises:
            ConfigurationError: If a rule turns out to be malformed at first use
        """
        if self._phase is SubmitPhase.SUBMITTING:
            logger.warning("submit_in_progress")
            return self._report(SubmissionInProgress())

        previous = self._phase
        self._phase = SubmitPhase.SUBMITTING
        try:
            outcome = self._run(blueprint)
        except BaseException:
            self._phase = previous
            raise

        self._phase = SubmitPhase.INVALID if isinstance(outcome, ValidationFailed) else SubmitPhase.IDLE
        return self._report(outcome)

    def _run(self, blueprint: Blueprint) -> Outcome:
        failures = collect_failures(blueprint, self.store.values)
        if failures:
            errors = {name: failure.message for name, failure in failures.items()}
            self.store.replace_errors(errors)
            for failure in failures.values():
                metrics_collector.record_field_error(failure.rule)
            logger.info("submit_validation_failed", fields=sorted(errors))
            return ValidationFailed(errors)

        self.store.clear_errors()
        payload = self.store.snapshot()

        try:
            with metrics_collector.measure_duration(metrics_collector.submit_duration.observe):
                response = self.client.submit(payload)
        except SubmissionError as e:
            logger.warning("submit_failed", error=str(e), status=e.status_code)
            return SubmissionFailed(reason=str(e), status_code=e.status_code)

        self.store.clear()
        self.presenter.dismiss_focus()
        logger.info("submitted", fields=len(payload))
        return Submitted(status_code=getattr(response, "status_code", 200))

    def _report(self, outcome: Outcome) -> Result[Submitted, SubmitFailure]:
        metrics_collector.record_submission(outcome.metric_label)
        self.presenter.show_outcome(outcome)
        if isinstance(outcome, Submitted):
            return Success(outcome)
        return Failure(outcome)
