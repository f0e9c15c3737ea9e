"""
Form Session
Controller for one mounted form: blueprint, state store and submit pipeline.
Create one per form; sessions share nothing, so several can coexist.
"""

import uuid
from collections.abc import Mapping

from returns.result import Result

from .blueprint.loader import BlueprintLoader
from .blueprint.models import Blueprint, Checkbox
from .blueprint.traversal import find_field
from .core.logging_config import LogContext, get_logger
from .pipeline.outcomes import SubmitFailure, Submitted, SubmitPhase
from .pipeline.presenter import FormPresenter
from .pipeline.submission import SubmissionPipeline, Submitter
from .render.descriptors import BlockDescriptor, render_tree
from .state.store import FieldValue, FormStateStore

logger = get_logger(__name__)


class FormSession:
    """A mounted form instance."""

    def __init__(
        self,
        blueprint: Blueprint,
        client: Submitter,
        presenter: FormPresenter | None = None,
        form_id: str | None = None,
    ) -> None:
        self.blueprint = blueprint
        self.form_id = form_id or uuid.uuid4().hex[:8]
        self.store = FormStateStore()
        self.pipeline = SubmissionPipeline(client, self.store, presenter)
        logger.debug("session_mounted", form_id=self.form_id)

    @classmethod
    def load(
        cls,
        loader: BlueprintLoader,
        client: Submitter,
        presenter: FormPresenter | None = None,
    ) -> "FormSession":
        """Mount a form from the loader's blueprint (fetched on first use)."""
        return cls(loader.load(), client, presenter)

    @property
    def errors(self) -> Mapping[str, str]:
        return self.store.errors

    @property
    def values(self) -> Mapping[str, FieldValue]:
        return self.store.values

    @property
    def phase(self) -> SubmitPhase:
        return self.pipeline.phase

    def set_value(self, name: str, value: FieldValue) -> None:
        """Field-change event from the renderer."""
        self.store.set_value(name, value)

    def get_value(self, name: str) -> FieldValue:
        """Current value, defaulting to False for checkboxes and '' otherwise."""
        element = find_field(self.blueprint, name)
        default = element.default_value if element is not None else ""
        return self.store.get_value(name, default)

    def toggle(self, name: str) -> bool:
        """Checkbox click: flip the stored boolean and return the new value."""
        element = find_field(self.blueprint, name)
        if element is not None and not isinstance(element, Checkbox):
            raise ValueError(f"Field {name!r} is not a checkbox")
        value = not self.store.get_value(name, False)
        self.store.set_value(name, value)
        return value

    def render(self) -> tuple[BlockDescriptor, ...]:
        """Render tree for the presentation layer."""
        return render_tree(self.blueprint, self.store)

    def submit(self) -> Result[Submitted, SubmitFailure]:
        """User pressed the submit element."""
        with LogContext(form_id=self.form_id):
            return self.pipeline.submit(self.blueprint)
