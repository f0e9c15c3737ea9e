"""Form State Store - current field values and per-field error messages."""

from collections.abc import Mapping
from types import MappingProxyType

FieldValue = str | bool


class FormStateStore:
    """
    Owns FormState and ErrorState for one mounted form.

    Both mappings are exposed read-only; every mutation goes through the
    methods below. Setting a value never triggers validation.
    """

    def __init__(self) -> None:
        self._values: dict[str, FieldValue] = {}
        self._errors: dict[str, str] = {}

    @property
    def values(self) -> Mapping[str, FieldValue]:
        """Read-only view of the current values."""
        return MappingProxyType(self._values)

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only view of the current error messages."""
        return MappingProxyType(self._errors)

    def set_value(self, name: str, value: FieldValue) -> None:
        """Replace the value of ``name``; other entries are untouched."""
        self._values[name] = value

    def get_value(self, name: str, default: FieldValue = "") -> FieldValue:
        """Return the value of ``name``, or ``default`` when it was never set."""
        return self._values.get(name, default)

    def get_error(self, name: str) -> str | None:
        return self._errors.get(name)

    def snapshot(self) -> dict[str, FieldValue]:
        """Copy of the values, used as the submission payload."""
        return dict(self._values)

    def replace_errors(self, errors: Mapping[str, str]) -> None:
        """Swap in a freshly computed ErrorState; stale messages are dropped."""
        self._errors = dict(errors)

    def clear_errors(self) -> None:
        self._errors = {}

    def clear(self) -> None:
        """Empty values and errors together (after a successful submission)."""
        self._values, self._errors = {}, {}

    def __len__(self) -> int:
        return len(self._values)
