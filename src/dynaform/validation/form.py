"""Whole-form validation: traversal plus per-field rules and required checks."""

from collections.abc import Mapping

from ..blueprint.models import Blueprint, PasswordInput, TextInput
from ..blueprint.traversal import iter_validated_elements
from .rules import RuleFailure, first_failure

REQUIRED_RULE = "required"


def collect_failures(
    blueprint: Blueprint, values: Mapping[str, str | bool]
) -> dict[str, RuleFailure]:
    """
    Validate every submitted field against the current values.

    The required check runs after the rules and overwrites their message.
    Pure function: the same inputs always give the same result.

    Args:
        blueprint: Form blueprint
        values: Current form state

    Returns:
        Mapping of field name to its failure
    """
    failures: dict[str, RuleFailure] = {}

    for element in iter_validated_elements(blueprint):
        value = values.get(element.name, element.default_value)

        if isinstance(element, (TextInput, PasswordInput)) and element.validator:
            failure = first_failure(element, value if isinstance(value, str) else "")
            if failure:
                failures[element.name] = failure

        if element.required and not value:
            failures[element.name] = RuleFailure(
                rule=REQUIRED_RULE, message=f"{element.label} is required"
            )

    return failures


def collect_errors(blueprint: Blueprint, values: Mapping[str, str | bool]) -> dict[str, str]:
    """Validate the form and return the ErrorState mapping (name -> message)."""
    return {name: failure.message for name, failure in collect_failures(blueprint, values).items()}
