"""
Rule Validator
Evaluates a field's declared rules against a candidate string value.

Rules run in declaration order and evaluation stops at the first failure,
so a field reports at most one message per pass. Rule types this engine
does not know are skipped.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from ..blueprint.models import (
    OPERATOR_GT,
    OPERATOR_GTE,
    LengthRule,
    PatternRule,
    TextField,
)
from ..core.errors import ConfigurationError


@dataclass(frozen=True)
class RuleFailure:
    """A failed rule and the message shown for it."""

    rule: str
    message: str


@lru_cache(maxsize=256)
def compile_pattern(regexp: str) -> re.Pattern[str]:
    """
    Compile a rule's regular expression.

    Raises:
        ConfigurationError: If the expression does not compile
    """
    try:
        return re.compile(regexp)
    except re.error as e:
        raise ConfigurationError(f"Invalid regular expression {regexp!r}: {e}") from e


def _check_length(rule: LengthRule, label: str, value: str) -> str | None:
    if rule.operator == OPERATOR_GT and len(value) <= rule.value:
        return f"{label} field must be longer than {rule.value} characters"
    if rule.operator == OPERATOR_GTE and len(value) < rule.value:
        return f"{label} field must be at least {rule.value} characters long"
    return None


def _check_pattern(rule: PatternRule, label: str, value: str) -> str | None:
    if compile_pattern(rule.regexp).search(value) is None:
        return f"Invalid format for {label} field"
    return None


def first_failure(element: TextField, value: str) -> RuleFailure | None:
    """
    Return the first failing rule of ``element`` for ``value``.

    Args:
        element: Text field carrying a ``validator`` sequence
        value: Current string value of the field

    Returns:
        RuleFailure, or None when every known rule passes
    """
    for rule in element.validator or ():
        message = None
        if isinstance(rule, LengthRule):
            message = _check_length(rule, element.label, value)
        elif isinstance(rule, PatternRule):
            message = _check_pattern(rule, element.label, value)

        if message is not None:
            return RuleFailure(rule=rule.type, message=message)

    return None


def validate(element: TextField, value: str) -> str | None:
    """Return the error message for ``value``, or None when it is valid."""
    failure = first_failure(element, value)
    return failure.message if failure else None
