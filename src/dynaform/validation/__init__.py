"""Field rule validation."""

from .rules import RuleFailure, first_failure, validate
from .form import collect_errors, collect_failures

__all__ = ["RuleFailure", "first_failure", "validate", "collect_errors", "collect_failures"]
