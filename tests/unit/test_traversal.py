"""Tests for blueprint traversal and whole-form validation."""

import pytest

from dynaform.blueprint import iter_elements, iter_field_elements, iter_validated_elements
from dynaform.blueprint.traversal import find_field
from dynaform.validation import collect_errors, collect_failures


@pytest.mark.unit
def test_iter_elements_document_order(registration_blueprint):
    kinds = [e.kind for e in iter_elements(registration_blueprint)]

    assert kinds == ["heading", "paragraph", "input", "password", "checkbox", "checkbox", "submit"]


@pytest.mark.unit
def test_validated_elements_skip_block_containers(block_only_required_blueprint):
    """Only row blocks take part in validation."""
    assert [e.name for e in iter_field_elements(block_only_required_blueprint)] == ["nickname"]
    assert list(iter_validated_elements(block_only_required_blueprint)) == []


@pytest.mark.unit
def test_find_field(registration_blueprint):
    assert find_field(registration_blueprint, "terms").label == "I accept the terms"
    assert find_field(registration_blueprint, "missing") is None


@pytest.mark.unit
def test_required_error_uses_label(email_blueprint):
    assert collect_errors(email_blueprint, {}) == {"email": "Email is required"}


@pytest.mark.unit
def test_required_overrides_validator_message(registration_blueprint):
    """Empty value with a rule: the required message wins."""
    errors = collect_errors(registration_blueprint, {"terms": True})

    assert errors["email"] == "Email is required"
    assert errors["password"] == "Password is required"
    assert "terms" not in errors
    assert "newsletter" not in errors


@pytest.mark.unit
def test_rule_errors_when_value_present(registration_blueprint):
    failures = collect_failures(
        registration_blueprint, {"email": "not-an-email", "password": "short", "terms": True}
    )

    assert failures["email"].message == "Invalid format for Email field"
    assert failures["email"].rule == "pattern"
    assert failures["password"].message == "Password field must be at least 8 characters long"
    assert failures["password"].rule == "length"


@pytest.mark.unit
def test_unchecked_required_checkbox(registration_blueprint):
    errors = collect_errors(
        registration_blueprint, {"email": "a@b.com", "password": "long enough", "terms": False}
    )

    assert errors == {"terms": "I accept the terms is required"}


@pytest.mark.unit
def test_bio_length_scenario(bio_blueprint):
    assert collect_errors(bio_blueprint, {"bio": "short"}) == {
        "bio": "Bio field must be at least 10 characters long"
    }
    assert collect_errors(bio_blueprint, {"bio": "exactly ten"}) == {}


@pytest.mark.unit
def test_optional_field_with_rule_validated_when_empty(bio_blueprint):
    """Absent values are checked as the empty string."""
    assert collect_errors(bio_blueprint, {}) == {"bio": "Bio field must be at least 10 characters long"}


@pytest.mark.unit
def test_collect_errors_idempotent(registration_blueprint):
    values = {"email": "bad", "terms": True}

    assert collect_errors(registration_blueprint, values) == collect_errors(registration_blueprint, values)
    assert values == {"email": "bad", "terms": True}
