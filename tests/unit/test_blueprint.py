"""Tests for the blueprint model and parser."""

import json

import pytest

from dynaform.blueprint import BlueprintParser, parse_blueprint
from dynaform.blueprint.models import (
    Checkbox,
    ElementBlock,
    Heading,
    LengthRule,
    PasswordInput,
    PatternRule,
    RowBlock,
    SubmitButton,
    TextInput,
    UnknownBlock,
    UnknownElement,
    UnknownRule,
)
from dynaform.core.errors import ConfigFetchError, ConfigurationError


def _row(*elements):
    return {"blueprint": [{"type": "row", "columns": [{"size": 1, "elements": list(elements)}]}]}


@pytest.mark.unit
def test_parse_registration_structure(registration_blueprint):
    """Blocks, columns and elements keep document order and types."""
    blocks = registration_blueprint.blueprint

    assert isinstance(blocks[0], ElementBlock)
    assert isinstance(blocks[0].elements[0], Heading)
    assert blocks[0].elements[0].value == "Create account"

    row = blocks[1]
    assert isinstance(row, RowBlock)
    assert [c.size for c in row.columns] == [2, 1]

    email, password = row.columns[0].elements
    assert isinstance(email, TextInput)
    assert email.required is True
    assert isinstance(email.validator[0], PatternRule)

    assert isinstance(password, PasswordInput)
    assert password.help == "At least 8 characters"
    assert isinstance(password.validator[0], LengthRule)
    assert password.validator[0].operator == "gte"

    assert isinstance(row.columns[1].elements[0], Checkbox)
    assert isinstance(blocks[2].columns[0].elements[0], SubmitButton)


@pytest.mark.unit
def test_parse_from_json_text(registration_document):
    """Raw JSON text and bytes parse the same as a decoded mapping."""
    text = json.dumps(registration_document)

    assert parse_blueprint(text) == parse_blueprint(registration_document)
    assert parse_blueprint(text.encode("utf-8")) == parse_blueprint(registration_document)


@pytest.mark.unit
def test_kind_alias_accepted():
    """'kind' works as an alias of 'type'."""
    blueprint = parse_blueprint(
        {"blueprint": [{"kind": "row", "columns": [{"elements": [{"kind": "input", "name": "a"}]}]}]}
    )

    element = blueprint.blueprint[0].columns[0].elements[0]
    assert isinstance(element, TextInput)
    assert element.kind == "input"
    assert element.required is False
    assert element.validator is None


@pytest.mark.unit
def test_unknown_kinds_are_kept_as_inert_variants():
    """Unknown blocks, elements and rules load instead of failing."""
    blueprint = parse_blueprint(
        {
            "blueprint": [
                {"type": "carousel", "slides": []},
                {
                    "type": "row",
                    "columns": [
                        {
                            "elements": [
                                {"type": "slider", "name": "volume"},
                                {
                                    "type": "input",
                                    "name": "code",
                                    "validator": [{"type": "checksum", "algorithm": "luhn"}],
                                },
                            ]
                        }
                    ],
                },
            ]
        }
    )

    assert isinstance(blueprint.blueprint[0], UnknownBlock)
    assert blueprint.blueprint[0].kind == "carousel"
    slider, code = blueprint.blueprint[1].columns[0].elements
    assert isinstance(slider, UnknownElement)
    assert isinstance(code.validator[0], UnknownRule)


@pytest.mark.unit
def test_blueprint_is_immutable(email_blueprint):
    """Loaded blueprints cannot be mutated."""
    element = email_blueprint.blueprint[0].columns[0].elements[0]

    with pytest.raises(Exception):
        element.required = False


@pytest.mark.unit
def test_invalid_regexp_is_configuration_error():
    """A malformed pattern is an authoring bug, raised at load time."""
    document = _row(
        {"type": "input", "name": "zip", "label": "Zip", "validator": [{"type": "pattern", "regexp": "([0-9"}]}
    )

    with pytest.raises(ConfigurationError) as exc:
        parse_blueprint(document)

    assert "([0-9" in str(exc.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [
        "",
        "not json",
        "[1, 2, 3]",
        '{"title": "no blueprint key"}',
        '{"blueprint": [{"type": "row", "columns": [{"elements": [{"type": "input"}]}]}]}',
    ],
)
def test_unusable_documents_raise_config_fetch_error(content):
    """Empty, malformed or schema-violating documents are fetch failures."""
    with pytest.raises(ConfigFetchError):
        BlueprintParser().parse(content)


@pytest.mark.unit
def test_checkbox_ignores_validator_key():
    """Booleans never go through rule validation."""
    blueprint = parse_blueprint(
        _row({"type": "checkbox", "name": "ok", "validator": [{"type": "length", "operator": "gt", "value": 3}]})
    )

    checkbox = blueprint.blueprint[0].columns[0].elements[0]
    assert isinstance(checkbox, Checkbox)
    assert not hasattr(checkbox, "validator")
    assert checkbox.default_value is False


@pytest.mark.unit
def test_duplicate_names_still_parse():
    """Duplicate names are tolerated (they share one state slot)."""
    blueprint = parse_blueprint(_row({"type": "input", "name": "a"}, {"type": "password", "name": "a"}))

    assert len(blueprint.blueprint[0].columns[0].elements) == 2
