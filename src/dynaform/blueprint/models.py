"""
Blueprint Model
Typed, immutable representation of a form schema: blocks -> rows -> columns -> elements.

Wire documents tag blocks and elements with ``type``; ``kind`` is accepted as
an alias. Kinds this version does not know parse into explicit ``Unknown*``
variants so that newer documents still load.
"""

import re
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator
from pydantic_core import PydanticCustomError


# Error type raised for malformed regular expressions
INVALID_REGEXP = "invalid_regexp"

# Length rule operators
OPERATOR_GT = "gt"
OPERATOR_GTE = "gte"


class BlueprintNode(BaseModel):
    """Base for every blueprint node: frozen, tolerant of extra keys."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


def _kind_field(kind: str) -> Any:
    return Field(
        default=kind,
        validation_alias=AliasChoices("type", "kind"),
        serialization_alias="type",
    )


def _unknown_kind_field() -> Any:
    return Field(
        default=None,
        validation_alias=AliasChoices("type", "kind"),
        serialization_alias="type",
    )


def _kind_tag(value: Any, known: frozenset[str]) -> str:
    if isinstance(value, dict):
        tag = value.get("type", value.get("kind"))
    else:
        tag = getattr(value, "kind", None)
    return tag if isinstance(tag, str) and tag in known else "unknown"


# ============================================================================
# Rules
# ============================================================================


class LengthRule(BlueprintNode):
    """String length bound. Operators other than gt/gte are inert."""

    type: Literal["length"] = "length"
    operator: str
    value: int


class PatternRule(BlueprintNode):
    """Regular-expression match (search semantics)."""

    type: Literal["pattern"] = "pattern"
    regexp: str

    @field_validator("regexp")
    @classmethod
    def validate_regexp(cls, v: str) -> str:
        """Reject expressions that do not compile; this is an authoring bug."""
        try:
            re.compile(v)
        except re.error as e:
            raise PydanticCustomError(
                INVALID_REGEXP,
                "Invalid regular expression {regexp!r}: {reason}",
                {"regexp": v, "reason": str(e)},
            ) from e
        return v


class UnknownRule(BlueprintNode):
    """Rule of a type this engine does not evaluate."""

    type: Any = None


_RULE_TYPES = frozenset({"length", "pattern"})


def _rule_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    return tag if isinstance(tag, str) and tag in _RULE_TYPES else "unknown"


Rule = Annotated[
    Union[
        Annotated[LengthRule, Tag("length")],
        Annotated[PatternRule, Tag("pattern")],
        Annotated[UnknownRule, Tag("unknown")],
    ],
    Discriminator(_rule_tag),
]


# ============================================================================
# Elements
# ============================================================================


class Heading(BlueprintNode):
    kind: Literal["heading"] = _kind_field("heading")
    value: str = ""


class Paragraph(BlueprintNode):
    kind: Literal["paragraph"] = _kind_field("paragraph")
    value: str = ""


class FieldElement(BlueprintNode):
    """Element that owns a slot in the form state."""

    name: str
    label: str = ""
    required: bool = False

    @property
    def default_value(self) -> str | bool:
        """Value of the field before the user touches it."""
        return ""


class TextInput(FieldElement):
    kind: Literal["input"] = _kind_field("input")
    help: str | None = None
    validator: tuple[Rule, ...] | None = None


class PasswordInput(FieldElement):
    kind: Literal["password"] = _kind_field("password")
    help: str | None = None
    validator: tuple[Rule, ...] | None = None


class Checkbox(FieldElement):
    """Boolean field. Booleans never go through the rule validator."""

    kind: Literal["checkbox"] = _kind_field("checkbox")

    @property
    def default_value(self) -> bool:
        return False


class SubmitButton(BlueprintNode):
    kind: Literal["submit"] = _kind_field("submit")
    label: str = ""


class UnknownElement(BlueprintNode):
    """Element kind this engine does not render."""

    kind: Any = _unknown_kind_field()


TextField = Union[TextInput, PasswordInput]

_ELEMENT_KINDS = frozenset({"heading", "paragraph", "input", "password", "checkbox", "submit"})


def _element_tag(value: Any) -> str:
    return _kind_tag(value, _ELEMENT_KINDS)


Element = Annotated[
    Union[
        Annotated[Heading, Tag("heading")],
        Annotated[Paragraph, Tag("paragraph")],
        Annotated[TextInput, Tag("input")],
        Annotated[PasswordInput, Tag("password")],
        Annotated[Checkbox, Tag("checkbox")],
        Annotated[SubmitButton, Tag("submit")],
        Annotated[UnknownElement, Tag("unknown")],
    ],
    Discriminator(_element_tag),
]


# ============================================================================
# Layout
# ============================================================================


class Column(BlueprintNode):
    """Column inside a row; ``size`` is a relative flex weight."""

    size: float = 1
    elements: tuple[Element, ...] = ()


class ElementBlock(BlueprintNode):
    """Flat element list. Rendered, but not validated on submit."""

    kind: Literal["block"] = _kind_field("block")
    elements: tuple[Element, ...] = ()


class RowBlock(BlueprintNode):
    """Grid row of columns. The only container validated on submit."""

    kind: Literal["row"] = _kind_field("row")
    columns: tuple[Column, ...] = ()


class UnknownBlock(BlueprintNode):
    kind: Any = _unknown_kind_field()


_BLOCK_KINDS = frozenset({"block", "row"})


def _block_tag(value: Any) -> str:
    return _kind_tag(value, _BLOCK_KINDS)


Block = Annotated[
    Union[
        Annotated[ElementBlock, Tag("block")],
        Annotated[RowBlock, Tag("row")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]


class Blueprint(BlueprintNode):
    """Root of a form schema document."""

    blueprint: tuple[Block, ...]


__all__ = [
    "INVALID_REGEXP",
    "OPERATOR_GT",
    "OPERATOR_GTE",
    "BlueprintNode",
    "LengthRule",
    "PatternRule",
    "UnknownRule",
    "Rule",
    "Heading",
    "Paragraph",
    "FieldElement",
    "TextInput",
    "PasswordInput",
    "Checkbox",
    "SubmitButton",
    "UnknownElement",
    "TextField",
    "Element",
    "Column",
    "ElementBlock",
    "RowBlock",
    "UnknownBlock",
    "Block",
    "Blueprint",
]
