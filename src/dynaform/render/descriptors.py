"""
Render Descriptors
Plain data a presentation layer maps onto concrete widgets. No styling.
"""

from dataclasses import dataclass

from ..blueprint.models import (
    Blueprint,
    Checkbox,
    ElementBlock,
    FieldElement,
    Heading,
    Paragraph,
    PasswordInput,
    RowBlock,
    SubmitButton,
    TextInput,
)
from ..state.store import FieldValue, FormStateStore


@dataclass(frozen=True)
class ElementDescriptor:
    """
    One renderable element.

    Display-only kinds (heading, paragraph) carry their text in ``label``;
    submit carries its caption there.
    """

    kind: str
    label: str = ""
    name: str | None = None
    value: FieldValue | None = None
    error: str | None = None
    required: bool = False
    help: str | None = None
    masked: bool = False


@dataclass(frozen=True)
class ColumnDescriptor:
    size: float
    elements: tuple[ElementDescriptor, ...]


@dataclass(frozen=True)
class BlockDescriptor:
    kind: str
    elements: tuple[ElementDescriptor, ...] = ()
    columns: tuple[ColumnDescriptor, ...] = ()

    def iter_elements(self):
        """Elements in render order, across columns for rows."""
        yield from self.elements
        for column in self.columns:
            yield from column.elements


def _describe_field(element: FieldElement, store: FormStateStore) -> ElementDescriptor:
    help_text = element.help if isinstance(element, (TextInput, PasswordInput)) else None
    return ElementDescriptor(
        kind=element.kind,
        label=element.label,
        name=element.name,
        value=store.get_value(element.name, element.default_value),
        error=store.get_error(element.name),
        required=element.required,
        help=help_text,
        masked=isinstance(element, PasswordInput),
    )


def describe_element(element, store: FormStateStore) -> ElementDescriptor | None:
    """Describe one element; unknown kinds render nothing."""
    if isinstance(element, (Heading, Paragraph)):
        return ElementDescriptor(kind=element.kind, label=element.value)
    if isinstance(element, (TextInput, PasswordInput, Checkbox)):
        return _describe_field(element, store)
    if isinstance(element, SubmitButton):
        return ElementDescriptor(kind=element.kind, label=element.label)
    return None


def _describe_all(elements, store: FormStateStore) -> tuple[ElementDescriptor, ...]:
    described = (describe_element(element, store) for element in elements)
    return tuple(d for d in described if d is not None)


def render_tree(blueprint: Blueprint, store: FormStateStore) -> tuple[BlockDescriptor, ...]:
    """
    Describe the whole form against the current state.

    Args:
        blueprint: Form blueprint
        store: State store supplying values and error messages

    Returns:
        Block descriptors in document order (unknown blocks omitted)
    """
    blocks: list[BlockDescriptor] = []

    for block in blueprint.blueprint:
        if isinstance(block, ElementBlock):
            blocks.append(BlockDescriptor(kind=block.kind, elements=_describe_all(block.elements, store)))
        elif isinstance(block, RowBlock):
            columns = tuple(
                ColumnDescriptor(size=column.size, elements=_describe_all(column.elements, store))
                for column in block.columns
            )
            blocks.append(BlockDescriptor(kind=block.kind, columns=columns))

    return tuple(blocks)
