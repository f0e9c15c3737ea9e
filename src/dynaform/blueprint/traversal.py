"""Blueprint traversal in document order."""

from collections.abc import Iterator

from .models import Blueprint, ElementBlock, FieldElement, RowBlock


def iter_row_elements(row: RowBlock) -> Iterator:
    """Yield every element of a row, column by column."""
    for column in row.columns:
        yield from column.elements


def iter_elements(blueprint: Blueprint) -> Iterator:
    """Yield every element the form renders, in document order."""
    for block in blueprint.blueprint:
        if isinstance(block, ElementBlock):
            yield from block.elements
        elif isinstance(block, RowBlock):
            yield from iter_row_elements(block)


def iter_field_elements(blueprint: Blueprint) -> Iterator[FieldElement]:
    """Yield every stateful element the form renders."""
    for element in iter_elements(blueprint):
        if isinstance(element, FieldElement):
            yield element


def iter_validated_elements(blueprint: Blueprint) -> Iterator[FieldElement]:
    """
    Yield the stateful elements checked on submit.

    Only row blocks are walked. Elements of ``block`` containers are rendered
    and editable but never validated.
    """
    for block in blueprint.blueprint:
        if not isinstance(block, RowBlock):
            continue
        for element in iter_row_elements(block):
            if isinstance(element, FieldElement):
                yield element


def find_field(blueprint: Blueprint, name: str) -> FieldElement | None:
    """Return the first rendered field called ``name``."""
    for element in iter_field_elements(blueprint):
        if element.name == name:
            return element
    return None
