from .descriptors import BlockDescriptor, ColumnDescriptor, ElementDescriptor, describe_element, render_tree

__all__ = ["BlockDescriptor", "ColumnDescriptor", "ElementDescriptor", "describe_element", "render_tree"]
