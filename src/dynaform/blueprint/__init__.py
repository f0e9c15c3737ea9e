"""
Blueprint
Form schema model, parser, traversal and loader
"""

from .models import Blueprint
from .parser import BlueprintParser, parse_blueprint
from .traversal import iter_elements, iter_field_elements, iter_validated_elements
from .loader import BlueprintLoader

__all__ = [
    "Blueprint",
    "BlueprintParser",
    "parse_blueprint",
    "iter_elements",
    "iter_field_elements",
    "iter_validated_elements",
    "BlueprintLoader",
]
