"""
AST-Based Component Analysis

Tree-sitter based extraction of component APIs, story examples and
documentation sections from a component library's sources.
"""

from uikb.ast.models import (
    ComponentData,
    ComponentRecord,
    DocumentationBlock,
    EventDescriptor,
    ExampleConfiguration,
    PropertyDescriptor,
    StoriesData,
    VariantDescription,
)
from uikb.ast.parser import ASTParser, get_parser

__all__ = [
    # Models
    "ComponentRecord",
    "ComponentData",
    "StoriesData",
    "PropertyDescriptor",
    "EventDescriptor",
    "DocumentationBlock",
    "VariantDescription",
    "ExampleConfiguration",
    # Parser
    "ASTParser",
    "get_parser",
]
