"""
Source Extractors

One extractor per input kind: component definitions, Storybook stories and
MDX documentation.
"""

from uikb.ast.extractors.base import SourceExtractor
from uikb.ast.extractors.component import ComponentExtractor
from uikb.ast.extractors.documentation import (
    DocumentationExtractor,
    SectionKind,
    classify_heading,
    flatten_inline,
)
from uikb.ast.extractors.stories import StoriesExtractor

__all__ = [
    "SourceExtractor",
    "ComponentExtractor",
    "StoriesExtractor",
    "DocumentationExtractor",
    "SectionKind",
    "classify_heading",
    "flatten_inline",
]
