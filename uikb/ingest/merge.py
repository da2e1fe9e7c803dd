"""
Merge & Assembly

Pure functions that combine the three extractors' results into a
ComponentRecord.
"""

import dataclasses
from typing import Optional, Sequence, TypeVar

from uikb.ast.models import (
    ComponentData,
    ComponentRecord,
    DocumentationBlock,
    EventDescriptor,
    PropertyDescriptor,
    StoriesData,
)

Descriptor = TypeVar("Descriptor", PropertyDescriptor, EventDescriptor)


def merge_descriptions(
    descriptors: Sequence[Descriptor],
    descriptions: dict[str, str],
) -> tuple[Descriptor, ...]:
    """
    Attach descriptions to descriptors by name.

    Additive only: a descriptor that already has a description keeps it, so
    merging twice gives the same result as merging once.
    """
    merged = []
    for descriptor in descriptors:
        description = descriptions.get(descriptor.name)
        if descriptor.description is None and description:
            descriptor = dataclasses.replace(descriptor, description=description)
        merged.append(descriptor)
    return tuple(merged)


def validate_unit(component: Optional[ComponentData], stories: StoriesData) -> Optional[str]:
    """Return a skip reason, or None when the unit can become a record."""
    if component is None:
        return "no component data"
    if not component.selector:
        return "no selector"
    if not stories.title:
        return "no story title"
    return None


def assemble_record(
    component: ComponentData,
    stories: StoriesData,
    documentation: DocumentationBlock,
) -> ComponentRecord:
    """Build the knowledge base entry for one validated unit."""
    return ComponentRecord(
        name=stories.title,
        selector=component.selector,
        ai_hint=stories.ai_hint,
        inputs=merge_descriptions(component.inputs, stories.arg_descriptions),
        outputs=merge_descriptions(component.outputs, stories.arg_descriptions),
        documentation=documentation,
        examples=stories.examples,
    )
