"""
Data Models for Knowledge Base Extraction

Structured representations of the component metadata recovered from
component sources, Storybook stories and MDX documentation.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from uikb.configs.constants import AI_HINT_PLACEHOLDER, NO_PAYLOAD_TYPE

# Literal values allowed inside an example configuration
ConfigValue = Union[str, bool, int, float, None, dict[str, "ConfigValue"]]


@dataclass(frozen=True)
class PropertyDescriptor:
    """A component input (``@Input()`` member)."""

    name: str
    declared_type: str  # As written in source, not resolved
    default_value: Optional[str] = None  # Initializer source text
    allowed_values: Optional[tuple[str, ...]] = None  # Closed set of string literals
    description: Optional[str] = None  # Merged in from story argTypes

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "declaredType": self.declared_type}
        if self.description is not None:
            data["description"] = self.description
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        if self.allowed_values:
            data["allowedValues"] = list(self.allowed_values)
        return data


@dataclass(frozen=True)
class EventDescriptor:
    """A component output (``@Output()`` member)."""

    name: str
    payload_type: str = NO_PAYLOAD_TYPE
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "payloadType": self.payload_type}
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class VariantDescription:
    """A named visual/behavioral variant from the docs."""

    name: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class DocumentationBlock:
    """Sectioned prose recovered from a component's MDX doc."""

    general_description: str = ""
    anatomy: tuple[str, ...] = ()
    variants: tuple[VariantDescription, ...] = ()
    accessibility: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (
            self.general_description or self.anatomy or self.variants or self.accessibility
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "generalDescription": self.general_description,
            "anatomy": list(self.anatomy),
            "variants": [v.to_dict() for v in self.variants],
            "accessibility": list(self.accessibility),
        }


@dataclass(frozen=True)
class ExampleConfiguration:
    """A named story: the literal ``args`` bag it renders with."""

    name: str
    configuration: dict[str, ConfigValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "configuration": self.configuration}


@dataclass(frozen=True)
class ComponentData:
    """Structural facts recovered from a component definition file."""

    class_name: str
    selector: str
    inputs: tuple[PropertyDescriptor, ...] = ()
    outputs: tuple[EventDescriptor, ...] = ()


@dataclass(frozen=True)
class StoriesData:
    """Facts recovered from a Storybook stories file."""

    title: str = ""
    ai_hint: str = AI_HINT_PLACEHOLDER
    examples: tuple[ExampleConfiguration, ...] = ()
    arg_descriptions: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ComponentRecord:
    """One knowledge base entry. Immutable once assembled."""

    name: str
    selector: str
    ai_hint: str
    inputs: tuple[PropertyDescriptor, ...] = ()
    outputs: tuple[EventDescriptor, ...] = ()
    documentation: DocumentationBlock = field(default_factory=DocumentationBlock)
    examples: tuple[ExampleConfiguration, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the knowledge base JSON shape."""
        return {
            "name": self.name,
            "selector": self.selector,
            "aiHint": self.ai_hint,
            "api": {
                "inputs": [i.to_dict() for i in self.inputs],
                "outputs": [o.to_dict() for o in self.outputs],
            },
            "documentation": self.documentation.to_dict(),
            "examples": [e.to_dict() for e in self.examples],
        }
