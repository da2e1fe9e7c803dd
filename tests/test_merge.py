"""
Tests for description merge and record assembly.
"""

from uikb.ast.models import (
    ComponentData,
    DocumentationBlock,
    EventDescriptor,
    ExampleConfiguration,
    PropertyDescriptor,
    StoriesData,
)
from uikb.ingest.merge import assemble_record, merge_descriptions, validate_unit


def make_component(**overrides) -> ComponentData:
    defaults = dict(
        class_name="BadgeComponent",
        selector="ui-badge",
        inputs=(
            PropertyDescriptor(name="variant", declared_type="'a' | 'b' | 'c'", allowed_values=("a", "b", "c")),
            PropertyDescriptor(name="label", declared_type="string", description="Own text"),
        ),
        outputs=(EventDescriptor(name="dismissed"),),
    )
    defaults.update(overrides)
    return ComponentData(**defaults)


class TestMergeDescriptions:
    """Additive description merge."""

    def test_attaches_missing_description(self):
        merged = merge_descriptions(make_component().inputs, {"variant": "Visual style"})
        assert merged[0].description == "Visual style"

    def test_existing_description_kept(self):
        merged = merge_descriptions(make_component().inputs, {"label": "From stories"})
        assert merged[1].description == "Own text"

    def test_idempotent(self):
        descriptions = {"variant": "Visual style", "label": "From stories"}
        once = merge_descriptions(make_component().inputs, descriptions)
        twice = merge_descriptions(once, descriptions)
        assert once == twice

    def test_unknown_names_ignored(self):
        inputs = make_component().inputs
        assert merge_descriptions(inputs, {"missing": "x"}) == inputs

    def test_inputs_not_mutated(self):
        inputs = make_component().inputs
        merge_descriptions(inputs, {"variant": "Visual style"})
        assert inputs[0].description is None

    def test_outputs(self):
        merged = merge_descriptions(make_component().outputs, {"dismissed": "Closed"})
        assert merged[0].description == "Closed"


class TestValidateUnit:
    """Validation gate before assembly."""

    def test_valid(self):
        assert validate_unit(make_component(), StoriesData(title="Badge")) is None

    def test_no_component(self):
        assert validate_unit(None, StoriesData(title="Badge")) == "no component data"

    def test_empty_selector(self):
        assert validate_unit(make_component(selector=""), StoriesData(title="Badge")) == "no selector"

    def test_empty_title(self):
        assert validate_unit(make_component(), StoriesData()) == "no story title"


class TestAssembleRecord:
    """Record assembly and serialization."""

    def test_assemble(self):
        stories = StoriesData(
            title="Badge",
            ai_hint="Status labels",
            examples=(ExampleConfiguration("Default", {"variant": "a"}),),
            arg_descriptions={"variant": "Visual style", "dismissed": "Closed"},
        )
        record = assemble_record(make_component(), stories, DocumentationBlock(general_description="A badge."))

        assert record.name == "Badge"
        assert record.selector == "ui-badge"
        assert record.ai_hint == "Status labels"
        assert record.inputs[0].description == "Visual style"
        assert record.outputs[0].description == "Closed"
        assert record.examples[0].name == "Default"

    def test_to_dict_shape(self):
        record = assemble_record(make_component(outputs=()), StoriesData(title="Badge"), DocumentationBlock())
        data = record.to_dict()

        assert list(data) == ["name", "selector", "aiHint", "api", "documentation", "examples"]
        assert data["aiHint"] == "COMPLETE AI HINT"
        assert data["api"]["outputs"] == []
        assert data["api"]["inputs"][0] == {
            "name": "variant",
            "declaredType": "'a' | 'b' | 'c'",
            "allowedValues": ["a", "b", "c"],
        }
        assert data["documentation"]["variants"] == []
