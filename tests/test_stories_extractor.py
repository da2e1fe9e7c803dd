"""
Tests for Storybook stories extraction.
"""

import pytest

from uikb.ast.extractors import StoriesExtractor
from uikb.ast.extractors.stories import parse_number
from uikb.configs.constants import AI_HINT_PLACEHOLDER
from tests.samples import BADGE_STORIES, CARD_STORIES_BROKEN


@pytest.fixture
def extractor():
    return StoriesExtractor()


class TestMetadata:
    """Title, aiHint and argTypes descriptions."""

    def test_badge_meta(self, extractor):
        data = extractor.extract(BADGE_STORIES)
        assert data.title == "Badge"
        assert data.ai_hint == "Use for short status labels."

    def test_arg_descriptions(self, extractor):
        data = extractor.extract(BADGE_STORIES)
        # count has argTypes but no description
        assert data.arg_descriptions == {
            "variant": "Visual style",
            "dismissed": "Emitted when closed",
        }

    def test_satisfies_wrapper(self, extractor):
        source = "const meta = { title: 'Chip', aiHint: 'Compact tags' } satisfies Meta<Chip>;"
        data = extractor.extract(source)
        assert data.title == "Chip"
        assert data.ai_hint == "Compact tags"

    def test_export_default_object(self, extractor):
        data = extractor.extract("export default { title: 'Legacy' };")
        assert data.title == "Legacy"

    def test_no_meta(self, extractor):
        data = extractor.extract("export const Default = { args: {} };")
        assert data.title == ""
        assert data.ai_hint == AI_HINT_PLACEHOLDER
        assert data.arg_descriptions == {}

    def test_non_string_title_ignored(self, extractor):
        data = extractor.extract("const meta = { title: buildTitle() };")
        assert data.title == ""

    def test_escaped_title(self, extractor):
        data = extractor.extract("const meta = { title: 'Don\\'t panic' };")
        assert data.title == "Don't panic"


class TestExamples:
    """Exported stories with literal args."""

    def test_badge_examples(self, extractor):
        examples = extractor.extract(BADGE_STORIES).examples
        assert [e.name for e in examples] == ["Default", "Danger"]
        assert examples[0].configuration == {"variant": "primary", "label": "New", "count": 3}

    def test_literal_conversion(self, extractor):
        danger = extractor.extract(BADGE_STORIES).examples[1]
        assert danger.configuration == {
            "variant": "danger",
            "label": "Error",
            "dismissible": True,
            "offset": -2,
            "style": {"padding": 4},
            "onClick": None,
        }

    def test_non_object_args_skipped(self, extractor):
        source = "const shared = {};\nexport const A = { args: shared };\nexport const B = { args: { x: 1 } };"
        examples = extractor.extract(source).examples
        assert [e.name for e in examples] == ["B"]

    def test_unexported_stories_skipped(self, extractor):
        source = "const Hidden = { args: { x: 1 } };"
        assert extractor.extract(source).examples == ()

    def test_string_keys_and_identifiers(self, extractor):
        source = "export const A = { args: { 'aria-label': 'Close', size, other: someVar } };"
        config = extractor.extract(source).examples[0].configuration
        assert config == {"aria-label": "Close", "size": None, "other": None}


class TestMalformedInput:
    """Broken sources never raise."""

    def test_unterminated_string(self, extractor):
        data = extractor.extract(CARD_STORIES_BROKEN)
        assert isinstance(data.title, str)
        assert isinstance(data.examples, tuple)

    def test_empty_source(self, extractor):
        data = extractor.extract("")
        assert data.title == ""
        assert data.examples == ()

    def test_unreadable_file(self, extractor, temp_dir):
        data = extractor.extract_file(temp_dir / "missing.stories.ts")
        assert data.title == ""


class TestParseNumber:
    """JS numeric literal parsing."""

    def test_numbers(self):
        assert parse_number("42") == 42
        assert parse_number("3.5") == 3.5
        assert parse_number("0x1F") == 31
        assert parse_number("1_000") == 1000
        assert parse_number("1e3") == 1000.0

    def test_bigint_not_supported(self):
        assert parse_number("10n") is None
