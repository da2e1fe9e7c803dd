"""
Tests for MDX documentation extraction.
"""

import pytest

from uikb.ast.extractors import DocumentationExtractor, SectionKind, classify_heading, flatten_inline
from uikb.ast.extractors.documentation import parse_variant
from uikb.ast.models import DocumentationBlock, VariantDescription
from tests.samples import BADGE_DOC


@pytest.fixture
def extractor():
    return DocumentationExtractor()


class TestClassifyHeading:
    """Heading vocabulary, English and Spanish."""

    def test_spanish(self):
        assert classify_heading("Descripción") is SectionKind.DESCRIPTION
        assert classify_heading("Anatomía del componente") is SectionKind.ANATOMY
        assert classify_heading("Variantes") is SectionKind.VARIANTS
        assert classify_heading("Accesibilidad") is SectionKind.ACCESSIBILITY

    def test_english_case_insensitive(self):
        assert classify_heading("DESCRIPTION") is SectionKind.DESCRIPTION
        assert classify_heading("Visual variants") is SectionKind.VARIANTS
        assert classify_heading("accessibility notes") is SectionKind.ACCESSIBILITY

    def test_unrecognized(self):
        assert classify_heading("Changelog") is None
        assert classify_heading("") is None


class TestFlattenInline:
    """Inline markup removal."""

    def test_markup_removed(self):
        text = "Use **bold**, *em*, `code` and [links](https://x.y) \n  here."
        assert flatten_inline(text) == "Use bold, em, code and links here."

    def test_snake_case_kept(self):
        assert flatten_inline("set max_width here") == "set max_width here"

    def test_jsx_tags_removed(self):
        assert flatten_inline("See <Canvas of={Stories.Default} /> above") == "See above"


class TestParseVariant:
    """Variant block shapes."""

    def test_colon(self):
        assert parse_variant("Danger: destructive state") == VariantDescription("Danger", "destructive state")

    def test_dash(self):
        assert parse_variant("Primary — default emphasis") == VariantDescription("Primary", "default emphasis")

    def test_prose(self):
        assert parse_variant("Just some prose without a name") is None


class TestDocumentationExtractor:
    """Sectioning a whole document."""

    def test_badge_doc(self, extractor):
        block = extractor.extract_source(BADGE_DOC)
        assert block.general_description == (
            "Badges show short status information. They sit next to other content."
        )
        assert block.anatomy == ("Container", "Label", "Dismiss button")
        assert block.variants == (
            VariantDescription("Primary", "default emphasis"),
            VariantDescription("Danger", "destructive state"),
        )
        assert block.accessibility == ("Use aria-label when the badge has no text.",)

    def test_text_outside_sections_discarded(self, extractor):
        block = extractor.extract_source(BADGE_DOC)
        everything = " ".join([block.general_description, *block.anatomy, *block.accessibility])
        assert "Intro text" not in everything
        assert "Ignored under" not in everything
        assert "Should be ignored" not in everything

    def test_order_preserved(self, extractor):
        source = "## Anatomy\n\nFirst\n\n## Changelog\n\nSkip\n\n## Anatomía\n\nSecond\n"
        assert extractor.extract_source(source).anatomy == ("First", "Second")

    def test_nested_list_items(self, extractor):
        source = "## Anatomy\n\n- Header\n  - Title\n- Body\n"
        assert extractor.extract_source(source).anatomy == ("Header", "Title", "Body")

    def test_code_blocks_skipped(self, extractor):
        source = "## Description\n\nIntro.\n\n```html\n<ui-badge></ui-badge>\n```\n"
        assert extractor.extract_source(source).general_description == "Intro."

    def test_mdx_expression_paragraph_skipped(self, extractor):
        source = "## Description\n\n{/* internal note */}\n\nReal text.\n"
        assert extractor.extract_source(source).general_description == "Real text."

    def test_multiline_mdx_expression_skipped(self, extractor):
        source = "## Anatomy\n\n{/*\n  screenshots pending\n*/}\n\n- Container\n"
        assert extractor.extract_source(source).anatomy == ("Container",)

    def test_inline_mdx_comment_removed(self, extractor):
        source = "## Description\n\nShows a status {/* keep short */} label.\n"
        assert extractor.extract_source(source).general_description == "Shows a status label."

    def test_esm_lines_skipped(self, extractor):
        source = (
            "## Description\n\n"
            "import { Meta } from '@storybook/blocks';\n\n"
            "export const tone = 'info';\n\n"
            "A badge.\n"
        )
        assert extractor.extract_source(source).general_description == "A badge."

    def test_block_quote_markers_removed(self, extractor):
        source = "## Accessibility\n\n> Line one\n> line two\n"
        assert extractor.extract_source(source).accessibility == ("Line one line two",)

    def test_setext_heading(self, extractor):
        source = "Accessibility\n=============\n\nKeyboard friendly.\n"
        assert extractor.extract_source(source).accessibility == ("Keyboard friendly.",)

    def test_doc_file_lookup(self, extractor, temp_dir):
        component_dir = temp_dir / "badge"
        component_dir.mkdir()
        (component_dir / "badge.doc.mdx").write_text(BADGE_DOC, encoding="utf-8")

        assert extractor.find_doc_file(component_dir) == component_dir / "badge.doc.mdx"
        assert extractor.extract(component_dir).anatomy == ("Container", "Label", "Dismiss button")

    def test_md_fallback(self, extractor, temp_dir):
        component_dir = temp_dir / "chip"
        component_dir.mkdir()
        (component_dir / "chip.doc.md").write_text("## Description\n\nA chip.\n", encoding="utf-8")
        assert extractor.extract(component_dir).general_description == "A chip."

    def test_missing_doc(self, extractor, temp_dir):
        block = extractor.extract(temp_dir)
        assert block == DocumentationBlock()
        assert block.is_empty()
        assert block.to_dict() == {
            "generalDescription": "",
            "anatomy": [],
            "variants": [],
            "accessibility": [],
        }
