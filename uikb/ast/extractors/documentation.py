"""
Documentation Extractor

Sections a component's MDX/Markdown doc into description, anatomy, variants
and accessibility notes. Headings drive a section cursor; prose that follows
an unrecognized heading (or comes before any heading) is dropped.
"""

import re
from enum import Enum
from pathlib import Path
from typing import Optional

from tree_sitter import Node

from uikb.ast.extractors.base import SourceExtractor
from uikb.ast.models import DocumentationBlock, VariantDescription
from uikb.configs.constants import DOC_SUFFIXES
from uikb.configs.logging import get_logger

logger = get_logger("ast.documentation")


class SectionKind(Enum):
    DESCRIPTION = "description"
    ANATOMY = "anatomy"
    VARIANTS = "variants"
    ACCESSIBILITY = "accessibility"


# Checked in order; first match wins
SECTION_VOCABULARY: list[tuple[SectionKind, tuple[str, ...]]] = [
    (SectionKind.DESCRIPTION, ("description", "descripción", "descripcion")),
    (SectionKind.ANATOMY, ("anatomy", "anatomía", "anatomia")),
    (SectionKind.VARIANTS, ("variants", "variantes")),
    (SectionKind.ACCESSIBILITY, ("accessibility", "accesibilidad")),
]

HEADING_TYPES = {"atx_heading", "setext_heading"}

# Blocks whose content is never prose
SKIPPED_BLOCKS = {
    "fenced_code_block",
    "indented_code_block",
    "html_block",
    "pipe_table",
    "link_reference_definition",
    "thematic_break",
}

# Inline markup, applied in order
INLINE_MARKUP = [
    (re.compile(r"\{\s*/\*.*?\*/\s*\}", re.DOTALL), ""),  # mdx comments
    (re.compile(r"!\[([^\]]*)\]\([^)]*\)"), r"\1"),  # images
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),  # links
    (re.compile(r"`([^`]*)`"), r"\1"),  # code spans
    (re.compile(r"(\*\*|__)(.+?)\1"), r"\2"),  # strong
    (re.compile(r"\*(.+?)\*"), r"\1"),  # emphasis
    (re.compile(r"(?<!\w)_(.+?)_(?!\w)"), r"\1"),
    (re.compile(r"~~(.+?)~~"), r"\1"),  # strikethrough
    (re.compile(r"</?[A-Za-z][^>]*>"), ""),  # html / jsx tags
    (re.compile(r"\\([\\`*_{}\[\]()#+\-.!])"), r"\1"),  # escapes
]

WHITESPACE = re.compile(r"\s+")

# Paragraphs that are MDX syntax rather than prose
MDX_EXPRESSION = re.compile(r"^\{.*\}$", re.DOTALL)
MDX_ESM = re.compile(r"^(?:import|export)\s")

# `>` markers left on lazy or nested quote lines
QUOTE_MARKERS = re.compile(r"^[ \t]*(?:>[ \t]?)+", re.MULTILINE)

# "Primary: filled background" / "Primary — filled background"
VARIANT_PATTERN = re.compile(r"^(?P<name>[^:]{1,60}?)\s*(?::|\s[-–—])\s+(?P<description>.+)$")


def classify_heading(text: str) -> Optional[SectionKind]:
    """Map heading text to a section kind by case-insensitive substring match."""
    lowered = text.lower()
    for kind, words in SECTION_VOCABULARY:
        if any(word in lowered for word in words):
            return kind
    return None


def flatten_inline(text: str) -> str:
    """Strip inline markdown markup and collapse whitespace."""
    for pattern, replacement in INLINE_MARKUP:
        text = pattern.sub(replacement, text)
    return WHITESPACE.sub(" ", text).strip()


def parse_variant(text: str) -> Optional[VariantDescription]:
    """Parse a `Name: description` block; None if it doesn't have that shape."""
    match = VARIANT_PATTERN.match(text)
    if match is None:
        return None
    name = match.group("name").strip()
    description = match.group("description").strip()
    if not name or not description:
        return None
    return VariantDescription(name=name, description=description)


class DocumentationExtractor(SourceExtractor):
    """Extracts a DocumentationBlock from a component's doc file."""

    def find_doc_file(self, component_dir: str | Path) -> Optional[Path]:
        """`<dir>/<dirname>.doc.mdx`, falling back to `.doc.md`."""
        directory = Path(component_dir)
        for suffix in DOC_SUFFIXES:
            candidate = directory / f"{directory.name}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    def extract(self, component_dir: str | Path) -> DocumentationBlock:
        """
        Extract documentation for the component living in `component_dir`.

        Returns an empty block when there is no doc file.
        """
        doc_file = self.find_doc_file(component_dir)
        if doc_file is None:
            logger.debug(f"No documentation file in {component_dir}")
            return DocumentationBlock()

        try:
            content = doc_file.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.warning(f"Could not read documentation {doc_file}: {e}")
            return DocumentationBlock()

        return self.extract_source(content)

    def extract_source(self, content: str) -> DocumentationBlock:
        """Section markdown/MDX text into a DocumentationBlock."""
        tree = self.parser.parse(content, "markdown")
        if tree is None:
            return DocumentationBlock()

        sections: dict[SectionKind, list[str]] = {kind: [] for kind in SectionKind}
        current: Optional[SectionKind] = None

        for node in self._iter_blocks(tree.root_node):
            if node.type in HEADING_TYPES:
                current = classify_heading(self._heading_text(node))
                continue
            if current is None:
                continue
            text = self._block_text(node)
            if text:
                sections[current].append(text)

        variants = []
        for text in sections[SectionKind.VARIANTS]:
            variant = parse_variant(text)
            if variant is not None:
                variants.append(variant)

        return DocumentationBlock(
            general_description=" ".join(sections[SectionKind.DESCRIPTION]).strip(),
            anatomy=tuple(sections[SectionKind.ANATOMY]),
            variants=tuple(variants),
            accessibility=tuple(sections[SectionKind.ACCESSIBILITY]),
        )

    def _iter_blocks(self, node: Node):
        """
        Yield headings, paragraphs and list items in document order.

        A list item is yielded once for its own paragraphs; nested lists
        inside it are visited afterwards as separate items.
        """
        for child in node.children:
            if child.type in HEADING_TYPES or child.type == "paragraph":
                yield child
            elif child.type == "list_item":
                yield child
                for nested in self.find_children(child, "list"):
                    yield from self._iter_blocks(nested)
            elif child.type in SKIPPED_BLOCKS:
                continue
            else:
                yield from self._iter_blocks(child)

    def _heading_text(self, node: Node) -> str:
        if node.type == "setext_heading":
            paragraph = self.find_child(node, "paragraph")
            return flatten_inline(self.get_node_text(paragraph))

        content = node.child_by_field_name("heading_content")
        if content is not None:
            return flatten_inline(self.get_node_text(content))
        return flatten_inline(self.get_node_text(node).strip().strip("#"))

    def _block_text(self, node: Node) -> str:
        if node.type == "list_item":
            parts = [self._paragraph_text(p) for p in self.find_children(node, "paragraph")]
            return flatten_inline(" ".join(parts))

        text = self._paragraph_text(node).strip()
        if MDX_EXPRESSION.match(text) or MDX_ESM.match(text):
            return ""
        return flatten_inline(text)

    def _paragraph_text(self, node: Node) -> str:
        """Text of a paragraph with block quote continuation markers removed."""
        data = node.text or b""
        start = node.start_byte
        pieces = []
        offset = 0
        for marker in self.walk_tree(node, "block_continuation"):
            pieces.append(data[offset:marker.start_byte - start])
            offset = max(offset, marker.end_byte - start)
        pieces.append(data[offset:])
        text = b"".join(pieces).decode("utf-8", errors="replace")

        if self._inside_block_quote(node):
            text = QUOTE_MARKERS.sub("", text)
        return text

    def _inside_block_quote(self, node: Node) -> bool:
        parent = node.parent
        while parent is not None:
            if parent.type == "block_quote":
                return True
            parent = parent.parent
        return False
