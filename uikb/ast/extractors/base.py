"""
Base Extractor

Shared tree-sitter traversal helpers for the component, stories and
documentation extractors.
"""

import re
from typing import Optional

from tree_sitter import Node

from uikb.ast.parser import ASTParser, get_parser

# Wrappers that don't change the value of the expression they hold
TRANSPARENT_EXPRESSIONS = {
    "parenthesized_expression",
    "satisfies_expression",
    "as_expression",
    "non_null_expression",
    "type_assertion",
}

SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

QUOTE_CHARS = re.compile(r"['\"`]")


class SourceExtractor:
    """
    Base class for extractors that walk tree-sitter syntax trees.

    Subclasses get a shared ASTParser and node helpers. Node text is always
    decoded from the tree's own bytes so non-ASCII sources slice correctly.
    """

    def __init__(self, parser: Optional[ASTParser] = None):
        self.parser = parser or get_parser()

    # Helper methods for AST traversal

    def get_node_text(self, node: Optional[Node]) -> str:
        """Extract the text content of an AST node."""
        if node is None or node.text is None:
            return ""
        return node.text.decode("utf-8", errors="replace")

    def find_children(self, node: Node, type_name: str) -> list[Node]:
        """Find all direct children of a specific type."""
        return [child for child in node.children if child.type == type_name]

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def walk_tree(self, node: Node, type_name: str) -> list[Node]:
        """
        Walk the tree and find all nodes of a specific type.

        Uses an explicit stack, so arbitrarily deep expressions are safe.

        Args:
            node: Starting node
            type_name: Node type to find

        Returns:
            List of matching nodes in document order
        """
        results = []
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type == type_name:
                results.append(current)
            stack.extend(reversed(current.children))
        return results

    def top_level_declarations(self, root: Node) -> list[Node]:
        """
        Statements directly under the program, with `export` unwrapped.

        `export class X {}` yields the class_declaration; re-exports and
        other statements without a declaration are left out.
        """
        declarations = []
        for child in root.named_children:
            if child.type == "export_statement":
                declaration = child.child_by_field_name("declaration")
                if declaration is not None:
                    declarations.append(declaration)
            else:
                declarations.append(child)
        return declarations

    # Expression helpers (TypeScript grammar)

    def unwrap_expression(self, node: Optional[Node]) -> Optional[Node]:
        """Strip `( )`, `satisfies T`, `as T` and `!` wrappers."""
        while node is not None and node.type in TRANSPARENT_EXPRESSIONS:
            inner = None
            for child in node.named_children:
                if child.type != "comment":
                    inner = child
                    break
            node = inner
        return node

    def string_value(self, node: Optional[Node]) -> Optional[str]:
        """
        Return the value of a string literal node.

        Handles quoted strings (with escape sequences) and template strings
        without substitutions. Anything else returns None.
        """
        if node is None:
            return None

        if node.type == "string":
            parts = []
            for child in node.children:
                if child.type == "string_fragment":
                    parts.append(self.get_node_text(child))
                elif child.type == "escape_sequence":
                    parts.append(self._decode_escape(self.get_node_text(child)))
            return "".join(parts)

        if node.type == "template_string":
            if any(c.type == "template_substitution" for c in node.children):
                return None
            return self.get_node_text(node)[1:-1]

        return None

    def property_key(self, pair: Node) -> Optional[str]:
        """Return the key of an object `pair` as a plain string."""
        key = pair.child_by_field_name("key")
        if key is None:
            return None
        if key.type in ("property_identifier", "identifier"):
            return self.get_node_text(key)
        if key.type == "string":
            return self.string_value(key)
        return None

    def object_pairs(self, node: Optional[Node]) -> list[tuple[str, Node]]:
        """List `(key, value)` pairs of an object literal, in source order."""
        node = self.unwrap_expression(node)
        if node is None or node.type != "object":
            return []

        pairs = []
        for child in node.named_children:
            if child.type != "pair":
                continue
            key = self.property_key(child)
            value = child.child_by_field_name("value")
            if key is not None and value is not None:
                pairs.append((key, value))
        return pairs

    def object_property(self, node: Optional[Node], name: str) -> Optional[Node]:
        """Find a property's value node inside an object literal."""
        for key, value in self.object_pairs(node):
            if key == name:
                return value
        return None

    def _decode_escape(self, escape: str) -> str:
        """Decode a JS escape sequence like `\\n` or `\\u00e9`."""
        body = escape[1:]
        if not body:
            return ""
        if body[0] in SIMPLE_ESCAPES and len(body) == 1:
            return SIMPLE_ESCAPES[body[0]]
        if body[0] == "u":
            digits = body[1:].strip("{}")
            try:
                return chr(int(digits, 16))
            except ValueError:
                return body
        if body[0] == "x":
            try:
                return chr(int(body[1:], 16))
            except ValueError:
                return body
        if body[0] in "\r\n":
            # Line continuation
            return ""
        return body


def strip_quotes(text: str) -> str:
    """Remove every quote character from a raw literal's source text."""
    return QUOTE_CHARS.sub("", text)
