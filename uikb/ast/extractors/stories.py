"""
Stories Extractor

Reads Storybook example files (``*.stories.ts``) with the error-tolerant
TypeScript grammar. A broken stories file yields whatever could be
recovered, never an exception.
"""

from pathlib import Path
from typing import Optional

from tree_sitter import Node

from uikb.ast.extractors.base import SourceExtractor
from uikb.ast.models import ConfigValue, ExampleConfiguration, StoriesData
from uikb.configs.constants import AI_HINT_PLACEHOLDER
from uikb.configs.logging import get_logger

logger = get_logger("ast.stories")

META_VARIABLE = "meta"


class StoriesExtractor(SourceExtractor):
    """Extracts title, hints, arg descriptions and examples from stories."""

    def extract_file(self, file_path: str | Path) -> StoriesData:
        """Read and extract a stories file; unreadable files yield empty data."""
        try:
            content = Path(file_path).read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.error(f"Could not read stories file {file_path}: {e}")
            return StoriesData()
        return self.extract(content)

    def extract(self, content: str) -> StoriesData:
        """
        Extract story metadata from stories file text.

        Args:
            content: Source of a ``*.stories.ts`` file

        Returns:
            StoriesData with title, aiHint, argTypes descriptions and examples
        """
        tree = self.parser.parse(content, "typescript")
        if tree is None:
            return StoriesData()

        root = tree.root_node
        if root.has_error:
            logger.debug("Stories source has syntax errors, extracting what parsed")

        meta = self._find_meta(root)

        return StoriesData(
            title=self._string_property(meta, "title") or "",
            ai_hint=self._extract_ai_hint(meta),
            examples=tuple(self._extract_examples(root)),
            arg_descriptions=self._extract_arg_descriptions(meta),
        )

    # Metadata

    def _top_level_declarators(self, root: Node) -> list[tuple[Node, bool]]:
        """Top-level `variable_declarator`s, flagged when exported."""
        declarators = []
        for statement in root.named_children:
            exported = statement.type == "export_statement"
            declaration = statement
            if exported:
                declaration = statement.child_by_field_name("declaration")
                if declaration is None:
                    continue
            if declaration.type not in ("lexical_declaration", "variable_declaration"):
                continue
            for declarator in self.find_children(declaration, "variable_declarator"):
                declarators.append((declarator, exported))
        return declarators

    def _find_meta(self, root: Node) -> Optional[Node]:
        """The metadata object: `const meta = {...}` or `export default {...}`."""
        for declarator, _ in self._top_level_declarators(root):
            name = declarator.child_by_field_name("name")
            if self.get_node_text(name) != META_VARIABLE:
                continue
            value = self.unwrap_expression(declarator.child_by_field_name("value"))
            if value is not None and value.type == "object":
                return value

        for statement in self.find_children(root, "export_statement"):
            if self.find_child(statement, "default") is None:
                continue
            value = self.unwrap_expression(statement.child_by_field_name("value"))
            if value is not None and value.type == "object":
                return value

        return None

    def _string_property(self, node: Optional[Node], name: str) -> Optional[str]:
        value = self.object_property(node, name)
        return self.string_value(self.unwrap_expression(value))

    def _extract_ai_hint(self, meta: Optional[Node]) -> str:
        hint = self._string_property(meta, "aiHint")
        if hint is None:
            parameters = self.object_property(meta, "parameters")
            hint = self._string_property(parameters, "aiHint")
        return hint if hint else AI_HINT_PLACEHOLDER

    def _extract_arg_descriptions(self, meta: Optional[Node]) -> dict[str, str]:
        descriptions = {}
        for prop_name, arg_type in self.object_pairs(self.object_property(meta, "argTypes")):
            description = self._string_property(arg_type, "description")
            if description is not None:
                descriptions[prop_name] = description
        return descriptions

    # Examples

    def _extract_examples(self, root: Node) -> list[ExampleConfiguration]:
        examples = []
        for declarator, exported in self._top_level_declarators(root):
            if not exported:
                continue

            name = declarator.child_by_field_name("name")
            if name is None or name.type != "identifier":
                continue

            value = self.unwrap_expression(declarator.child_by_field_name("value"))
            if value is None or value.type != "object":
                continue

            args = self.unwrap_expression(self.object_property(value, "args"))
            if args is None or args.type != "object":
                continue

            examples.append(ExampleConfiguration(
                name=self.get_node_text(name),
                configuration=self.to_literal(args),
            ))
        return examples

    def to_literal(self, node: Optional[Node]) -> ConfigValue:
        """
        Convert a literal expression to a plain Python value.

        Strings, booleans and numbers (including negated ones) pass through,
        object literals recurse. Any other expression becomes None.
        """
        node = self.unwrap_expression(node)
        if node is None:
            return None

        if node.type in ("string", "template_string"):
            return self.string_value(node)
        if node.type == "true":
            return True
        if node.type == "false":
            return False
        if node.type == "number":
            return parse_number(self.get_node_text(node))
        if node.type == "unary_expression":
            return self._unary_literal(node)
        if node.type == "object":
            return self._object_literal(node)
        return None

    def _unary_literal(self, node: Node) -> ConfigValue:
        operator = node.child_by_field_name("operator")
        operand = self.unwrap_expression(node.child_by_field_name("argument"))
        if operator is None or operand is None or operand.type != "number":
            return None

        number = parse_number(self.get_node_text(operand))
        if number is None:
            return None
        op = self.get_node_text(operator)
        if op == "-":
            return -number
        if op == "+":
            return number
        return None

    def _object_literal(self, node: Node) -> dict[str, ConfigValue]:
        result: dict[str, ConfigValue] = {}
        for child in node.named_children:
            if child.type == "pair":
                key = self.property_key(child)
                if key is not None:
                    result[key] = self.to_literal(child.child_by_field_name("value"))
            elif child.type == "shorthand_property_identifier":
                # `{ label }` refers to a variable, not a literal
                result[self.get_node_text(child)] = None
        return result


def parse_number(text: str) -> Optional[int | float]:
    """Parse a JS numeric literal (`42`, `3.5`, `0x1F`, `1_000`, `1e3`)."""
    text = text.replace("_", "")
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None
