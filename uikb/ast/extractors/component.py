"""
Component Extractor

Recovers the public API of an Angular-style component class from its
``*.component.ts`` source: selector, ``@Input()`` properties and
``@Output()`` events.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from tree_sitter import Node, Tree

from uikb.ast.extractors.base import SourceExtractor, strip_quotes
from uikb.ast.models import ComponentData, EventDescriptor, PropertyDescriptor
from uikb.configs.constants import NO_PAYLOAD_TYPE
from uikb.configs.logging import get_logger

logger = get_logger("ast.component")

COMPONENT_DECORATOR = "Component"
INPUT_DECORATOR = "Input"
OUTPUT_DECORATOR = "Output"

MEMBER_TYPES = {"public_field_definition", "method_definition"}

# Tried in order after a relative specifier, then as `<specifier>/index<ext>`
MODULE_EXTENSIONS = (".ts", ".tsx", ".d.ts")


@dataclass
class TypeScope:
    """Type names visible at the top of one source file."""

    path: Optional[Path] = None
    aliases: dict[str, Node] = field(default_factory=dict)
    # local name -> (module file, name exported there)
    imports: dict[str, tuple[Path, str]] = field(default_factory=dict)
    star_exports: list[Path] = field(default_factory=list)
    tree: Optional[Tree] = None


class ComponentExtractor(SourceExtractor):
    """Extracts component metadata from TypeScript sources."""

    def extract(self, file_path: str | Path) -> Optional[ComponentData]:
        """
        Extract component data from a component definition file.

        Type aliases imported from sibling modules (`./badge.types`) are
        followed when computing allowed values.

        Args:
            file_path: Path to the ``*.component.ts`` file

        Returns:
            ComponentData, or None if the file is missing or holds no
            ``@Component`` class
        """
        path = Path(file_path)
        if not path.is_file():
            logger.warning(f"Component file not found: {path}")
            return None

        try:
            source = path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.warning(f"Could not read component file {path}: {e}")
            return None

        return self.extract_source(source, base_dir=path.parent)

    def extract_source(self, source: str, base_dir: Optional[Path] = None) -> Optional[ComponentData]:
        """
        Extract component data from TypeScript source text.

        Args:
            source: TypeScript source
            base_dir: Directory that relative imports resolve against; None
                keeps type lookups inside `source`
        """
        tree = self.parser.parse(source, "typescript")
        if tree is None:
            return None

        root = tree.root_node
        scope = self._build_scope(root, base_dir)

        class_node = self._find_component_class(root)
        if class_node is None:
            return None

        decorator = self._find_decorator(self._class_decorators(class_node), COMPONENT_DECORATOR)
        inputs, outputs = self._extract_members(class_node, scope)
        return ComponentData(
            class_name=self.get_node_text(class_node.child_by_field_name("name")),
            selector=self._extract_selector(decorator),
            inputs=tuple(inputs),
            outputs=tuple(outputs),
        )

    def _find_component_class(self, root: Node) -> Optional[Node]:
        """First `@Component` class; recovered-from-error trees are searched in full."""
        top_level = [n for n in self.top_level_declarations(root) if n.type == "class_declaration"]
        candidates = top_level if not root.has_error else self.walk_tree(root, "class_declaration")
        for class_node in candidates:
            if self._find_decorator(self._class_decorators(class_node), COMPONENT_DECORATOR) is not None:
                return class_node
        return None

    # Decorators

    def _class_decorators(self, class_node: Node) -> list[Node]:
        """Decorators on the class itself or on its enclosing export."""
        decorators = self.find_children(class_node, "decorator")
        parent = class_node.parent
        if parent is not None and parent.type == "export_statement":
            decorators = self.find_children(parent, "decorator") + decorators
        return decorators

    def _decorator_name(self, decorator: Node) -> str:
        """Name of a decorator: `Input` for `@Input()`, `@core.Input()` or `@Input`."""
        for child in decorator.named_children:
            target = child
            if child.type == "call_expression":
                target = child.child_by_field_name("function")
            if target is None:
                return ""
            if target.type == "member_expression":
                target = target.child_by_field_name("property")
            return self.get_node_text(target)
        return ""

    def _decorator_arguments(self, decorator: Node) -> list[Node]:
        for child in decorator.named_children:
            if child.type == "call_expression":
                args = child.child_by_field_name("arguments")
                if args is not None:
                    return [a for a in args.named_children if a.type != "comment"]
        return []

    def _find_decorator(self, decorators: list[Node], name: str) -> Optional[Node]:
        for decorator in decorators:
            if self._decorator_name(decorator) == name:
                return decorator
        return None

    def _extract_selector(self, decorator: Node) -> str:
        args = self._decorator_arguments(decorator)
        if not args:
            return ""
        value = self.object_property(args[0], "selector")
        if value is None:
            return ""
        return strip_quotes(self.get_node_text(value)).strip()

    # Members

    def _extract_members(
        self, class_node: Node, scope: TypeScope
    ) -> tuple[list[PropertyDescriptor], list[EventDescriptor]]:
        inputs: list[PropertyDescriptor] = []
        outputs: list[EventDescriptor] = []

        body = class_node.child_by_field_name("body")
        if body is None:
            return inputs, outputs

        # Method decorators are siblings that precede the method in the body
        pending: list[Node] = []
        for child in body.named_children:
            if child.type == "decorator":
                pending.append(child)
                continue
            if child.type == "comment":
                continue
            if child.type not in MEMBER_TYPES:
                pending = []
                continue

            decorators = pending + self.find_children(child, "decorator")
            pending = []

            if self._find_decorator(decorators, INPUT_DECORATOR) is not None:
                prop = self._extract_input(child, scope)
                if prop is not None:
                    inputs.append(prop)
            elif self._find_decorator(decorators, OUTPUT_DECORATOR) is not None:
                event = self._extract_output(child)
                if event is not None:
                    outputs.append(event)

        return inputs, outputs

    def _member_name(self, member: Node) -> str:
        name_node = member.child_by_field_name("name")
        if name_node is None:
            return ""
        if name_node.type == "string":
            return self.string_value(name_node) or ""
        return self.get_node_text(name_node)

    def _member_type(self, member: Node) -> Optional[Node]:
        """The annotated type node of a field, or of a setter's parameter."""
        annotation = member.child_by_field_name("type")
        if annotation is None and member.type == "method_definition":
            params = member.child_by_field_name("parameters")
            if params is not None:
                for param in params.named_children:
                    if param.type in ("required_parameter", "optional_parameter"):
                        annotation = param.child_by_field_name("type")
                        break
        if annotation is None:
            return None
        for child in annotation.named_children:
            return child
        return None

    def _extract_input(
        self, member: Node, scope: TypeScope
    ) -> Optional[PropertyDescriptor]:
        name = self._member_name(member)
        if not name:
            return None

        value = member.child_by_field_name("value")
        type_node = self._member_type(member)

        if type_node is not None:
            declared_type = self.get_node_text(type_node)
        else:
            declared_type = self._infer_literal_type(value)

        return PropertyDescriptor(
            name=name,
            declared_type=declared_type,
            default_value=self.get_node_text(value) if value is not None else None,
            allowed_values=self._allowed_values(type_node, scope),
        )

    def _extract_output(self, member: Node) -> Optional[EventDescriptor]:
        name = self._member_name(member)
        if not name:
            return None

        payload = None
        type_node = self._member_type(member)
        if type_node is not None and type_node.type == "generic_type":
            payload = self._type_arguments(type_node.child_by_field_name("type_arguments"))

        if payload is None:
            value = self.unwrap_expression(member.child_by_field_name("value"))
            if value is not None and value.type == "new_expression":
                payload = self._type_arguments(value.child_by_field_name("type_arguments"))

        return EventDescriptor(name=name, payload_type=payload or NO_PAYLOAD_TYPE)

    def _type_arguments(self, node: Optional[Node]) -> Optional[str]:
        if node is None:
            return None
        args = [self.get_node_text(c) for c in node.named_children if c.type != "comment"]
        return ", ".join(args) if args else None

    # Types

    def _infer_literal_type(self, value: Optional[Node]) -> str:
        value = self.unwrap_expression(value)
        if value is None:
            return "any"
        if value.type in ("string", "template_string"):
            return "string"
        if value.type == "number":
            return "number"
        if value.type == "unary_expression":
            operand = value.child_by_field_name("argument")
            if operand is not None and operand.type == "number":
                return "number"
        if value.type in ("true", "false"):
            return "boolean"
        return "any"

    def _build_scope(
        self, root: Node, base_dir: Optional[Path], path: Optional[Path] = None
    ) -> TypeScope:
        """Type aliases, relative imports and re-exports declared at the top of a file."""
        scope = TypeScope(path=path)
        for child in root.named_children:
            declaration = child
            if child.type == "export_statement" and child.child_by_field_name("declaration") is not None:
                declaration = child.child_by_field_name("declaration")

            if declaration.type == "type_alias_declaration":
                name = declaration.child_by_field_name("name")
                value = declaration.child_by_field_name("value")
                if name is not None and value is not None:
                    scope.aliases[self.get_node_text(name)] = value
                continue

            if declaration.type not in ("import_statement", "export_statement"):
                continue
            module = self._resolve_module(base_dir, child.child_by_field_name("source"))
            if module is None:
                continue

            if child.type == "import_statement":
                clause = self.find_child(child, "import_clause")
                named = self.find_child(clause, "named_imports") if clause is not None else None
                specifiers = self.find_children(named, "import_specifier") if named is not None else []
            else:
                clause = self.find_child(child, "export_clause")
                if clause is None:
                    star = self.find_child(child, "*") is not None
                    if star and self.find_child(child, "namespace_export") is None:
                        scope.star_exports.append(module)
                    continue
                specifiers = self.find_children(clause, "export_specifier")

            for specifier in specifiers:
                original = self.get_node_text(specifier.child_by_field_name("name"))
                alias = specifier.child_by_field_name("alias")
                local = self.get_node_text(alias) if alias is not None else original
                if original:
                    scope.imports[local] = (module, original)

        return scope

    def _resolve_module(self, base_dir: Optional[Path], source: Optional[Node]) -> Optional[Path]:
        """Source file of a relative module specifier like `./badge.types`."""
        specifier = self.string_value(source)
        if base_dir is None or not specifier or not specifier.startswith("."):
            return None

        target = base_dir / specifier
        candidates = [target.with_name(target.name + ext) for ext in MODULE_EXTENSIONS]
        if target.suffix == ".js":
            candidates.insert(0, target.with_suffix(".ts"))
        candidates += [target / f"index{ext}" for ext in MODULE_EXTENSIONS]
        candidates.append(target)

        for candidate in candidates:
            if candidate.is_file() and self.parser.is_supported(candidate):
                return candidate.resolve()
        return None

    def _load_scope(self, path: Path, cache: dict[Path, Optional[TypeScope]]) -> Optional[TypeScope]:
        if path not in cache:
            cache[path] = None
            parsed = self.parser.parse_file(path)
            if parsed.tree is not None:
                scope = self._build_scope(parsed.tree.root_node, path.parent, path)
                scope.tree = parsed.tree
                cache[path] = scope
            else:
                logger.debug(f"Could not parse imported types from {path}")
        return cache[path]

    def _lookup_alias(
        self,
        scope: TypeScope,
        name: str,
        cache: dict[Path, Optional[TypeScope]],
        chain: frozenset,
    ) -> Optional[tuple[Node, TypeScope, frozenset]]:
        """
        Find the definition of a type name, following imports and `export *`.

        Returns:
            (value node, scope it was declared in, lookup chain), or None when
            the name is unknown or would loop back on itself
        """
        key = (scope.path, name)
        if key in chain:
            return None
        chain = chain | {key}

        if name in scope.aliases:
            return scope.aliases[name], scope, chain

        target = scope.imports.get(name)
        if target is not None:
            module, original = target
            other = self._load_scope(module, cache)
            return self._lookup_alias(other, original, cache, chain) if other is not None else None

        for module in scope.star_exports:
            other = self._load_scope(module, cache)
            found = self._lookup_alias(other, name, cache, chain) if other is not None else None
            if found is not None:
                return found
        return None

    def _allowed_values(
        self, type_node: Optional[Node], scope: TypeScope
    ) -> Optional[tuple[str, ...]]:
        """
        Members of a union made only of string literals.

        Type names (`variant: BadgeVariant`, or `Base` inside a union) are
        expanded through the file's aliases and its relative imports.
        Anything else yields None.
        """
        if type_node is None:
            return None

        cache: dict[Path, Optional[TypeScope]] = {}
        values: list[str] = []
        saw_union = False

        # (node, declaring scope, aliases expanded on the way here)
        stack = [(type_node, scope, frozenset())]
        while stack:
            node, node_scope, chain = stack.pop()

            if node.type == "union_type":
                saw_union = True
                members = [c for c in node.named_children if c.type != "comment"]
                stack.extend((m, node_scope, chain) for m in reversed(members))
            elif node.type == "parenthesized_type" and node.named_children:
                stack.append((node.named_children[0], node_scope, chain))
            elif node.type == "type_identifier":
                found = self._lookup_alias(node_scope, self.get_node_text(node), cache, chain)
                if found is None:
                    return None
                stack.append(found)
            else:
                literal = self._string_literal_type(node)
                if literal is None:
                    return None
                if literal not in values:
                    values.append(literal)

        if not saw_union or not values:
            return None
        return tuple(values)

    def _string_literal_type(self, node: Node) -> Optional[str]:
        if node.type != "literal_type":
            return None
        for child in node.named_children:
            if child.type == "string":
                return self.string_value(child)
        return None
