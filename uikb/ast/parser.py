"""
Tree-sitter Grammars

Loads the grammars a component library needs (TypeScript, TSX, Markdown)
and parses text into syntax trees. Tree-sitter recovers from bad input by
emitting ERROR nodes instead of raising, so a half-written stories file
still yields every well-formed declaration around the damage.
"""

import threading
from pathlib import Path
from typing import Callable, NamedTuple, Optional

import tree_sitter_markdown
import tree_sitter_typescript
from tree_sitter import Language, Parser, Tree

from uikb.configs.logging import get_logger

logger = get_logger("ast.parser")


GRAMMARS: dict[str, Callable[[], object]] = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
    "markdown": tree_sitter_markdown.language,
}

# Plain JS goes through the TypeScript grammar; MDX is read as Markdown
EXTENSION_TO_LANGUAGE = {
    **dict.fromkeys((".ts", ".mts", ".cts", ".js", ".mjs", ".cjs"), "typescript"),
    **dict.fromkeys((".tsx", ".jsx"), "tsx"),
    **dict.fromkeys((".md", ".mdx", ".markdown"), "markdown"),
}


class ParsedFile(NamedTuple):
    tree: Optional[Tree]
    language: Optional[str]
    source: Optional[str]


NOT_PARSED = ParsedFile(None, None, None)


class ASTParser:
    """
    Grammar registry plus per-thread parsers.

    `Language` objects are immutable and shared. `Parser` objects hold
    mutable state, so each worker thread builds its own on first use.
    """

    def __init__(self):
        self._languages: dict[str, Language] = {}
        self._load_lock = threading.Lock()
        self._local = threading.local()

    def _language(self, name: str) -> Optional[Language]:
        with self._load_lock:
            if name not in self._languages:
                grammar = GRAMMARS.get(name)
                if grammar is None:
                    logger.warning(f"No grammar for language: {name}")
                    return None
                try:
                    self._languages[name] = Language(grammar())
                except Exception as e:
                    logger.error(f"Could not load {name} grammar: {e}")
                    return None
            return self._languages[name]

    def _get_parser(self, name: str) -> Optional[Parser]:
        """This thread's parser for `name`, created on first use."""
        cache: dict[str, Parser] = self._local.__dict__.setdefault("parsers", {})
        if name not in cache:
            language = self._language(name)
            if language is None:
                return None
            cache[name] = Parser(language)
        return cache[name]

    def detect_language(self, file_path: str | Path) -> Optional[str]:
        """
        Grammar name for a path, by extension.

        Returns:
            "typescript", "tsx", "markdown", or None when unsupported
        """
        return EXTENSION_TO_LANGUAGE.get(Path(file_path).suffix.lower())

    def is_supported(self, file_path: str | Path) -> bool:
        return self.detect_language(file_path) is not None

    def parse(self, source: str, language: str) -> Optional[Tree]:
        """
        Parse text with the named grammar.

        Returns:
            The syntax tree (possibly containing ERROR nodes), or None when
            the grammar is unavailable
        """
        parser = self._get_parser(language)
        if parser is None:
            return None
        try:
            return parser.parse(source.encode("utf-8"))
        except Exception as e:
            logger.error(f"tree-sitter failed on {language} input: {e}")
            return None

    def parse_file(self, file_path: str | Path) -> ParsedFile:
        """
        Read and parse a file, picking the grammar from its extension.

        Returns:
            ParsedFile(tree, language, source); all None when the file is
            unsupported, unreadable or unparseable
        """
        language = self.detect_language(file_path)
        if language is None:
            return NOT_PARSED

        try:
            source = Path(file_path).read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.error(f"Cannot read {file_path}: {e}")
            return NOT_PARSED

        tree = self.parse(source, language)
        if tree is None:
            return NOT_PARSED
        return ParsedFile(tree, language, source)


_parser: Optional[ASTParser] = None


def get_parser() -> ASTParser:
    """Process-wide ASTParser, created lazily."""
    global _parser
    if _parser is None:
        _parser = ASTParser()
    return _parser
