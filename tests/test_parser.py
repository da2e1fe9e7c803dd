"""
Tests for the tree-sitter parser layer.
"""

import threading

from uikb.ast.parser import EXTENSION_TO_LANGUAGE, ASTParser, get_parser


class TestLanguageDetection:
    """Test language detection from file extensions."""

    def test_typescript_extensions(self):
        parser = get_parser()
        assert parser.detect_language("badge.component.ts") == "typescript"
        assert parser.detect_language("badge.stories.ts") == "typescript"
        assert parser.detect_language("index.js") == "typescript"  # JS uses TS parser
        assert parser.detect_language("App.tsx") == "tsx"

    def test_markdown_extensions(self):
        parser = get_parser()
        assert parser.detect_language("badge.doc.mdx") == "markdown"
        assert parser.detect_language("README.md") == "markdown"

    def test_unsupported_extensions(self):
        parser = get_parser()
        assert parser.detect_language("main.py") is None
        assert parser.detect_language("styles.scss") is None
        assert not parser.is_supported("badge.component.html")

    def test_extension_map_covers_languages(self):
        assert set(EXTENSION_TO_LANGUAGE.values()) == {"typescript", "tsx", "markdown"}


class TestParsing:
    """Test parsing text and files."""

    def test_parse_typescript(self):
        tree = get_parser().parse("export const x = 1;", "typescript")
        assert tree is not None
        assert tree.root_node.type == "program"
        assert not tree.root_node.has_error

    def test_parse_markdown(self):
        tree = get_parser().parse("# Title\n\nSome text.\n", "markdown")
        assert tree is not None
        assert tree.root_node.type == "document"

    def test_malformed_input_does_not_raise(self):
        tree = get_parser().parse("const meta = { title: 'Card };\nexport const", "typescript")
        assert tree is not None
        assert tree.root_node.has_error

    def test_unknown_language(self):
        assert ASTParser().parse("x", "cobol") is None

    def test_parse_file(self, temp_dir):
        path = temp_dir / "x.component.ts"
        path.write_text("class X {}", encoding="utf-8")

        tree, language, source = get_parser().parse_file(path)
        assert tree is not None
        assert language == "typescript"
        assert source == "class X {}"

    def test_parse_missing_file(self, temp_dir):
        assert get_parser().parse_file(temp_dir / "missing.ts") == (None, None, None)

    def test_parse_unsupported_file(self, temp_dir):
        path = temp_dir / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        assert get_parser().parse_file(path) == (None, None, None)


class TestThreadSafety:
    """Parsers are per thread, languages are shared."""

    def test_parser_per_thread(self):
        parser = ASTParser()
        main_parser = parser._get_parser("typescript")
        other = {}

        def worker():
            other["parser"] = parser._get_parser("typescript")

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert other["parser"] is not None
        assert other["parser"] is not main_parser
        assert parser._get_parser("typescript") is main_parser
        assert len(parser._languages) == 1

    def test_singleton(self):
        assert get_parser() is get_parser()
