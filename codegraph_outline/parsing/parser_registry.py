"""
Parser Registry for Tree-sitter

Loads grammars from tree-sitter-language-pack and caches one parser per language.
"""

try:
    from tree_sitter import Parser, Tree
    from tree_sitter_language_pack import get_language
except ImportError as e:
    raise ImportError(
        "tree-sitter-language-pack is required. " "Install with: pip install tree-sitter tree-sitter-language-pack"
    ) from e

from codegraph_outline.errors import ParseFailureError
from codegraph_outline.logging import get_logger
from codegraph_outline.parsing.source_file import SourceFile

logger = get_logger(__name__)


class ParserRegistry:
    """
    Registry for language parsers.

    Grammars are loaded on first use, so a run only pays for the
    language it is configured with.
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, object] = {}

    def _load_language(self, name: str) -> object | None:
        if name in self._languages:
            return self._languages[name]
        try:
            lang = get_language(name)
        except Exception as e:
            logger.warning("grammar_load_failed", language=name, error=str(e))
            return None
        self._languages[name] = lang
        logger.debug("grammar_loaded", language=name)
        return lang

    def get_parser(self, language: str) -> Parser | None:
        """
        Get parser for the specified language.

        Args:
            language: tree-sitter grammar name (rust, python, ...)

        Returns:
            Parser instance or None if language not supported
        """
        language = language.lower()

        if language in self._parsers:
            return self._parsers[language]

        lang = self._load_language(language)
        if lang is None:
            return None

        parser = Parser(lang)
        self._parsers[language] = parser
        return parser

    def supports_language(self, language: str) -> bool:
        """Check if language is supported"""
        return self._load_language(language.lower()) is not None

    def parse(self, source: SourceFile, language: str) -> Tree:
        """
        Parse source file into a tree-sitter tree.

        Raises:
            ParseFailureError: If language not supported or parsing fails
        """
        parser = self.get_parser(language)
        if parser is None:
            raise ParseFailureError(f"Language not supported: {language}", {"file": source.file_path})

        tree = parser.parse(source.data)
        if tree is None:
            raise ParseFailureError(f"Failed to parse file: {source.file_path}")

        return tree


# Global registry instance
_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
