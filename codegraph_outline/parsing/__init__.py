"""
Parsing Layer

Tree-sitter based parsing infrastructure.

Components:
- protocol: structural node contracts consumed by the outline builder
- parser_registry: grammar and parser management
- source_file: source file representation
"""

from codegraph_outline.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_outline.parsing.protocol import RawNode, RawPoint
from codegraph_outline.parsing.source_file import SourceFile, split_lines

__all__ = [
    "ParserRegistry",
    "get_registry",
    "RawNode",
    "RawPoint",
    "SourceFile",
    "split_lines",
]
