"""
Codegraph Outline

Converts tree-sitter parse trees into serializable semantic outlines:
containers (nodes with children) and terminals (leaves), each with
line/column and byte-offset locations.
"""

__version__ = "0.1.0"

from .converter import OutlineConverter
from .errors import (
    FileConversionError,
    InputUnavailableError,
    InvalidDocumentError,
    NameExtractionError,
    NodeExtractionError,
    OutlineError,
    OutputWriteError,
    ParseFailureError,
    RootExtractionError,
)
from .models import CharSpan, Container, LocationSpan, OutlineFile, OutlineNode, ParsingError, Terminal
from .outline import HeuristicNameExtractor, OutlineSerializer, TreeNormalizer, build_outline

__all__ = [
    "OutlineConverter",
    "FileConversionError",
    "InputUnavailableError",
    "InvalidDocumentError",
    "NameExtractionError",
    "NodeExtractionError",
    "OutlineError",
    "OutputWriteError",
    "ParseFailureError",
    "RootExtractionError",
    "CharSpan",
    "Container",
    "LocationSpan",
    "OutlineFile",
    "OutlineNode",
    "ParsingError",
    "Terminal",
    "HeuristicNameExtractor",
    "OutlineSerializer",
    "TreeNormalizer",
    "build_outline",
]
