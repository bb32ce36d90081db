"""
Outline Converter

One request = read → parse → normalize → serialize → write.
Nothing is shared between requests except the cached parser.
"""

from pathlib import Path

from codegraph_outline.config import Settings, get_settings
from codegraph_outline.logging import ConversionLog, get_logger
from codegraph_outline.models import OutlineFile
from codegraph_outline.outline.naming import NameExtractor
from codegraph_outline.outline.normalizer import build_outline
from codegraph_outline.outline.serializer import OutlineSerializer
from codegraph_outline.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_outline.parsing.source_file import SourceFile

logger = get_logger(__name__)


class OutlineConverter:
    """
    Converts source files into outline documents.

    Example:
        converter = OutlineConverter()
        outline = converter.convert_file("src/lib.rs", "/tmp/lib.rs.json")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: ParserRegistry | None = None,
        name_extractor: NameExtractor | None = None,
        serializer: OutlineSerializer | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or get_registry()
        self.name_extractor = name_extractor
        self.serializer = serializer or OutlineSerializer(indent=self.settings.indent)

    def convert_source(self, source: SourceFile) -> OutlineFile:
        """
        Build the outline of a loaded source file.

        Raises:
            ParseFailureError: If the parser produces no tree
            RootExtractionError: If the root node cannot be normalized
        """
        tree = self.registry.parse(source, self.settings.language)
        return build_outline(
            tree.root_node,
            source,
            name_extractor=self.name_extractor,
            max_depth=self.settings.max_depth,
            detect_parse_errors=self.settings.detect_parse_errors,
        )

    def convert_text(self, text: str, file_path: str) -> OutlineFile:
        """Build the outline of in-memory source text."""
        return self.convert_source(SourceFile.from_content(file_path, text))

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        encoding: str = "utf-8",
    ) -> OutlineFile:
        """
        Convert one file and write its outline document to ``output_path``.

        Raises:
            InputUnavailableError: If the input cannot be read or decoded
            ParseFailureError: If the parser produces no tree
            RootExtractionError: If the root node cannot be normalized
            OutputWriteError: If the document cannot be written
        """
        with ConversionLog(logger, str(input_path), output=str(output_path)) as conversion:
            source = SourceFile.from_file(input_path, encoding=encoding)
            outline = conversion.record(self.convert_source(source))
            self.serializer.write(outline, output_path)
        return outline
