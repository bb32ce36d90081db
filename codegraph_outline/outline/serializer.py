"""
Outline Serializer

Renders an OutlineFile as pretty-printed JSON with camelCase keys in
declaration order. Output is deterministic, so load → dump reproduces a
document byte for byte.
"""

from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from codegraph_outline.errors import InvalidDocumentError, OutputWriteError
from codegraph_outline.models import OutlineFile


class OutlineSerializer:
    """JSON codec for outline documents."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def dumps(self, outline: OutlineFile) -> str:
        """
        Raises:
            OutputWriteError: If the outline nests deeper than the JSON encoder allows
        """
        try:
            return outline.model_dump_json(by_alias=True, indent=self.indent or None)
        except PydanticSerializationError as e:
            raise OutputWriteError(f"Cannot serialize outline of {outline.name}: {e}") from e

    def loads(self, document: str | bytes) -> OutlineFile:
        """
        Raises:
            InvalidDocumentError: If the document is not a valid outline
        """
        try:
            return OutlineFile.model_validate_json(document)
        except ValidationError as e:
            raise InvalidDocumentError(
                f"Not an outline document: {e.error_count()} error(s)",
                {"first": e.errors()[0]["msg"]},
            ) from e

    def write(self, outline: OutlineFile, path: str | Path) -> str:
        """
        Serialize and write the full document, replacing any existing file.

        Returns:
            The written document

        Raises:
            OutputWriteError: If the file cannot be written
        """
        document = self.dumps(outline)
        try:
            Path(path).write_text(document, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Cannot write {path}: {e.strerror or e}") from e
        return document
