"""
Source File representation
"""

import codecs
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from codegraph_outline.errors import InputUnavailableError


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on ``\\n``.

    A trailing newline does not open a new line and a trailing ``\\r``
    is not part of its line. Other Unicode line breaks are kept as text.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class SourceFile:
    """
    Represents a source code file.

    Attributes:
        file_path: Path as supplied by the caller
        content: Decoded file content
        encoding: Encoding the content was decoded from
    """

    file_path: str
    content: str
    encoding: str = "utf-8"

    @classmethod
    def from_file(cls, file_path: str | Path, encoding: str = "utf-8") -> "SourceFile":
        """
        Load source file from disk.

        Args:
            file_path: Path to file
            encoding: Encoding name (any codec Python knows)

        Returns:
            SourceFile instance

        Raises:
            InputUnavailableError: If the file is missing, unreadable or cannot be decoded
        """
        try:
            codec = codecs.lookup(encoding)
        except LookupError as e:
            raise InputUnavailableError(f"Unknown encoding: {encoding}", {"file": str(file_path)}) from e

        try:
            raw = Path(file_path).read_bytes()
        except OSError as e:
            raise InputUnavailableError(f"Cannot read {file_path}: {e.strerror or e}") from e

        try:
            content = raw.decode(codec.name)
        except UnicodeDecodeError as e:
            raise InputUnavailableError(
                f"Cannot decode {file_path} as {codec.name}",
                {"position": e.start},
            ) from e

        return cls(file_path=str(file_path), content=content, encoding=codec.name)

    @classmethod
    def from_content(cls, file_path: str, content: str) -> "SourceFile":
        """Create source file from content string."""
        return cls(file_path=file_path, content=content)

    @cached_property
    def data(self) -> bytes:
        """UTF-8 bytes handed to the parser; byte spans index into these."""
        return self.content.encode("utf-8")

    @cached_property
    def lines(self) -> list[str]:
        return split_lines(self.content)

    def text_slice(self, start_byte: int, end_byte: int) -> str:
        """
        Get text between two byte offsets.

        Out-of-range offsets or a slice that is not valid UTF-8 yield ``""``.
        """
        if not 0 <= start_byte <= end_byte <= len(self.data):
            return ""
        try:
            return self.data[start_byte:end_byte].decode("utf-8")
        except UnicodeDecodeError:
            return ""

    @property
    def line_count(self) -> int:
        """Get total number of lines"""
        return len(self.lines)

    @property
    def last_line_width(self) -> int:
        """Byte width of the last line (0 for an empty file)"""
        if not self.lines:
            return 0
        return len(self.lines[-1].encode("utf-8"))

    @property
    def byte_size(self) -> int:
        """Get content size in UTF-8 bytes"""
        return len(self.data)
