"""
Codegraph Outline Exception Hierarchy

Error handling guide:
    1. Node-local failures (NameExtractionError, NodeExtractionError)
       → absorbed by the parent node, subtree dropped
    2. Whole-file failures (InputUnavailableError, ParseFailureError,
       RootExtractionError, OutputWriteError) → reported to the driver
    3. External errors → wrapped in a custom exception

Example:
    try:
        content = path.read_bytes()
    except OSError as e:
        raise InputUnavailableError(f"Cannot read {path}") from e
"""

from typing import Any


class OutlineError(Exception):
    """Base exception for all outline conversion errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize outline error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# ============================================================
# Whole-file errors
# ============================================================


class FileConversionError(OutlineError):
    """Failure that aborts the conversion of one file."""

    pass


class InputUnavailableError(FileConversionError):
    """Input path cannot be read (missing, permission, encoding)."""

    pass


class ParseFailureError(FileConversionError):
    """The parser produced no tree for the input."""

    pass


class RootExtractionError(FileConversionError):
    """The root node could not be normalized."""

    pass


class OutputWriteError(FileConversionError):
    """The serialized outline could not be written."""

    pass


# ============================================================
# Node-local errors
# ============================================================


class NodeExtractionError(OutlineError):
    """A single node (and its subtree) could not be normalized."""

    pass


class NameExtractionError(NodeExtractionError):
    """No display name could be derived from the node text."""

    pass


# ============================================================
# Document errors
# ============================================================


class InvalidDocumentError(OutlineError):
    """A serialized outline could not be read back."""

    pass
