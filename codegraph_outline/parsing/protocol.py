"""Structural contracts for the parse tree nodes the outline builder reads.

``tree_sitter.Node`` satisfies these protocols as-is; tests supply
lightweight in-memory nodes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class RawPoint(Protocol):
    """Parser position: 0-based row and 0-based byte column."""

    @property
    def row(self) -> int: ...

    @property
    def column(self) -> int: ...


class RawNode(Protocol):
    """Read-only view of one parse tree node."""

    @property
    def type(self) -> str:
        """Return the grammar kind label."""
        ...

    @property
    def named_child_count(self) -> int:
        """Return the number of named (non-punctuation) children."""
        ...

    @property
    def named_children(self) -> Sequence[RawNode]:
        """Return named children in source order."""
        ...

    @property
    def start_point(self) -> RawPoint: ...

    @property
    def end_point(self) -> RawPoint: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def has_error(self) -> bool:
        """Return whether this subtree contains syntax errors."""
        ...


__all__ = ["RawNode", "RawPoint"]
