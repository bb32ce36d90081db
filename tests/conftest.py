"""
Global test configuration and fixtures
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

import pytest

from codegraph_outline.models import CharSpan, Container, LocationSpan, OutlineNode, Terminal
from codegraph_outline.parsing.source_file import SourceFile


class FakePoint(NamedTuple):
    row: int
    column: int


@dataclass
class FakeNode:
    """In-memory stand-in for ``tree_sitter.Node``."""

    type: str
    start_byte: int
    end_byte: int
    start_point: FakePoint
    end_point: FakePoint
    named_children: list["FakeNode"] = field(default_factory=list)
    has_error: bool = False

    @property
    def named_child_count(self) -> int:
        return len(self.named_children)


def point_at(data: bytes, offset: int) -> FakePoint:
    """Row/column (both 0-based) of a byte offset, the way tree-sitter reports it."""
    offset = min(offset, len(data))
    row = data.count(b"\n", 0, offset)
    line_start = data.rfind(b"\n", 0, offset) + 1
    return FakePoint(row, offset - line_start)


NodeFactory = Callable[..., FakeNode]


@pytest.fixture
def make_node() -> NodeFactory:
    """
    Build fake nodes over a source text.

    Example:
        node = make_node(source, "identifier", "foo", children=[...])
    """

    def _make(
        source: SourceFile,
        kind: str,
        text: str | None = None,
        children: list[FakeNode] | None = None,
        start: int | None = None,
        end: int | None = None,
        has_error: bool = False,
    ) -> FakeNode:
        data = source.data
        if start is None:
            if text is None:
                start, end = 0, len(data)
            else:
                start = data.index(text.encode("utf-8"))
                end = start + len(text.encode("utf-8"))
        elif end is None:
            end = start
        return FakeNode(
            type=kind,
            start_byte=start,
            end_byte=end,
            start_point=point_at(data, start),
            end_point=point_at(data, end),
            named_children=children or [],
            has_error=has_error,
        )

    return _make


@pytest.fixture
def make_chain(make_node) -> Callable[..., tuple[SourceFile, FakeNode]]:
    """
    Build a source file whose tree nests ``depth`` nodes below the root.

    The source is ``((( x )))`` style text; the innermost node is an identifier.
    """

    def _make(depth: int, file_path: str = "deep.rs", kind: str = "parenthesized_expression"):
        source = SourceFile.from_content(file_path, "(" * (depth - 1) + "x" + ")" * (depth - 1))
        node = make_node(source, "identifier", start=depth - 1, end=depth)
        for _ in range(depth - 1):
            node = make_node(source, kind, start=node.start_byte - 1, end=node.end_byte + 1, children=[node])
        return source, make_node(source, "source_file", children=[node])

    return _make


@pytest.fixture
def nest() -> Callable[[int], OutlineNode]:
    """Build a single-line outline node chain ``depth`` levels deep, bypassing the depth limit."""

    def _nest(depth: int) -> OutlineNode:
        node = Terminal(
            item_type="identifier",
            name="x",
            location_span=LocationSpan(start=(1, 0), end=(1, 1)),
            span=CharSpan.of(0, 1),
        )
        for _ in range(depth - 1):
            node = Container(
                item_type="parenthesized_expression",
                name="parenthesized_expression",
                location_span=LocationSpan(start=(1, 0), end=(1, 1)),
                header_span=CharSpan.of(0, 1),
                children=[node],
            )
        return node

    return _nest


# Pytest hooks
def pytest_configure(config):
    """Register test markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (real tree-sitter grammar)")


def pytest_collection_modifyitems(config, items):
    """Mark tests by directory."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
