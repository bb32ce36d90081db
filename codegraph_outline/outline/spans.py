"""
Span conversion from parser positions to outline coordinates.

Parser rows are 0-indexed, outline lines are 1-indexed; columns stay
0-indexed byte offsets within the line. Byte offsets pass through unchanged.
"""

from codegraph_outline.models import CharSpan, LocationSpan
from codegraph_outline.parsing.protocol import RawNode, RawPoint


def convert_point(point: RawPoint) -> tuple[int, int]:
    """Convert a parser position to a (1-based line, 0-based column) pair."""
    return (point.row + 1, point.column)


def location_span(node: RawNode) -> LocationSpan:
    """Human-readable span of a node."""
    return LocationSpan(start=convert_point(node.start_point), end=convert_point(node.end_point))


def char_span(node: RawNode) -> CharSpan:
    """Absolute byte span of a node."""
    return CharSpan.of(node.start_byte, node.end_byte)
