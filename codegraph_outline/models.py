"""
Outline Models

Serializable semantic outline of one source file.

Architecture:
- Pure data model, no parser dependencies
- Immutable (frozen=True), built strictly bottom-up
- camelCase wire names, ``type`` carries the node kind

Wire contract:
    Container and Terminal are an *untagged* union. Both models forbid
    unknown keys, so an object is read back as a Container iff it carries
    ``children``. Adding an optional ``children`` field to Terminal would
    make the two shapes ambiguous.
"""

from collections.abc import Iterable, Iterator
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator
from pydantic.alias_generators import to_camel

# (0, -1): byte span reserved for regions that are not tracked yet
UNSET_SPAN: tuple[int, int] = (0, -1)

# Deepest node level (top-level nodes are level 1) a document may hold.
# Each level costs two JSON nesting levels (object + children array) and the
# deepest terminal adds two more; the JSON reader stops at 200, the writer a
# little above. Keep the normalizer depth guard at or below this.
MAX_OUTLINE_DEPTH = 90


class _OutlineModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CharSpan(RootModel[tuple[int, int]]):
    """
    Absolute byte-offset range ``[start, end]`` into the source (ByteSpan).

    Serialized transparently as a two element array. Values are signed so
    that ``(0, -1)`` can mark an unset span.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, start: int, end: int) -> "CharSpan":
        return cls((start, end))

    @classmethod
    def unset(cls) -> "CharSpan":
        return cls(UNSET_SPAN)

    @property
    def start(self) -> int:
        return self.root[0]

    @property
    def end(self) -> int:
        return self.root[1]

    @property
    def is_unset(self) -> bool:
        return self.root == UNSET_SPAN


class LocationSpan(_OutlineModel):
    """
    Human-readable location (HumanSpan).

    Attributes:
        start: (line, column) - line 1-indexed, column 0-indexed byte offset in the line
        end: (line, column) - same convention
    """

    start: tuple[int, int]
    end: tuple[int, int]

    @model_validator(mode="after")
    def _check_order(self) -> "LocationSpan":
        if self.start > self.end:
            raise ValueError(f"end {list(self.end)} must not precede start {list(self.start)}")
        return self

    def contains(self, other: "LocationSpan") -> bool:
        """Check if ``other`` lies within this span"""
        return self.start <= other.start and other.end <= self.end


class Terminal(_OutlineModel):
    """Childless outline node (identifier, literal, ...)."""

    item_type: str = Field(alias="type")
    name: str
    location_span: LocationSpan
    span: CharSpan


class Container(_OutlineModel):
    """Outline node owning at least one child, in source order."""

    item_type: str = Field(alias="type")
    name: str
    location_span: LocationSpan
    header_span: CharSpan
    footer_span: CharSpan = Field(default_factory=CharSpan.unset)
    children: list["OutlineNode"]


OutlineNode = Union[Container, Terminal]

Container.model_rebuild()


class ParsingError(_OutlineModel):
    """Whole-file parse error detail."""

    location: LocationSpan
    message: str


class OutlineFile(_OutlineModel):
    """
    Root record for one converted source file.

    ``children`` holds the top-level nodes; the parser's root node itself
    is never emitted.
    """

    item_type: str = Field(default="file", alias="type")
    name: str
    location_span: LocationSpan
    footer_span: CharSpan = Field(default_factory=CharSpan.unset)
    parsing_errors_detected: bool = False
    children: list[OutlineNode] = Field(default_factory=list)
    parsing_error: ParsingError | None = None


def iter_nodes(nodes: Iterable[OutlineNode]) -> Iterator[OutlineNode]:
    """Yield every node of the given forest, depth first in source order."""
    for node in nodes:
        yield node
        if isinstance(node, Container):
            yield from iter_nodes(node.children)
