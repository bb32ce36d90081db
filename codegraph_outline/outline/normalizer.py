"""
Tree Normalizer

Turns a raw parse tree into outline nodes.

Failure containment:
    ``normalize`` never raises for node-local problems. It returns a
    ``NodeResult`` that is either a built node or the reason it could not
    be built; ``collect_children`` keeps the successes and drops the rest,
    so one malformed subtree never invalidates its siblings or ancestors.
    Only the root has no parent to absorb a failure: ``build_outline``
    raises ``RootExtractionError`` in that case.

Classification:
    - No named children → Terminal
    - Named children, at least one surviving → Container
    - Named children, none surviving → failure (dropped by the parent)
    - Node at the depth limit → Terminal, its subtree cut off

Depth:
    The limit is capped at MAX_OUTLINE_DEPTH so every outline built here can
    be written and read back. Cutting a deep node off (instead of dropping
    it) keeps its ancestors in the outline.
"""

from dataclasses import dataclass

from codegraph_outline.errors import NodeExtractionError, RootExtractionError
from codegraph_outline.logging import get_logger
from codegraph_outline.models import (
    CharSpan,
    Container,
    MAX_OUTLINE_DEPTH,
    LocationSpan,
    OutlineFile,
    OutlineNode,
    Terminal,
)
from codegraph_outline.outline.naming import NameExtractor, default_name_extractor
from codegraph_outline.outline.spans import char_span, location_span
from codegraph_outline.parsing.protocol import RawNode
from codegraph_outline.parsing.source_file import SourceFile

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = MAX_OUTLINE_DEPTH


@dataclass(frozen=True)
class NodeResult:
    """Outcome of normalizing one raw node."""

    kind: str
    node: OutlineNode | None = None
    error: NodeExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.node is not None

    @classmethod
    def success(cls, kind: str, node: OutlineNode) -> "NodeResult":
        return cls(kind=kind, node=node)

    @classmethod
    def failure(cls, kind: str, error: NodeExtractionError) -> "NodeResult":
        return cls(kind=kind, error=error)


class TreeNormalizer:
    """
    Normalizes the nodes of one parse tree.

    A normalizer is bound to a single source file and discarded with it.
    """

    def __init__(
        self,
        source: SourceFile,
        name_extractor: NameExtractor | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.source = source
        self.name_extractor = name_extractor or default_name_extractor
        self.max_depth = min(max_depth, MAX_OUTLINE_DEPTH)
        self.dropped = 0
        self.truncated = 0

    def node_name(self, node: RawNode) -> str:
        """
        Display name of a node.

        Raises:
            NameExtractionError: Propagated from the name extractor
        """
        text = self.source.text_slice(node.start_byte, node.end_byte)
        return self.name_extractor(node.type, text)

    def normalize(self, node: RawNode, depth: int = 0) -> NodeResult:
        """
        Normalize a node and its subtree.

        Args:
            node: Raw parse tree node
            depth: Nesting depth of ``node`` below the tree root

        Returns:
            NodeResult holding either the outline node or the failure
        """
        kind = node.type

        try:
            name = self.node_name(node)
        except NodeExtractionError as e:
            return NodeResult.failure(kind, e)

        if node.named_child_count > 0 and depth >= self.max_depth:
            self.truncated += 1
            logger.debug("subtree_truncated", kind=kind, depth=depth)

        if node.named_child_count == 0 or depth >= self.max_depth:
            return NodeResult.success(
                kind,
                Terminal(
                    item_type=kind,
                    name=name,
                    location_span=location_span(node),
                    span=char_span(node),
                ),
            )

        results = []
        for child in node.named_children:
            results.append(self.normalize(child, depth + 1))
        children = self.collect_children(results)

        if not children:
            return NodeResult.failure(
                kind,
                NodeExtractionError(f"No child of {kind} survived normalization", {"name": name}),
            )

        return NodeResult.success(
            kind,
            Container(
                item_type=kind,
                name=name,
                location_span=location_span(node),
                header_span=char_span(node),
                footer_span=CharSpan.unset(),
                children=children,
            ),
        )

    def collect_children(self, results: list[NodeResult]) -> list[OutlineNode]:
        """Keep successful results in order, dropping failed subtrees."""
        children = []
        for result in results:
            if result.ok:
                children.append(result.node)
            else:
                self.dropped += 1
                logger.debug("node_dropped", kind=result.kind, reason=str(result.error))
        return children


def file_location_span(source: SourceFile) -> LocationSpan:
    """Span covering the whole file: line 1 column 0 to the end of the last line."""
    end_line = max(source.line_count, 1)
    return LocationSpan(start=(1, 0), end=(end_line, source.last_line_width))


def build_outline(
    root: RawNode,
    source: SourceFile,
    name_extractor: NameExtractor | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    detect_parse_errors: bool = True,
) -> OutlineFile:
    """
    Build the outline of one file from its parse tree root.

    The root only anchors the traversal: its named children become the
    file's top-level children and the root itself is never emitted.

    Args:
        root: Parse tree root node
        source: Source file the tree was parsed from
        name_extractor: Naming strategy (heuristic by default)
        max_depth: Deepest node level kept (capped at MAX_OUTLINE_DEPTH)
        detect_parse_errors: Report the parser's error flag in ``parsingErrorsDetected``

    Raises:
        RootExtractionError: If the root node itself cannot be named
    """
    normalizer = TreeNormalizer(source, name_extractor=name_extractor, max_depth=max_depth)

    try:
        normalizer.node_name(root)
    except NodeExtractionError as e:
        raise RootExtractionError(f"Cannot normalize root of {source.file_path}: {e.message}", e.details) from e

    results = []
    for child in root.named_children:
        results.append(normalizer.normalize(child, depth=1))
    children = normalizer.collect_children(results)

    if normalizer.dropped:
        logger.debug("subtrees_dropped", file=source.file_path, count=normalizer.dropped)
    if normalizer.truncated:
        logger.debug("subtrees_truncated", file=source.file_path, count=normalizer.truncated)

    return OutlineFile(
        name=source.file_path,
        location_span=file_location_span(source),
        parsing_errors_detected=detect_parse_errors and bool(root.has_error),
        children=children,
    )
