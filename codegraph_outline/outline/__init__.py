"""
Outline Layer

Raw parse tree → normalized outline → serialized document.
"""

from codegraph_outline.outline.naming import HeuristicNameExtractor, NameExtractor
from codegraph_outline.outline.normalizer import NodeResult, TreeNormalizer, build_outline
from codegraph_outline.outline.serializer import OutlineSerializer
from codegraph_outline.outline.spans import char_span, convert_point, location_span

__all__ = [
    "HeuristicNameExtractor",
    "NameExtractor",
    "NodeResult",
    "TreeNormalizer",
    "build_outline",
    "OutlineSerializer",
    "char_span",
    "convert_point",
    "location_span",
]
