"""
Display name extraction for outline nodes.

The extractor is a swappable strategy: anything matching ``NameExtractor``
can be handed to the normalizer, e.g. a grammar-aware implementation.
"""

from typing import Protocol

from codegraph_outline.errors import NameExtractionError


class NameExtractor(Protocol):
    """Derive a display name from a node kind and its source text."""

    def __call__(self, kind: str, text: str) -> str:
        """
        Returns:
            Display name

        Raises:
            NameExtractionError: If no name can be derived
        """
        ...


class HeuristicNameExtractor:
    """
    Name declarations by stripping punctuation and keywords from their text.

    Only kinds that look like declarations (containing ``identifier`` or
    ``item``) are named after their text; every other node is named after
    its kind. Stripping is literal substring replacement, so an identifier
    that contains a stripped keyword (``fnord``, ``republic``) comes out
    mangled.
    """

    NAMED_KIND_MARKERS: tuple[str, ...] = ("identifier", "item")
    STRIPPED_TOKENS: tuple[str, ...] = (
        "{",
        "}",
        "(",
        ")",
        ":",
        "#",
        "[",
        "]",
        "fn",
        "struct",
        "enum",
        "pub",
    )

    def is_named_kind(self, kind: str) -> bool:
        return any(marker in kind for marker in self.NAMED_KIND_MARKERS)

    def strip(self, text: str) -> str:
        for token in self.STRIPPED_TOKENS:
            text = text.replace(token, " ")
        return text

    def __call__(self, kind: str, text: str) -> str:
        if not self.is_named_kind(kind):
            return kind

        words = self.strip(text).split()
        if not words:
            raise NameExtractionError(f"No name left in {kind} text", {"text": text[:80]})
        return words[0]


default_name_extractor = HeuristicNameExtractor()
