"""Ordered heading anchors of one document (UNO: single class)."""

from collections.abc import Iterable

from ..markdown.MarkdownNode import MarkdownNode
from .collect_anchors import collect_heading_slugs


class HeadingAnchorIndex:
    """Heading slugs in document order, duplicates preserved.

    Position in this sequence is the key that relates a heading in a source
    document to the heading at the same position in its translation.
    """

    def __init__(self, anchors: Iterable[str]):
        if anchors is None:
            raise TypeError("anchors must not be None")
        self._anchors = tuple(anchors)

    @classmethod
    def from_tree(cls, tree: MarkdownNode) -> "HeadingAnchorIndex":
        """Build the index from a parsed document."""
        if tree is None:
            raise TypeError("tree must not be None")
        return cls(collect_heading_slugs(tree))

    @property
    def anchors(self) -> tuple[str, ...]:
        return self._anchors

    def size(self) -> int:
        return len(self._anchors)

    def __len__(self) -> int:
        return len(self._anchors)

    def get(self, index: int) -> str:
        """Slug at ``index``.

        Raises:
            IndexError: If ``index`` is out of range
        """
        if index < 0:
            raise IndexError(f"Negative heading index: {index}")
        return self._anchors[index]

    def index_of(self, anchor: str) -> int | None:
        """Position of the first heading whose slug equals ``anchor`` case-insensitively."""
        if anchor is None:
            raise TypeError("anchor must not be None")
        wanted = anchor.lower()
        for position, slug in enumerate(self._anchors):
            if slug == wanted:
                return position
        return None

    def __repr__(self) -> str:
        return f"HeadingAnchorIndex({list(self._anchors)!r})"
