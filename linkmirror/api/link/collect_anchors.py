"""Heading anchor collection visitors."""

from ..markdown.MarkdownNode import MarkdownNode
from ..markdown.NodeKind import NodeKind
from .flatten_text import flatten_text
from .slugify import slugify


def collect_heading_slugs(tree: MarkdownNode) -> list[str]:
    """Slugs of all headings with non-empty text, in document order, duplicates kept."""
    slugs: list[str] = []
    for node in tree.walk():
        if node.kind is not NodeKind.HEADING:
            continue
        text = flatten_text(node)
        if text:
            slugs.append(slugify(text))
    return slugs


def collect_anchors(tree: MarkdownNode) -> frozenset[str]:
    """Set of anchor slugs a document defines (for existence checks)."""
    return frozenset(collect_heading_slugs(tree))
