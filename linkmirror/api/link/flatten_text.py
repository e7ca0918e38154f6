"""Plain text of a Markdown node."""

from ..markdown.MarkdownNode import MarkdownNode
from ..markdown.NodeKind import NodeKind


def flatten_text(node: MarkdownNode) -> str:
    """Concatenate text and inline code literals below ``node`` in document order."""
    parts: list[str] = []
    _collect(node, parts)
    return "".join(parts)


def _collect(node: MarkdownNode, parts: list[str]) -> None:
    if node.kind in (NodeKind.TEXT, NodeKind.INLINE_CODE):
        parts.append(node.literal)
        return
    for child in node.children:
        _collect(child, parts)
