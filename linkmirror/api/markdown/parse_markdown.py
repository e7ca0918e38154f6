"""Markdown parser adapter over markdown-it-py."""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .MarkdownNode import MarkdownNode
from .NodeKind import NodeKind

_KINDS: dict[str, NodeKind] = {
    "root": NodeKind.DOCUMENT,
    "heading": NodeKind.HEADING,
    "link": NodeKind.LINK,
    "image": NodeKind.IMAGE,
    "fence": NodeKind.FENCED_CODE,
    "code_block": NodeKind.INDENTED_CODE,
    "code_inline": NodeKind.INLINE_CODE,
    "text": NodeKind.TEXT,
}


def _build_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    # Keep link destinations as written (no percent-encoding of non-ASCII).
    md.normalizeLink = lambda url: url  # type: ignore[method-assign]
    return md


_PARSER = _build_parser()


def _convert(node: SyntaxTreeNode) -> MarkdownNode:
    kind = _KINDS.get(node.type, NodeKind.OTHER)
    destination = None
    if kind is NodeKind.LINK:
        destination = str(node.attrs.get("href", ""))
    elif kind is NodeKind.IMAGE:
        destination = str(node.attrs.get("src", ""))

    literal = ""
    if kind in (NodeKind.TEXT, NodeKind.INLINE_CODE) or kind.is_code_block:
        literal = node.content

    line_range = None
    if kind is not NodeKind.DOCUMENT and node.map:
        line_range = (node.map[0], node.map[1])

    return MarkdownNode(
        kind=kind,
        literal=literal,
        destination=destination,
        children=tuple(_convert(child) for child in node.children),
        line_range=line_range,
    )


def parse_markdown(text: str) -> MarkdownNode:
    """Parse Markdown text into a MarkdownNode tree.

    Args:
        text: Markdown body (without front matter)

    Returns:
        DOCUMENT node whose children are the top-level blocks
    """
    if text is None:
        raise TypeError("text must not be None")
    return _convert(SyntaxTreeNode(_PARSER.parse(text)))
