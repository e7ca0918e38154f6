"""Link collection visitor."""

from ..markdown.MarkdownNode import MarkdownNode
from ..markdown.NodeKind import NodeKind
from .LinkReference import LinkReference


def collect_links(tree: MarkdownNode) -> list[LinkReference]:
    """Collect link and image destinations in document order.

    Code blocks are not entered: links shown there are examples, not references.

    Args:
        tree: Parsed document

    Returns:
        One LinkReference per link or image with a non-empty destination
    """
    links: list[LinkReference] = []
    _visit(tree, links)
    return links


def _visit(node: MarkdownNode, links: list[LinkReference]) -> None:
    if node.kind.is_code_block:
        return
    if node.kind in (NodeKind.LINK, NodeKind.IMAGE) and node.destination:
        links.append(LinkReference.parse(node.destination))
    for child in node.children:
        _visit(child, links)
