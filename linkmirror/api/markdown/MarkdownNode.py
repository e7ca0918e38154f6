"""Markdown syntax tree node (UNO: single model)."""

from collections.abc import Iterator
from dataclasses import dataclass

from .NodeKind import NodeKind


@dataclass(frozen=True)
class MarkdownNode:
    """A node of a parsed Markdown document.

    ``literal`` holds the text of TEXT, INLINE_CODE and code block nodes,
    ``destination`` the URL of LINK and IMAGE nodes. ``line_range`` is the
    half-open, zero-based line span of block nodes when the parser reports one.
    """

    kind: NodeKind
    literal: str = ""
    destination: str | None = None
    children: tuple["MarkdownNode", ...] = ()
    line_range: tuple[int, int] | None = None

    def walk(self) -> Iterator["MarkdownNode"]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()
