"""Markdown parsing collaborator: syntax tree and front matter model."""

from .MarkdownDocument import MarkdownDocument
from .MarkdownNode import MarkdownNode
from .NodeKind import NodeKind
from .parse_markdown import parse_markdown

__all__ = [
    "MarkdownDocument",
    "MarkdownNode",
    "NodeKind",
    "parse_markdown",
]
