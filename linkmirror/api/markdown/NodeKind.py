"""Closed set of Markdown node kinds (UNO: single enum)."""

from enum import Enum


class NodeKind(Enum):
    """Kinds of nodes the link and heading visitors distinguish."""

    DOCUMENT = "document"
    HEADING = "heading"
    LINK = "link"
    IMAGE = "image"
    FENCED_CODE = "fenced_code"
    INDENTED_CODE = "indented_code"
    INLINE_CODE = "inline_code"
    TEXT = "text"
    OTHER = "other"

    @property
    def is_code_block(self) -> bool:
        """Whether this kind is a block-level literal code region."""
        return self in (NodeKind.FENCED_CODE, NodeKind.INDENTED_CODE)
