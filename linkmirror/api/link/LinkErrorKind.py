"""Link validation error kinds."""

from enum import Enum


class LinkErrorKind(str, Enum):
    FILE_NOT_FOUND = "file_not_found"
    ANCHOR_NOT_FOUND = "anchor_not_found"
