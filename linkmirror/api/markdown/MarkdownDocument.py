"""Markdown document with YAML front matter (UNO: single class)."""

import re
from functools import cached_property
from typing import Any

import yaml

from .MarkdownNode import MarkdownNode
from .parse_markdown import parse_markdown

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


class MarkdownDocument:
    """A Markdown document split into YAML front matter and body.

    Front matter values are exposed as lists of strings per key. Values that
    are never modified keep their original YAML type when the front matter is
    serialized again.
    """

    def __init__(self, content: str):
        if content is None:
            raise TypeError("content must not be None")
        self.raw = content
        self._front_matter_text = ""
        self._data: dict[str, Any] = {}
        self._body = content

        match = FRONT_MATTER_PATTERN.match(content)
        if match:
            try:
                loaded = yaml.safe_load(match.group(1))
            except yaml.YAMLError:
                loaded = None
            # Only a mapping counts as front matter; anything else stays in the body
            if isinstance(loaded, dict):
                self._front_matter_text = match.group(0)
                self._data = {str(key): value for key, value in loaded.items()}
                self._body = content[match.end() :]

        self._modified = False

    @property
    def body(self) -> str:
        """Document content after the front matter block."""
        return self._body

    @property
    def front_matter_text(self) -> str:
        """Raw front matter block as it appeared in the input, including delimiters."""
        return self._front_matter_text

    @cached_property
    def tree(self) -> MarkdownNode:
        """Parsed syntax tree of the body."""
        return parse_markdown(self._body)

    @property
    def properties(self) -> dict[str, list[str]]:
        """Front matter as key -> list of string values (copy)."""
        return {key: _as_strings(value) for key, value in self._data.items()}

    def raw_value(self, key: str) -> Any:
        """Front matter value with its original YAML type, or None."""
        return self._data.get(key)

    def get_property(self, key: str) -> str | None:
        """First string value of a front matter field, or None."""
        values = _as_strings(self._data.get(key))
        return values[0] if values else None

    def set_property(self, key: str, value: Any) -> None:
        """Replace a front matter field value."""
        if key is None or value is None:
            raise TypeError("key and value must not be None")
        self._data[key] = value
        self._modified = True

    def serialize_front_matter(self) -> str:
        """Front matter block for reassembly.

        The original text is returned untouched unless a property was set.
        """
        if not self._modified:
            return self._front_matter_text
        if not self._data:
            return ""
        dumped = yaml.safe_dump(self._data, sort_keys=False, allow_unicode=True, default_flow_style=False)
        return f"---\n{dumped}---\n"


def _as_strings(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item) for item in value if item is not None]
    return [str(value)]
