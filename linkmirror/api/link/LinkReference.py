"""Parsed link destination (UNO: single model)."""

from dataclasses import dataclass

EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "ftp://", "//")


def is_external_destination(value: str) -> bool:
    """Check whether a destination starts with an external scheme or ``//``."""
    return value.lower().startswith(EXTERNAL_PREFIXES)


@dataclass(frozen=True)
class LinkReference:
    """A link or image destination split into path and anchor.

    External references carry neither path nor anchor. ``path`` may still
    be followed by an ``anchor`` (``guide.md#setup``).
    """

    raw: str
    path: str | None
    anchor: str | None
    is_external: bool
    is_absolute: bool

    @property
    def is_anchor_only(self) -> bool:
        """Whether this is a ``#slug`` reference into the same document."""
        return self.path is None and self.anchor is not None

    @staticmethod
    def parse(raw: str) -> "LinkReference":
        """Parse a raw destination string. Never fails for a string input."""
        if raw is None:
            raise TypeError("raw must not be None")

        if is_external_destination(raw):
            return LinkReference(raw=raw, path=None, anchor=None, is_external=True, is_absolute=False)

        hash_index = raw.find("#")
        if hash_index == 0:
            return LinkReference(raw=raw, path=None, anchor=raw[1:], is_external=False, is_absolute=False)
        if hash_index > 0:
            path, anchor = raw[:hash_index], raw[hash_index + 1 :]
        else:
            path, anchor = raw, None

        return LinkReference(raw=raw, path=path, anchor=anchor, is_external=False, is_absolute=path.startswith("/"))
