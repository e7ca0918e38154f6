"""Heading text to anchor slug."""

import re

# ASCII whitespace only; U+00A0 and other Unicode spaces are dropped, not hyphenated
_SPACE = r" \t\n\x0b\f\r"
# Anything but letters, digits, whitespace and hyphens (``\w`` minus underscore)
_DISALLOWED = re.compile(rf"[^\w{_SPACE}-]|_")
_WHITESPACE = re.compile(rf"[{_SPACE}]")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def slugify(text: str) -> str:
    """Convert heading text to an anchor slug.

    Each whitespace character becomes one hyphen; runs are not collapsed,
    so ``"Open / remap ports"`` gives ``"open--remap-ports"``. Non-ASCII
    letters are kept as they are; non-ASCII spaces such as U+00A0 are removed.

    Args:
        text: Flattened heading text

    Returns:
        Slug, possibly empty
    """
    slug = _DISALLOWED.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug)
    return _EDGE_HYPHENS.sub("", slug)
