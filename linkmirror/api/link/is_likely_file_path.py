"""Heuristic for front matter values that look like file paths."""

import re

from .LinkReference import is_external_destination

_FILE_EXTENSION = re.compile(r".*\.\w+$")


def is_likely_file_path(value: str) -> bool:
    """Check whether a front matter value looks like a relative file path.

    Blank, external and root-absolute values never qualify. Otherwise a value
    qualifies when it contains a path separator or ends with an extension.
    """
    if value is None or not value.strip():
        return False
    if is_external_destination(value) or value.startswith("/"):
        return False
    if "/" in value or "\\" in value:
        return True
    return bool(_FILE_EXTENSION.match(value))
