"""Write a corrected document to disk."""

from pathlib import Path


def write_document(path: Path, content: str) -> None:
    """Write UTF-8 text to ``path``, creating parent directories."""
    if path is None or content is None:
        raise TypeError("path and content must not be None")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
