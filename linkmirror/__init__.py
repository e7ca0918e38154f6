"""linkmirror - link integrity and anchor correction for mirrored Markdown trees."""

__version__ = "0.1.0"
