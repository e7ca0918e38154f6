"""API module for linkmirror.

Functions defined here serve as the single source of truth for CLI commands.
"""

__all__ = []
