"""Config API module."""

from .GitConfig import GitConfig
from .LinkmirrorConfig import LinkmirrorConfig
from .LogConfig import LogConfig
from .TargetConfig import TargetConfig

__all__ = [
    "GitConfig",
    "LinkmirrorConfig",
    "LogConfig",
    "TargetConfig",
]
