"""Set up file logging at CLI start."""

from linkmirror.api.config.LinkmirrorConfig import LinkmirrorConfig
from linkmirror.utils.logger import configure_logging


def _configure_logging() -> None:
    """Configure logging with the configured level, INFO if the config cannot be loaded."""
    try:
        level = LinkmirrorConfig.load().log.level
    except ValueError:
        level = "INFO"
    try:
        configure_logging(level=level)
    except OSError as e:
        import typer

        typer.echo(f"Warning: file logging disabled: {e}", err=True)
