"""Link Typer app factory."""

import typer

from linkmirror.api.link.cmd_check import cmd_check
from linkmirror.api.link.cmd_fix import cmd_fix
from linkmirror.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Check and correct links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        target: str | None = typer.Option(None, "--target", "-t", help="Locale of a translated tree to check"),
    ) -> None:
        """Check git status and links of the source tree (or one translated tree)."""
        _handle_stage_result(cmd_check)(target=target)

    @app.command(name="fix")
    def fix_cmd(
        target: str | None = typer.Option(None, "--target", "-t", help="Locale of the translated tree to fix"),
        dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Report corrections without writing files"),
    ) -> None:
        """Correct links in translated trees."""
        _handle_stage_result(cmd_fix)(target=target, dry_run=dry_run)

    return app
