"""Create the main Typer CLI app."""

import typer

from yor.cli.report import report
from yor.cli.tags import tags


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Yor tag change reports",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="report")(report)
    app.command(name="tags")(tags)

    @app.callback(invoke_without_command=True)
    def main_callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
