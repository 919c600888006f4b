"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from yor.cli._create_app import _create_app
    from yor.utils.configure_logging import configure_logging
    from yor.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"yor {get_package_version()}")
        return 0

    configure_logging()

    app = _create_app()
    try:
        # Outside standalone mode click returns the exit code of typer.Exit
        exit_code = app(argv, standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
