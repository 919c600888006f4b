"""Tags command."""

from __future__ import annotations

from typing import Annotated

import typer

from yor.api.config.ColorConfig import ColorConfig
from yor.api.report.print_tag_groups import print_tag_groups
from yor.api.tags.DEFAULT_TAG_GROUPS import DEFAULT_TAG_GROUPS


def tags(
    group: Annotated[list[str] | None, typer.Option("--group", "-g", help="Only list this tag group")] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colors")] = False,
) -> None:
    """List the tags Yor can apply, by group."""
    selected = sorted(group) if group else sorted(DEFAULT_TAG_GROUPS)
    unknown = [name for name in selected if name not in DEFAULT_TAG_GROUPS]
    if unknown:
        typer.echo(f"Error: unknown tag group(s): {', '.join(unknown)}", err=True)
        raise typer.Exit(1)

    print_tag_groups({name: DEFAULT_TAG_GROUPS[name] for name in selected}, colors=ColorConfig(no_color=no_color))
