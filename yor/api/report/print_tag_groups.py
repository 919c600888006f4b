"""Terminal rendering of the tag catalog."""

from collections.abc import Mapping, Sequence

from rich.console import Console

from ..config.ColorConfig import ColorConfig
from ..tags.Tag import Tag
from ._new_console import _new_console
from ._render_table import _render_table

TAG_GROUPS_HEADERS = ("Group", "Tag Key", "Description")
TAG_GROUPS_MERGE_COLUMNS = (0,)


def print_tag_groups(
    tags_by_group: Mapping[str, Sequence[Tag]],
    console: Console | None = None,
    colors: ColorConfig | None = None,
) -> None:
    """Print one row per tag, grouped by tag group.

    Groups are printed in mapping order; a group without tags still gets a
    row with empty key and description.
    """
    colors = colors or ColorConfig()
    console = console or _new_console(colors)

    rows: list[tuple[str, str, str]] = []
    for group, group_tags in tags_by_group.items():
        if group_tags:
            rows.extend((group, tag.get_key(), tag.get_description()) for tag in group_tags)
        else:
            rows.append((group, "", ""))

    _render_table(
        console,
        TAG_GROUPS_HEADERS,
        rows,
        TAG_GROUPS_MERGE_COLUMNS,
        header_style=colors.style("header"),
    )
