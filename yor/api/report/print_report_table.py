"""Terminal rendering of a report."""

from rich.console import Console
from rich.text import Text

from ...utils.get_package_version import get_package_version
from ..config.ColorConfig import ColorConfig
from ._new_console import _new_console
from ._render_table import _render_table
from .Report import Report
from .YOR_LOGO import YOR_LOGO

NEW_RESOURCES_HEADERS = ("File", "Resource", "Tag Key", "Tag Value", "Yor ID")
NEW_RESOURCES_MERGE_COLUMNS = (0, 1, 4)

UPDATED_RESOURCES_HEADERS = ("File", "Resource", "Tag Key", "Old Value", "Updated Value", "Yor ID")
UPDATED_RESOURCES_MERGE_COLUMNS = (0, 1, 5)


def print_report_table(report: Report, console: Console | None = None, colors: ColorConfig | None = None) -> None:
    """Print the banner, the summary counts and the new/updated tag tables.

    Layout::

        <banner>
        Yor Findings Summary
        Scanned Resources:      <n>
        New Resources Traced:   <n>
        Updated Resources:      <n>

        <new resources table, if any>

        <updated resources table, if any>
    """
    colors = colors or ColorConfig()
    console = console or _new_console(colors)

    print_banner(console, colors)
    summary = report.summary
    console.print("Yor Findings Summary")
    console.print(Text.assemble("Scanned Resources:\t ", (str(summary.scanned), colors.style("scanned"))))
    console.print(Text.assemble("New Resources Traced:\t ", (str(summary.new_resources), colors.style("new"))))
    console.print(Text.assemble("Updated Resources:\t ", (str(summary.updated_resources), colors.style("updated"))))
    console.print()
    if summary.new_resources > 0:
        _print_new_resources(report, console, colors)
    console.print()
    if summary.updated_resources > 0:
        _print_updated_resources(report, console, colors)


def print_banner(console: Console, colors: ColorConfig) -> None:
    console.print(Text.assemble(YOR_LOGO, (f"v{get_package_version()}", colors.style("banner"))))


def _print_new_resources(report: Report, console: Console, colors: ColorConfig) -> None:
    console.print(Text(f"New Resources Traced ({report.summary.new_resources}):", style=colors.style("new")))
    rows = [
        (record.file, record.resource_id, record.key, record.updated_value, record.yor_trace_id)
        for record in report.new_resource_tags
    ]
    _render_table(
        console,
        NEW_RESOURCES_HEADERS,
        rows,
        NEW_RESOURCES_MERGE_COLUMNS,
        column_styles=("", "", colors.style("tag_key"), colors.style("new_value"), ""),
        header_style=colors.style("header"),
    )


def _print_updated_resources(report: Report, console: Console, colors: ColorConfig) -> None:
    console.print(Text(f"Updated Resource Traces ({report.summary.updated_resources}):", style=colors.style("updated")))
    rows = [
        (record.file, record.resource_id, record.key, record.old_value, record.updated_value, record.yor_trace_id)
        for record in report.updated_resource_tags
    ]
    _render_table(
        console,
        UPDATED_RESOURCES_HEADERS,
        rows,
        UPDATED_RESOURCES_MERGE_COLUMNS,
        column_styles=(
            "",
            "",
            colors.style("tag_key"),
            colors.style("old_value"),
            colors.style("new_value"),
            "",
        ),
        header_style=colors.style("header"),
    )
