"""Holder for the current report and its output operations."""

import logging
from pathlib import Path
from typing import BinaryIO

from rich.console import Console

from ..config.ColorConfig import ColorConfig
from ..tags.TagChangeAccumulator import TagChangeAccumulator
from .build_report import build_report
from .print_json_to_file import print_json_to_file
from .print_json_to_stdout import print_json_to_stdout
from .print_report_table import print_report_table
from .Report import Report

logger = logging.getLogger(__name__)


class ReportService:
    """Builds reports and renders the most recent one.

    Each ``create_report`` replaces the held report; nothing carries over
    from a previous build.
    """

    def __init__(self) -> None:
        self._report = Report()

    def get_report(self) -> Report:
        return self._report

    def create_report(self, accumulator: TagChangeAccumulator) -> Report:
        self._report = build_report(accumulator)
        summary = self._report.summary
        logger.info(
            "Built report: %d scanned, %d new, %d updated",
            summary.scanned,
            summary.new_resources,
            summary.updated_resources,
        )
        return self._report

    def print_to_stdout(self, colors: ColorConfig | None = None, console: Console | None = None) -> None:
        print_report_table(self._report, console=console, colors=colors)

    def print_json_to_file(self, path: str | Path) -> bool:
        return print_json_to_file(self._report, path)

    def print_json_to_stdout(self, stream: BinaryIO | None = None) -> bool:
        return print_json_to_stdout(self._report, stream=stream)
