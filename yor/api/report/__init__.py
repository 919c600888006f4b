"""Report module - tag change report building and rendering."""

from .build_report import build_report
from .merge_cells import merge_cells
from .print_json_to_file import print_json_to_file
from .print_json_to_stdout import print_json_to_stdout
from .print_report_table import print_report_table
from .print_tag_groups import print_tag_groups
from .Report import Report
from .report_to_json_bytes import report_to_json_bytes
from .ReportSerializationError import ReportSerializationError
from .ReportService import ReportService
from .ReportSummary import ReportSummary
from .ReportWriteError import ReportWriteError
from .TagRecord import TagRecord
from .write_report_bytes import write_report_bytes

__all__ = [
    "Report",
    "ReportSerializationError",
    "ReportService",
    "ReportSummary",
    "ReportWriteError",
    "TagRecord",
    "build_report",
    "merge_cells",
    "print_json_to_file",
    "print_json_to_stdout",
    "print_report_table",
    "print_tag_groups",
    "report_to_json_bytes",
    "write_report_bytes",
]
