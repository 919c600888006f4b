"""Print the JSON report to stdout."""

import logging
from typing import BinaryIO

from .Report import Report
from .report_to_json_bytes import report_to_json_bytes
from .ReportSerializationError import ReportSerializationError
from .ReportWriteError import ReportWriteError
from .write_report_bytes import STDOUT_DESTINATION, write_report_bytes

logger = logging.getLogger(__name__)


def print_json_to_stdout(report: Report, stream: BinaryIO | None = None) -> bool:
    """Print ``report`` as JSON followed by a newline.

    Returns:
        True if the document was printed
    """
    try:
        data = report_to_json_bytes(report)
    except ReportSerializationError as e:
        logger.error("Couldn't encode report as JSON: %s", e)
        return False

    try:
        write_report_bytes(data, STDOUT_DESTINATION, stream=stream)
    except ReportWriteError as e:
        logger.warning("Failed to write JSON to stdout: %s", e)
        return False
    return True
