"""Write the JSON report to a file, logging failures."""

import logging
from pathlib import Path

from .Report import Report
from .report_to_json_bytes import report_to_json_bytes
from .ReportSerializationError import ReportSerializationError
from .ReportWriteError import ReportWriteError
from .write_report_bytes import write_report_bytes

logger = logging.getLogger(__name__)


def print_json_to_file(report: Report, path: str | Path) -> bool:
    """Write ``report`` as JSON to ``path``.

    Failures are logged as warnings and never raised.

    Returns:
        True if the file was written
    """
    try:
        data = report_to_json_bytes(report)
    except ReportSerializationError as e:
        logger.warning("Failed to create report as JSON: %s", e)
        return False

    try:
        write_report_bytes(data, Path(path))
    except ReportWriteError as e:
        logger.warning("Failed to write to JSON file: %s", e)
        return False

    logger.info("Wrote JSON report to %s", path)
    return True
