"""Encode a report as its JSON document."""

from pydantic_core import PydanticSerializationError

from .Report import Report
from .ReportSerializationError import ReportSerializationError

JSON_INDENT = 4


def report_to_json_bytes(report: Report) -> bytes:
    """Serialize ``report`` to UTF-8 JSON with 4-space indentation.

    Keys use their document names (``newResources``, ``yorTraceId``...) in
    declared order; record lists are always present.

    Raises:
        ReportSerializationError: If the report cannot be encoded
    """
    try:
        return report.model_dump_json(by_alias=True, indent=JSON_INDENT).encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as e:
        raise ReportSerializationError(f"Failed to encode report as JSON: {e}") from e
