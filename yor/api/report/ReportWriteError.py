"""Report write error."""

from pathlib import Path


class ReportWriteError(Exception):
    """Raised when the report document cannot be written to its destination."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write report to {path}: {reason}")
