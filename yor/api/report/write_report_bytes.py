"""Write an encoded report to a file or stdout."""

import os
import sys
from pathlib import Path
from typing import BinaryIO

from .ReportWriteError import ReportWriteError

STDOUT_DESTINATION = "-"
STDOUT_PATH = Path("<stdout>")
FILE_MODE = 0o600


def write_report_bytes(data: bytes, destination: str | Path | None, stream: BinaryIO | None = None) -> None:
    """Write ``data`` to ``destination``.

    ``None`` or ``"-"`` selects standard output (or ``stream`` when given).
    Files are created owner read/write only, or truncated if they exist.

    Raises:
        ReportWriteError: If the file or stream cannot be opened or written
    """
    if destination is None or str(destination) == STDOUT_DESTINATION:
        out = stream if stream is not None else sys.stdout.buffer
        try:
            out.write(data)
            out.write(b"\n")
            out.flush()
        except OSError as e:
            raise ReportWriteError(STDOUT_PATH, e.strerror or str(e)) from e
        return

    path = Path(destination)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
    except OSError as e:
        raise ReportWriteError(path, e.strerror or str(e)) from e
