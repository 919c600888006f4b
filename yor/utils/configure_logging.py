import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_yor_home import get_yor_home

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(yor_home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified Yor logging.

    Everything under the ``yor`` logger goes to ``<yor_home>/yor.log``; warnings
    and above are also echoed to stderr for the operator.

    Args:
        yor_home: Path to Yor home directory. If None, derived from environment.
        level: Level for the ``yor`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if yor_home is None:
        yor_home = get_yor_home()

    # Ensure directory exists
    yor_home.mkdir(parents=True, exist_ok=True)
    log_file = yor_home / "yor.log"

    root_logger = logging.getLogger("yor")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(stderr_handler)

    _CONFIGURED = True
