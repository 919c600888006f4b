"""Config API module."""

from .ColorConfig import ColorConfig
from .ReportConfig import ReportConfig
from .YorConfig import YorConfig

__all__ = ["ColorConfig", "ReportConfig", "YorConfig"]
