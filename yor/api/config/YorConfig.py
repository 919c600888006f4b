"""Top-level Yor configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_yor_home import get_yor_home
from .ReportConfig import ReportConfig


class YorConfig(BaseModel):
    """Top-level configuration for Yor."""

    model_config = ConfigDict(extra="forbid")

    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on YOR_HOME or default to ~/.yor."""
        return get_yor_home() / "config.json"

    @classmethod
    def load(cls) -> "YorConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except (TypeError, ValidationError) as e:
            if isinstance(e, ValidationError) and e.errors():
                first = e.errors()[0]
                field = ".".join(str(x) for x in first.get("loc", ()))
                error_msg = first.get("msg", str(e))
                detail = f"{field}: {error_msg}" if field else error_msg
            else:
                detail = str(e)
            raise ValueError(f"Configuration validation error: {detail}") from e
