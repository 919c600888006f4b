"""Report configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ReportConfig(BaseModel):
    """Report output configuration."""

    model_config = ConfigDict(extra="forbid")

    output: Literal["cli", "json"] = Field("cli", description="Report output format")
    output_json_file: str | None = Field(None, description="Optional path the JSON report is also written to")
    no_color: bool = Field(False, description="Disable colors in terminal output")
