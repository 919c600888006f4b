"""Report summary model."""

from pydantic import BaseModel, ConfigDict, Field


class ReportSummary(BaseModel):
    """Resource counts for one report."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scanned: int = Field(0, ge=0, description="Number of scanned blocks")
    new_resources: int = Field(0, ge=0, alias="newResources", description="Number of newly traced resources")
    updated_resources: int = Field(0, ge=0, alias="updatedResources", description="Number of updated resources")
