"""Report model."""

from pydantic import BaseModel, ConfigDict, Field

from .ReportSummary import ReportSummary
from .TagRecord import TagRecord


class Report(BaseModel):
    """Summary plus the flat tag records of new and updated resources.

    Field order is the JSON key order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: ReportSummary = Field(default_factory=ReportSummary)
    new_resource_tags: tuple[TagRecord, ...] = Field((), alias="newResourceTags")
    updated_resource_tags: tuple[TagRecord, ...] = Field((), alias="updatedResourceTags")
