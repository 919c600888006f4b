"""Tag record model."""

from pydantic import BaseModel, ConfigDict, Field


class TagRecord(BaseModel):
    """One tag change on one resource, flattened for output.

    An empty ``old_value`` means the tag did not exist before.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file: str = Field(..., description="File the resource is declared in")
    resource_id: str = Field(..., alias="resourceId", description="Resource identifier")
    key: str = Field(..., description="Tag key")
    old_value: str = Field("", alias="oldValue", description="Previous value, empty string if the tag is new")
    updated_value: str = Field(..., alias="updatedValue", description="Current value")
    yor_trace_id: str = Field(..., alias="yorTraceId", description="Trace identifier of the resource")
