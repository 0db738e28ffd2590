"""DTOs for templating options and the data source connectivity check."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.registry import SelectOption


class OptionDTO(BaseModel):
    """Label/value pair offered by templating variables."""

    text: str
    value: int
    group_id: Optional[str] = Field(
        default=None,
        alias="groupId",
        description="Aggregation group owning the option, if any",
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, option: SelectOption) -> "OptionDTO":
        return cls(text=option.text, value=option.value, group_id=option.group_id)


class MetricFindRequestDTO(BaseModel):
    """Templating lookup forwarded to the registry."""

    target: Optional[str] = Field(
        default=None, description="Selected metric label, when any"
    )

    model_config = ConfigDict(extra="allow")


class DatasourceStatusDTO(BaseModel):
    """Outcome of the configuration page connectivity check."""

    status: str = Field(description="'success' or 'error'")
    message: str
    title: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "success",
                "message": "Data source is working",
                "title": "Success",
            }
        }
    }
