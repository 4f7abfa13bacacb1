"""DTOs for beans."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from espressoapi.dto.roaster import RoasterDTO
from espressoapi.models.enums import RoastLevel


class BeansDTO(BaseModel):
    id: int = Field(default=0, description="Beans ID")
    roaster: RoasterDTO | None = Field(
        default=None, description="Roaster; only the id is required on writes"
    )
    name: str = Field(default="", description="Beans name")
    roast_date: date | None = Field(default=None, description="Roast date")
    roast_level: RoastLevel = Field(default=RoastLevel.medium, description="Roast level")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
