from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from espressoapi.dto import BeansDTO, RoasterDTO
from espressoapi.models.enums import RoastLevel


class BeansRequest(BaseModel):
    roaster_id: int = Field(description="ID of the roaster")
    name: str = Field(default="", description="Beans name")
    roast_date: date | None = Field(default=None, description="Roast date (YYYY-MM-DD)")
    roast_level: RoastLevel = Field(default=RoastLevel.medium, description="Roast level")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "roaster_id": 1,
                "name": "Giant Steps",
                "roast_date": "2024-04-28",
                "roast_level": "medium-to-dark",
            }
        },
    )

    def to_dto(self) -> BeansDTO:
        return BeansDTO(
            roaster=RoasterDTO(id=self.roaster_id),
            name=self.name,
            roast_date=self.roast_date,
            roast_level=self.roast_level,
        )
