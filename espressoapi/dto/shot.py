"""DTOs for espresso shots."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from espressoapi.dto.beans import BeansDTO
from espressoapi.dto.sheet import SheetDTO
from espressoapi.models.enums import ComparisonWithPrevious


class ShotDTO(BaseModel):
    id: int = Field(default=0, description="Shot ID")
    sheet: SheetDTO | None = Field(default=None, description="Sheet the shot belongs to")
    beans: BeansDTO | None = Field(default=None, description="Beans used for the shot")
    grind_setting: int = 0
    quantity_in: float = Field(default=0.0, description="Dry dose (g)")
    quantity_out: float = Field(default=0.0, description="Yield (g)")
    shot_time: timedelta = Field(default=timedelta(0), description="Extraction time (seconds)")
    water_temperature: float = Field(default=0.0, description="Water temperature (°C)")
    rating: float = Field(default=0.0, description="Rating between 0.0 and 10.0")
    is_too_bitter: bool = False
    is_too_sour: bool = False
    comparison_with_previous: ComparisonWithPrevious = ComparisonWithPrevious.unknown
    additional_notes: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("shot_time")
    def _shot_time_seconds(self, value: timedelta) -> float:
        return value.total_seconds()
