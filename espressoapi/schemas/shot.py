from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from espressoapi.dto import BeansDTO, SheetDTO, ShotDTO
from espressoapi.models.enums import ComparisonWithPrevious


class ShotRequest(BaseModel):
    sheet_id: int = Field(description="ID of the sheet")
    beans_id: int = Field(description="ID of the beans")
    grind_setting: int = 0
    quantity_in: float = Field(default=0.0, description="Dry dose (g)")
    quantity_out: float = Field(default=0.0, description="Yield (g)")
    shot_time: float = Field(default=0.0, ge=0, description="Extraction time in seconds")
    water_temperature: float = Field(
        default=0.0, description="Water temperature (°C); 93.0 when not positive"
    )
    rating: float = Field(default=0.0, description="Rating between 0.0 and 10.0")
    is_too_bitter: bool = False
    is_too_sour: bool = False
    comparison_with_previous: ComparisonWithPrevious = ComparisonWithPrevious.unknown
    additional_notes: str = ""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "sheet_id": 1,
                "beans_id": 1,
                "grind_setting": 12,
                "quantity_in": 18.0,
                "quantity_out": 36.0,
                "shot_time": 28.5,
                "water_temperature": 93.0,
                "rating": 7.5,
                "is_too_bitter": False,
                "is_too_sour": False,
                "comparison_with_previous": "better",
                "additional_notes": "",
            }
        },
    )

    def to_dto(self) -> ShotDTO:
        return ShotDTO(
            sheet=SheetDTO(id=self.sheet_id),
            beans=BeansDTO(id=self.beans_id),
            grind_setting=self.grind_setting,
            quantity_in=self.quantity_in,
            quantity_out=self.quantity_out,
            shot_time=timedelta(seconds=self.shot_time),
            water_temperature=self.water_temperature,
            rating=self.rating,
            is_too_bitter=self.is_too_bitter,
            is_too_sour=self.is_too_sour,
            comparison_with_previous=self.comparison_with_previous,
            additional_notes=self.additional_notes,
        )
