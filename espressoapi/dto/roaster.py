"""DTOs for roasters exposed via the public API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RoasterDTO(BaseModel):
    id: int = Field(default=0, description="Roaster ID")
    name: str = Field(default="", description="Roaster name (unique)")
    created_at: datetime | None = Field(default=None, description="Creation time (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last update time (UTC)")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 3,
                "name": "BlueBottle",
                "created_at": "2024-05-01T07:30:00",
                "updated_at": "2024-05-01T07:30:00",
            }
        },
    )
