"""DTOs for sheets exposed via the public API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SheetDTO(BaseModel):
    id: int = Field(default=0, description="Sheet ID")
    name: str = Field(default="", description="Sheet name (unique)")
    created_at: datetime | None = Field(default=None, description="Creation time (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last update time (UTC)")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Morning",
                "created_at": "2024-05-01T07:30:00",
                "updated_at": "2024-05-01T07:30:00",
            }
        },
    )
