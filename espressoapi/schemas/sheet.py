from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SheetRequest(BaseModel):
    name: str = Field(default="", description="Sheet name")

    model_config = ConfigDict(extra="forbid")


class RoasterRequest(BaseModel):
    name: str = Field(default="", description="Roaster name")

    model_config = ConfigDict(extra="forbid")
