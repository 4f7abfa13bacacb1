from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.sql import func

from espressoapi.models.base import Base
from espressoapi.models.enums import ComparisonWithPrevious
from espressoapi.models.types import DurationMillis, OrdinalEnum


class Shot(Base):
    __tablename__ = "shots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sheet_id = Column(Integer, ForeignKey("sheets.id"), nullable=False, index=True)
    beans_id = Column(Integer, ForeignKey("beans.id"), nullable=False, index=True)
    grind_setting = Column(Integer, nullable=False, default=0)
    quantity_in = Column(Float, nullable=False, default=0.0)  # grams
    quantity_out = Column(Float, nullable=False, default=0.0)  # grams
    shot_time = Column(DurationMillis, nullable=False)
    water_temperature = Column(Float, nullable=False)  # °C
    rating = Column(Float, nullable=False)
    is_too_bitter = Column(Boolean, nullable=False, default=False)
    is_too_sour = Column(Boolean, nullable=False, default=False)
    comparison_with_previous = Column(
        OrdinalEnum(ComparisonWithPrevious),
        nullable=False,
        default=ComparisonWithPrevious.unknown,
    )
    additional_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
