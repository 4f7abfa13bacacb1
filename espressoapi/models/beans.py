from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from espressoapi.models.base import Base
from espressoapi.models.enums import RoastLevel
from espressoapi.models.types import OrdinalEnum


class Beans(Base):
    __tablename__ = "beans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # No ON DELETE: deleting a roaster that still has beans must fail
    roaster_id = Column(Integer, ForeignKey("roasters.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    roast_date = Column(Date, nullable=True)
    roast_level = Column(OrdinalEnum(RoastLevel), nullable=False, default=RoastLevel.medium)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
