"""Repository abstractions for the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol

from espressoapi.models.enums import ComparisonWithPrevious, RoastLevel


@dataclass
class SheetRecord:
    id: int = 0
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class RoasterRecord:
    id: int = 0
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class BeansRecord:
    id: int = 0
    roaster: RoasterRecord | None = None
    name: str = ""
    roast_date: date | None = None
    roast_level: RoastLevel = RoastLevel.medium
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ShotRecord:
    id: int = 0
    sheet: SheetRecord | None = None
    beans: BeansRecord | None = None
    grind_setting: int = 0
    quantity_in: float = 0.0
    quantity_out: float = 0.0
    shot_time: timedelta = timedelta(0)
    water_temperature: float = 0.0
    rating: float = 0.0
    is_too_bitter: bool = False
    is_too_sour: bool = False
    comparison_with_previous: ComparisonWithPrevious = ComparisonWithPrevious.unknown
    additional_notes: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SheetRepository(Protocol):
    async def create(self, sheet: SheetRecord) -> int: ...

    async def get_by_id(self, sheet_id: int) -> SheetRecord: ...

    async def get_by_name(self, name: str) -> SheetRecord: ...

    async def get_all(self) -> list[SheetRecord]: ...

    async def update_by_id(self, sheet_id: int, sheet: SheetRecord) -> SheetRecord: ...

    async def delete_by_id(self, sheet_id: int) -> None: ...

    async def ping(self) -> None: ...


class RoasterRepository(Protocol):
    async def create(self, roaster: RoasterRecord) -> int: ...

    async def get_by_id(self, roaster_id: int) -> RoasterRecord: ...

    async def get_by_name(self, name: str) -> RoasterRecord: ...

    async def get_all(self) -> list[RoasterRecord]: ...

    async def update_by_id(self, roaster_id: int, roaster: RoasterRecord) -> RoasterRecord: ...

    async def delete_by_id(self, roaster_id: int) -> None: ...

    async def ping(self) -> None: ...


class BeansRepository(Protocol):
    """``BeansRecord.roaster`` must carry at least the roaster id on writes."""

    async def create(self, beans: BeansRecord) -> int: ...

    async def get_by_id(self, beans_id: int) -> BeansRecord: ...

    async def get_all(self) -> list[BeansRecord]: ...

    async def update_by_id(self, beans_id: int, beans: BeansRecord) -> BeansRecord: ...

    async def delete_by_id(self, beans_id: int) -> None: ...

    async def ping(self) -> None: ...


class ShotRepository(Protocol):
    """Writes reference sheet and beans by id only; reads return the joined aggregate."""

    async def create(self, shot: ShotRecord) -> int: ...

    async def get_by_id(self, shot_id: int) -> ShotRecord: ...

    async def get_all(self) -> list[ShotRecord]: ...

    async def update_by_id(self, shot_id: int, shot: ShotRecord) -> ShotRecord: ...

    async def delete_by_id(self, shot_id: int) -> None: ...

    async def ping(self) -> None: ...
