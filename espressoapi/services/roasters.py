from __future__ import annotations

import structlog

from espressoapi.core.exceptions import ValidationFailedError
from espressoapi.dto import RoasterDTO
from espressoapi.dto.mappers import record_from_roaster, roaster_from_record
from espressoapi.repositories.interfaces import RoasterRecord, RoasterRepository
from espressoapi.services.common import operation

logger = structlog.get_logger(__name__)


class RoasterService:
    def __init__(self, repository: RoasterRepository):
        self._repo = repository

    async def create_roaster_by_name(self, name: str) -> RoasterDTO:
        if not name:
            raise ValidationFailedError("name", "roaster name must not be empty")
        with operation(logger, "could not create roaster"):
            await self._repo.create(RoasterRecord(name=name))
        with operation(logger, "could not get newly created roaster"):
            record = await self._repo.get_by_name(name)
        return roaster_from_record(record)

    async def get_roaster_by_id(self, roaster_id: int) -> RoasterDTO:
        with operation(logger, "could not get roaster by id"):
            record = await self._repo.get_by_id(roaster_id)
        return roaster_from_record(record)

    async def get_all_roasters(self) -> list[RoasterDTO]:
        with operation(logger, "could not get all roasters"):
            records = await self._repo.get_all()
        return [roaster_from_record(r) for r in records]

    async def update_roaster_by_id(self, roaster_id: int, roaster: RoasterDTO) -> RoasterDTO:
        if not roaster.name:
            raise ValidationFailedError("name", "roaster name must not be empty")
        with operation(logger, "could not update roaster by id"):
            record = await self._repo.update_by_id(roaster_id, record_from_roaster(roaster))
        return roaster_from_record(record)

    async def delete_roaster_by_id(self, roaster_id: int) -> None:
        with operation(logger, "could not delete roaster by id"):
            await self._repo.delete_by_id(roaster_id)

    async def ping(self) -> None:
        with operation(logger, "could not ping database"):
            await self._repo.ping()
