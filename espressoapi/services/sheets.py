from __future__ import annotations

import structlog

from espressoapi.core.exceptions import ValidationFailedError
from espressoapi.dto import SheetDTO
from espressoapi.dto.mappers import record_from_sheet, sheet_from_record
from espressoapi.repositories.interfaces import SheetRecord, SheetRepository
from espressoapi.services.common import operation

logger = structlog.get_logger(__name__)


class SheetService:
    def __init__(self, repository: SheetRepository):
        self._repo = repository

    async def create_sheet_by_name(self, name: str) -> SheetDTO:
        if not name:
            raise ValidationFailedError("name", "sheet name must not be empty")
        with operation(logger, "could not create sheet"):
            await self._repo.create(SheetRecord(name=name))
        with operation(logger, "could not get newly created sheet"):
            record = await self._repo.get_by_name(name)
        return sheet_from_record(record)

    async def get_sheet_by_id(self, sheet_id: int) -> SheetDTO:
        with operation(logger, "could not get sheet by id"):
            record = await self._repo.get_by_id(sheet_id)
        return sheet_from_record(record)

    async def get_all_sheets(self) -> list[SheetDTO]:
        with operation(logger, "could not get all sheets"):
            records = await self._repo.get_all()
        return [sheet_from_record(r) for r in records]

    async def update_sheet_by_id(self, sheet_id: int, sheet: SheetDTO) -> SheetDTO:
        if not sheet.name:
            raise ValidationFailedError("name", "sheet name must not be empty")
        with operation(logger, "could not update sheet by id"):
            record = await self._repo.update_by_id(sheet_id, record_from_sheet(sheet))
        return sheet_from_record(record)

    async def delete_sheet_by_id(self, sheet_id: int) -> None:
        with operation(logger, "could not delete sheet by id"):
            await self._repo.delete_by_id(sheet_id)

    async def ping(self) -> None:
        with operation(logger, "could not ping database"):
            await self._repo.ping()
