"""SQLAlchemy implementation of the sheet repository."""

from __future__ import annotations

from sqlalchemy import delete, insert, select, update

from espressoapi.core.exceptions import Entity
from espressoapi.models import Sheet
from espressoapi.repositories.interfaces import SheetRecord, SheetRepository
from espressoapi.repositories.sqlalchemy.base import (
    SqlAlchemyRepository,
    labelled,
    sheet_from_mapping,
    utcnow,
)


class SqlAlchemySheetRepository(SqlAlchemyRepository, SheetRepository):
    entity = Entity.SHEET

    async def create(self, sheet: SheetRecord) -> int:
        stmt = insert(Sheet).values(name=sheet.name)
        return await self._insert(stmt, tag=Entity.SHEET)

    async def get_by_id(self, sheet_id: int) -> SheetRecord:
        stmt = select(*labelled(Sheet.__table__, "")).where(Sheet.id == sheet_id)
        row = await self._fetch_one(
            stmt, f"failed to read record for sheet id={sheet_id} from the database"
        )
        return sheet_from_mapping(row)

    async def get_by_name(self, name: str) -> SheetRecord:
        stmt = select(*labelled(Sheet.__table__, "")).where(Sheet.name == name)
        row = await self._fetch_one(
            stmt, f"failed to read record for sheet name={name} from the database"
        )
        return sheet_from_mapping(row)

    async def get_all(self) -> list[SheetRecord]:
        stmt = select(*labelled(Sheet.__table__, "")).order_by(Sheet.id.asc())
        rows = await self._fetch_all(stmt, "failed to read sheets from the database")
        return [sheet_from_mapping(row) for row in rows]

    async def update_by_id(self, sheet_id: int, sheet: SheetRecord) -> SheetRecord:
        sheet.id = sheet_id
        sheet.updated_at = utcnow()
        stmt = (
            update(Sheet)
            .where(Sheet.id == sheet_id)
            .values(name=sheet.name, updated_at=sheet.updated_at)
        )
        await self._write_one(
            stmt,
            tag=Entity.SHEET,
            context=f"failed to update sheet id={sheet_id} in the database",
        )
        return sheet

    async def delete_by_id(self, sheet_id: int) -> None:
        stmt = delete(Sheet).where(Sheet.id == sheet_id)
        await self._write_one(
            stmt,
            tag=Entity.SHEET,
            context=f"failed to delete sheet id={sheet_id} from the database",
        )
