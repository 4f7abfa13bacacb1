"""SQLAlchemy implementation of the roaster repository."""

from __future__ import annotations

from sqlalchemy import delete, insert, select, update

from espressoapi.core.exceptions import Entity
from espressoapi.models import Roaster
from espressoapi.repositories.interfaces import RoasterRecord, RoasterRepository
from espressoapi.repositories.sqlalchemy.base import (
    SqlAlchemyRepository,
    labelled,
    roaster_from_mapping,
    utcnow,
)


class SqlAlchemyRoasterRepository(SqlAlchemyRepository, RoasterRepository):
    entity = Entity.ROASTER

    async def create(self, roaster: RoasterRecord) -> int:
        stmt = insert(Roaster).values(name=roaster.name)
        return await self._insert(stmt, tag=Entity.ROASTER)

    async def get_by_id(self, roaster_id: int) -> RoasterRecord:
        stmt = select(*labelled(Roaster.__table__, "")).where(Roaster.id == roaster_id)
        row = await self._fetch_one(
            stmt, f"failed to read record for roaster id={roaster_id} from the database"
        )
        return roaster_from_mapping(row)

    async def get_by_name(self, name: str) -> RoasterRecord:
        stmt = select(*labelled(Roaster.__table__, "")).where(Roaster.name == name)
        row = await self._fetch_one(
            stmt, f"failed to read record for roaster name={name} from the database"
        )
        return roaster_from_mapping(row)

    async def get_all(self) -> list[RoasterRecord]:
        stmt = select(*labelled(Roaster.__table__, "")).order_by(Roaster.id.asc())
        rows = await self._fetch_all(stmt, "failed to read roasters from the database")
        return [roaster_from_mapping(row) for row in rows]

    async def update_by_id(self, roaster_id: int, roaster: RoasterRecord) -> RoasterRecord:
        roaster.id = roaster_id
        roaster.updated_at = utcnow()
        stmt = (
            update(Roaster)
            .where(Roaster.id == roaster_id)
            .values(name=roaster.name, updated_at=roaster.updated_at)
        )
        await self._write_one(
            stmt,
            tag=Entity.ROASTER,
            context=f"failed to update roaster id={roaster_id} in the database",
        )
        return roaster

    async def delete_by_id(self, roaster_id: int) -> None:
        stmt = delete(Roaster).where(Roaster.id == roaster_id)
        await self._write_one(
            stmt,
            tag=Entity.ROASTER,
            context=f"failed to delete roaster id={roaster_id} from the database",
        )
