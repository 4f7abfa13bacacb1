"""SQLAlchemy implementation of the beans repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, delete, insert, select, update

from espressoapi.core.exceptions import Entity
from espressoapi.models import Beans, Roaster
from espressoapi.repositories.interfaces import BeansRecord, BeansRepository
from espressoapi.repositories.sqlalchemy.base import (
    SqlAlchemyRepository,
    labelled,
    roaster_from_mapping,
    utcnow,
)


def beans_select(prefix: str = "") -> Select:
    """Beans inner-joined with their roaster; roaster columns get ``<prefix>roaster__``."""
    return select(
        *labelled(Beans.__table__, prefix),
        *labelled(Roaster.__table__, f"{prefix}roaster__"),
    ).join(Roaster, Roaster.id == Beans.roaster_id)


def beans_from_mapping(m: Mapping[str, Any], prefix: str = "") -> BeansRecord:
    return BeansRecord(
        id=m[f"{prefix}id"],
        roaster=roaster_from_mapping(m, f"{prefix}roaster__"),
        name=m[f"{prefix}name"],
        roast_date=m[f"{prefix}roast_date"],
        roast_level=m[f"{prefix}roast_level"],
        created_at=m[f"{prefix}created_at"],
        updated_at=m[f"{prefix}updated_at"],
    )


def _roaster_id(beans: BeansRecord) -> int:
    return beans.roaster.id if beans.roaster is not None else 0


class SqlAlchemyBeansRepository(SqlAlchemyRepository, BeansRepository):
    entity = Entity.BEANS

    async def create(self, beans: BeansRecord) -> int:
        stmt = insert(Beans).values(
            roaster_id=_roaster_id(beans),
            name=beans.name,
            roast_date=beans.roast_date,
            roast_level=beans.roast_level,
        )
        # The only parent of beans is the roaster
        return await self._insert(stmt, tag=Entity.ROASTER)

    async def get_by_id(self, beans_id: int) -> BeansRecord:
        stmt = beans_select().where(Beans.id == beans_id)
        row = await self._fetch_one(
            stmt, f"failed to read record for beans id={beans_id} from the database"
        )
        return beans_from_mapping(row)

    async def get_all(self) -> list[BeansRecord]:
        stmt = beans_select().order_by(Beans.id.asc())
        rows = await self._fetch_all(stmt, "failed to read beans from the database")
        return [beans_from_mapping(row) for row in rows]

    async def update_by_id(self, beans_id: int, beans: BeansRecord) -> BeansRecord:
        beans.id = beans_id
        beans.updated_at = utcnow()
        stmt = (
            update(Beans)
            .where(Beans.id == beans_id)
            .values(
                roaster_id=_roaster_id(beans),
                name=beans.name,
                roast_date=beans.roast_date,
                roast_level=beans.roast_level,
                updated_at=beans.updated_at,
            )
        )
        await self._write_one(
            stmt,
            tag=Entity.ROASTER,
            context=f"failed to update beans id={beans_id} in the database",
        )
        return beans

    async def delete_by_id(self, beans_id: int) -> None:
        stmt = delete(Beans).where(Beans.id == beans_id)
        await self._write_one(
            stmt,
            tag=Entity.BEANS,
            context=f"failed to delete beans id={beans_id} from the database",
        )
