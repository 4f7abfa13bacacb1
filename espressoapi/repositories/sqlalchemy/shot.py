"""SQLAlchemy implementation of the shot repository.

Shots are written with their sheet and beans ids only, but read back as an
aggregate: one SELECT inner-joins ``shots`` with ``sheets``, ``beans`` and
``roasters``. Joined columns are labelled by path (``sheet__name``,
``beans__roaster__name``) and :func:`assemble_shot` rebuilds the nested record
from one result row.
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from espressoapi.core.exceptions import DoesNotExistError, Entity, UnknownStoreError
from espressoapi.models import Beans, Roaster, Sheet, Shot
from espressoapi.repositories.interfaces import ShotRecord, ShotRepository
from espressoapi.repositories.sqlalchemy.base import (
    SqlAlchemyRepository,
    labelled,
    sheet_from_mapping,
    utcnow,
)
from espressoapi.repositories.sqlalchemy.beans import beans_from_mapping

T = TypeVar("T")


def shot_select() -> Select:
    return (
        select(
            *labelled(Shot.__table__, ""),
            *labelled(Sheet.__table__, "sheet__"),
            *labelled(Beans.__table__, "beans__"),
            *labelled(Roaster.__table__, "beans__roaster__"),
        )
        .select_from(Shot)
        .join(Sheet, Sheet.id == Shot.sheet_id)
        .join(Beans, Beans.id == Shot.beans_id)
        .join(Roaster, Roaster.id == Beans.roaster_id)
    )


def assemble_shot(m: Mapping[str, Any]) -> ShotRecord:
    return ShotRecord(
        id=m["id"],
        sheet=sheet_from_mapping(m, "sheet__"),
        beans=beans_from_mapping(m, "beans__"),
        grind_setting=m["grind_setting"],
        quantity_in=m["quantity_in"],
        quantity_out=m["quantity_out"],
        shot_time=m["shot_time"],
        water_temperature=m["water_temperature"],
        rating=m["rating"],
        is_too_bitter=m["is_too_bitter"],
        is_too_sour=m["is_too_sour"],
        comparison_with_previous=m["comparison_with_previous"],
        additional_notes=m["additional_notes"] or "",
        created_at=m["created_at"],
        updated_at=m["updated_at"],
    )


def _values(shot: ShotRecord) -> dict[str, Any]:
    return {
        "sheet_id": shot.sheet.id if shot.sheet is not None else 0,
        "beans_id": shot.beans.id if shot.beans is not None else 0,
        "grind_setting": shot.grind_setting,
        "quantity_in": shot.quantity_in,
        "quantity_out": shot.quantity_out,
        "shot_time": shot.shot_time,
        "water_temperature": shot.water_temperature,
        "rating": shot.rating,
        "is_too_bitter": shot.is_too_bitter,
        "is_too_sour": shot.is_too_sour,
        "comparison_with_previous": shot.comparison_with_previous,
        "additional_notes": shot.additional_notes,
    }


class SqlAlchemyShotRepository(SqlAlchemyRepository, ShotRepository):
    entity = Entity.SHOT

    async def _missing_parent(self, values: Mapping[str, Any]) -> Entity | None:
        """Look up which parent of a rejected shot write is absent, if any."""
        parents = (
            (Entity.SHEET, Sheet.id, values["sheet_id"]),
            (Entity.BEANS, Beans.id, values["beans_id"]),
        )
        try:
            async with self._session_factory() as session:
                for entity, column, parent_id in parents:
                    result = await session.execute(select(column).where(column == parent_id))
                    if result.mappings().one_or_none() is None:
                        return entity
        except SQLAlchemyError:
            return None
        return None

    async def _write_with_parents(self, write: Awaitable[T], values: Mapping[str, Any]) -> T:
        # A shot has two parents; the missing one is read from the error text.
        # Stores whose text names no table get it resolved by lookup.
        try:
            return await write
        except UnknownStoreError as exc:
            if not isinstance(exc.cause, IntegrityError):
                raise
            missing = await self._missing_parent(values)
            if missing is None:
                raise
            raise DoesNotExistError(missing) from exc.cause

    async def create(self, shot: ShotRecord) -> int:
        values = _values(shot)
        return await self._write_with_parents(
            self._insert(insert(Shot).values(**values), tag=None), values
        )

    async def get_by_id(self, shot_id: int) -> ShotRecord:
        stmt = shot_select().where(Shot.id == shot_id)
        row = await self._fetch_one(
            stmt, f"failed to read record for shot id={shot_id} from the database"
        )
        return assemble_shot(row)

    async def get_all(self) -> list[ShotRecord]:
        stmt = shot_select().order_by(Shot.id.asc())
        rows = await self._fetch_all(stmt, "failed to read shots from the database")
        return [assemble_shot(row) for row in rows]

    async def update_by_id(self, shot_id: int, shot: ShotRecord) -> ShotRecord:
        shot.id = shot_id
        shot.updated_at = utcnow()
        values = _values(shot)
        stmt = (
            update(Shot)
            .where(Shot.id == shot_id)
            .values(**values, updated_at=shot.updated_at)
        )
        await self._write_with_parents(
            self._write_one(
                stmt,
                tag=None,
                context=f"failed to update shot id={shot_id} in the database",
            ),
            values,
        )
        return shot

    async def delete_by_id(self, shot_id: int) -> None:
        stmt = delete(Shot).where(Shot.id == shot_id)
        await self._write_one(
            stmt,
            tag=Entity.SHOT,
            context=f"failed to delete shot id={shot_id} from the database",
        )
