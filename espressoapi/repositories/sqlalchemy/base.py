"""Shared plumbing for the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Table, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.expression import Executable
from sqlalchemy.sql.elements import Label

from espressoapi.core.exceptions import (
    DoesNotExistError,
    Entity,
    UnavailableError,
    UnknownStoreError,
)
from espressoapi.repositories.interfaces import RoasterRecord, SheetRecord
from espressoapi.repositories.sqlalchemy.errors import ErrorTranslator


def utcnow() -> datetime:
    # DateTime columns are naive and hold UTC
    return datetime.now(UTC).replace(tzinfo=None)


def labelled(table: Table, prefix: str) -> list[Label]:
    """Select every column of ``table`` as ``<prefix><column>``."""
    return [column.label(f"{prefix}{column.name}") for column in table.columns]


def sheet_from_mapping(m: Mapping[str, Any], prefix: str = "") -> SheetRecord:
    return SheetRecord(
        id=m[f"{prefix}id"],
        name=m[f"{prefix}name"],
        created_at=m[f"{prefix}created_at"],
        updated_at=m[f"{prefix}updated_at"],
    )


def roaster_from_mapping(m: Mapping[str, Any], prefix: str = "") -> RoasterRecord:
    return RoasterRecord(
        id=m[f"{prefix}id"],
        name=m[f"{prefix}name"],
        created_at=m[f"{prefix}created_at"],
        updated_at=m[f"{prefix}updated_at"],
    )


class SqlAlchemyRepository:
    """One short-lived session per operation, errors classified on the way out."""

    entity: Entity

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        translator: ErrorTranslator,
    ) -> None:
        self._session_factory = session_factory
        self._translator = translator

    def _translate(
        self, exc: SQLAlchemyError, entity: Entity | None, context: str
    ) -> BaseException:
        fallback = UnknownStoreError(context, exc)
        translated = self._translator.translate(exc, entity, fallback)
        return translated if translated is not None else fallback

    async def _insert(self, stmt: Executable, *, tag: Entity | None) -> int:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                new_id = result.inserted_primary_key[0]
                await session.commit()
        except SQLAlchemyError as exc:
            raise self._translate(exc, tag, "failed to insert record to the database") from exc
        return int(new_id)

    async def _fetch_one(self, stmt: Executable, context: str) -> Mapping[str, Any]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                row = result.mappings().one_or_none()
        except SQLAlchemyError as exc:
            raise self._translate(exc, None, context) from exc
        if row is None:
            raise DoesNotExistError(self.entity)
        return row

    async def _fetch_all(self, stmt: Executable, context: str) -> list[Mapping[str, Any]]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.mappings().all())
        except SQLAlchemyError as exc:
            raise self._translate(exc, None, context) from exc

    async def _write_one(
        self, stmt: Executable, *, tag: Entity | None, context: str
    ) -> None:
        """Run an UPDATE/DELETE that must touch exactly one row."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                affected = result.rowcount
                await session.commit()
        except SQLAlchemyError as exc:
            raise self._translate(exc, tag, context) from exc
        if affected != 1:
            raise DoesNotExistError(self.entity)

    async def ping(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            raise UnavailableError(f"failed to ping the database: {exc}") from exc
