from __future__ import annotations

import structlog

from espressoapi.core.exceptions import ValidationFailedError
from espressoapi.dto import BeansDTO
from espressoapi.dto.mappers import beans_from_record, record_from_beans
from espressoapi.repositories.interfaces import BeansRepository
from espressoapi.services.common import operation

logger = structlog.get_logger(__name__)


class BeansService:
    def __init__(self, repository: BeansRepository):
        self._repo = repository

    async def create_beans(self, beans: BeansDTO) -> BeansDTO:
        if not beans.name:
            raise ValidationFailedError("name", "beans name must not be empty")
        with operation(logger, "could not create beans"):
            beans_id = await self._repo.create(record_from_beans(beans))
        with operation(logger, "could not get newly created beans"):
            record = await self._repo.get_by_id(beans_id)
        return beans_from_record(record)

    async def get_beans_by_id(self, beans_id: int) -> BeansDTO:
        with operation(logger, "could not get beans by id"):
            record = await self._repo.get_by_id(beans_id)
        return beans_from_record(record)

    async def get_all_beans(self) -> list[BeansDTO]:
        with operation(logger, "could not get all beans"):
            records = await self._repo.get_all()
        return [beans_from_record(r) for r in records]

    async def update_beans_by_id(self, beans_id: int, beans: BeansDTO) -> BeansDTO:
        if not beans.name:
            raise ValidationFailedError("name", "beans name must not be empty")
        with operation(logger, "could not update beans by id"):
            record = await self._repo.update_by_id(beans_id, record_from_beans(beans))
        return beans_from_record(record)

    async def delete_beans_by_id(self, beans_id: int) -> None:
        with operation(logger, "could not delete beans by id"):
            await self._repo.delete_by_id(beans_id)

    async def ping(self) -> None:
        with operation(logger, "could not ping database"):
            await self._repo.ping()
