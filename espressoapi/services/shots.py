from __future__ import annotations

import structlog

from espressoapi.core.exceptions import ValidationFailedError
from espressoapi.dto import ShotDTO
from espressoapi.dto.mappers import record_from_shot, shot_from_record
from espressoapi.repositories.interfaces import ShotRepository
from espressoapi.services.common import operation

logger = structlog.get_logger(__name__)

DEFAULT_WATER_TEMPERATURE = 93.0
MIN_RATING = 0.0
MAX_RATING = 10.0


def _prepare(shot: ShotDTO) -> ShotDTO:
    """Apply the water temperature default and reject out-of-range ratings."""
    # NaN is not > 0 either
    if not shot.water_temperature > 0:
        shot = shot.model_copy(update={"water_temperature": DEFAULT_WATER_TEMPERATURE})
    # NaN fails both comparisons
    if not MIN_RATING <= shot.rating <= MAX_RATING:
        raise ValidationFailedError(
            "rating",
            f"shot rating is out of range. Must be between {MIN_RATING} and {MAX_RATING}",
        )
    return shot


class ShotService:
    def __init__(self, repository: ShotRepository):
        self._repo = repository

    async def create_shot(self, shot: ShotDTO) -> ShotDTO:
        shot = _prepare(shot)
        with operation(logger, "could not create shot"):
            shot_id = await self._repo.create(record_from_shot(shot))
        with operation(logger, "could not get newly created shot"):
            record = await self._repo.get_by_id(shot_id)
        return shot_from_record(record)

    async def get_shot_by_id(self, shot_id: int) -> ShotDTO:
        with operation(logger, "could not get shot by id"):
            record = await self._repo.get_by_id(shot_id)
        return shot_from_record(record)

    async def get_all_shots(self) -> list[ShotDTO]:
        with operation(logger, "could not get all shots"):
            records = await self._repo.get_all()
        return [shot_from_record(r) for r in records]

    async def update_shot_by_id(self, shot_id: int, shot: ShotDTO) -> ShotDTO:
        shot = _prepare(shot)
        with operation(logger, "could not update shot by id"):
            await self._repo.update_by_id(shot_id, record_from_shot(shot))
        # The update only carries parent ids; read the joined aggregate back
        with operation(logger, "could not get updated shot"):
            record = await self._repo.get_by_id(shot_id)
        return shot_from_record(record)

    async def delete_shot_by_id(self, shot_id: int) -> None:
        with operation(logger, "could not delete shot by id"):
            await self._repo.delete_by_id(shot_id)

    async def ping(self) -> None:
        with operation(logger, "could not ping database"):
            await self._repo.ping()
