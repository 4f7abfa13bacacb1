from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from espressoapi.core.exceptions import (
    AlreadyExistsError,
    DoesNotExistError,
    Entity,
    ForeignKeyConstraintError,
    UnavailableError,
    ValidationFailedError,
)
from espressoapi.dto import BeansDTO, RoasterDTO, SheetDTO, ShotDTO
from espressoapi.repositories.interfaces import (
    BeansRecord,
    RoasterRecord,
    SheetRecord,
    ShotRecord,
)
from espressoapi.services import BeansService, RoasterService, SheetService, ShotService

TS = datetime(2024, 5, 1, 7, 30, 0)


class SpyRepository:
    """Records every call; answers from ``results`` or raises from ``errors``."""

    def __init__(self, results=None, errors=None):
        self.calls: list[tuple] = []
        self._results = results or {}
        self._errors = errors or {}

    def _answer(self, name, *args):
        self.calls.append((name, *args))
        if name in self._errors:
            raise self._errors[name]
        return self._results.get(name)

    async def create(self, record):
        return self._answer("create", record)

    async def get_by_id(self, item_id):
        return self._answer("get_by_id", item_id)

    async def get_by_name(self, name):
        return self._answer("get_by_name", name)

    async def get_all(self):
        return self._answer("get_all")

    async def update_by_id(self, item_id, record):
        self._answer("update_by_id", item_id, record)
        return self._results.get("update_by_id", record)

    async def delete_by_id(self, item_id):
        return self._answer("delete_by_id", item_id)

    async def ping(self):
        return self._answer("ping")

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


# ---- sheets / roasters ----


@pytest.mark.asyncio
async def test_create_sheet_reads_back_by_name():
    stored = SheetRecord(id=1, name="Morning", created_at=TS, updated_at=TS)
    repo = SpyRepository(results={"create": 1, "get_by_name": stored})

    sheet = await SheetService(repo).create_sheet_by_name("Morning")

    assert sheet == SheetDTO(id=1, name="Morning", created_at=TS, updated_at=TS)
    assert repo.names() == ["create", "get_by_name"]
    assert repo.calls[1] == ("get_by_name", "Morning")


@pytest.mark.asyncio
async def test_create_sheet_with_empty_name_never_touches_store():
    repo = SpyRepository()

    with pytest.raises(ValidationFailedError) as excinfo:
        await SheetService(repo).create_sheet_by_name("")

    assert excinfo.value.reason == "sheet name must not be empty"
    assert repo.calls == []


@pytest.mark.asyncio
async def test_duplicate_roaster_keeps_kind_and_gets_context_note():
    repo = SpyRepository(errors={"create": AlreadyExistsError(Entity.ROASTER)})

    with pytest.raises(AlreadyExistsError) as excinfo:
        await RoasterService(repo).create_roaster_by_name("BlueBottle")

    assert excinfo.value == AlreadyExistsError(Entity.ROASTER)
    assert "could not create roaster" in excinfo.value.__notes__


@pytest.mark.asyncio
async def test_update_sheet_returns_repository_result_without_reread():
    repo = SpyRepository()

    sheet = await SheetService(repo).update_sheet_by_id(4, SheetDTO(name="Evening"))

    assert sheet.name == "Evening"
    assert repo.names() == ["update_by_id"]
    assert repo.calls[0][1] == 4


@pytest.mark.asyncio
async def test_delete_roaster_propagates_foreign_key_error():
    repo = SpyRepository(errors={"delete_by_id": ForeignKeyConstraintError(Entity.ROASTER)})

    with pytest.raises(ForeignKeyConstraintError) as excinfo:
        await RoasterService(repo).delete_roaster_by_id(1)
    assert excinfo.value.entity is Entity.ROASTER


@pytest.mark.asyncio
async def test_get_all_sheets_converts_records():
    repo = SpyRepository(results={"get_all": [SheetRecord(id=1, name="a"), SheetRecord(id=2, name="b")]})

    sheets = await SheetService(repo).get_all_sheets()

    assert [s.name for s in sheets] == ["a", "b"]


@pytest.mark.asyncio
async def test_ping_failure_propagates_unavailable():
    repo = SpyRepository(errors={"ping": UnavailableError()})

    with pytest.raises(UnavailableError) as excinfo:
        await SheetService(repo).ping()
    assert "could not ping database" in excinfo.value.__notes__


# ---- beans ----


@pytest.mark.asyncio
async def test_create_beans_reads_back_by_new_id():
    stored = BeansRecord(id=9, roaster=RoasterRecord(id=3, name="BlueBottle"), name="Giant Steps")
    repo = SpyRepository(results={"create": 9, "get_by_id": stored})

    beans = await BeansService(repo).create_beans(
        BeansDTO(roaster=RoasterDTO(id=3), name="Giant Steps")
    )

    assert beans.id == 9
    assert beans.roaster.name == "BlueBottle"
    assert repo.calls[1] == ("get_by_id", 9)
    assert repo.calls[0][1].roaster.id == 3


@pytest.mark.asyncio
async def test_create_beans_with_missing_roaster_is_roaster_does_not_exist():
    repo = SpyRepository(errors={"create": DoesNotExistError(Entity.ROASTER)})

    with pytest.raises(DoesNotExistError) as excinfo:
        await BeansService(repo).create_beans(BeansDTO(roaster=RoasterDTO(id=42), name="x"))
    assert excinfo.value == DoesNotExistError(Entity.ROASTER)


# ---- shots ----


def _shot_record(shot_id: int = 5) -> ShotRecord:
    return ShotRecord(
        id=shot_id,
        sheet=SheetRecord(id=1, name="Morning"),
        beans=BeansRecord(id=2, roaster=RoasterRecord(id=3, name="BlueBottle"), name="Giant Steps"),
        rating=7.0,
        water_temperature=93.0,
        shot_time=timedelta(seconds=27),
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [-0.1, 10.1, float("nan")])
async def test_out_of_range_rating_makes_no_repository_calls(rating):
    repo = SpyRepository()

    with pytest.raises(ValidationFailedError) as excinfo:
        await ShotService(repo).create_shot(
            ShotDTO(sheet=SheetDTO(id=1), beans=BeansDTO(id=2), rating=rating)
        )

    assert excinfo.value.field == "rating"
    assert repo.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0.0, 10.0])
async def test_boundary_ratings_are_accepted(rating):
    repo = SpyRepository(results={"create": 5, "get_by_id": _shot_record()})

    await ShotService(repo).create_shot(ShotDTO(sheet=SheetDTO(id=1), beans=BeansDTO(id=2), rating=rating))

    assert repo.names() == ["create", "get_by_id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("temperature", [0.0, -5.0, float("nan")])
async def test_missing_water_temperature_defaults_to_93(temperature):
    repo = SpyRepository(results={"create": 5, "get_by_id": _shot_record()})

    await ShotService(repo).create_shot(
        ShotDTO(sheet=SheetDTO(id=1), beans=BeansDTO(id=2), rating=5.0, water_temperature=temperature)
    )

    written = repo.calls[0][1]
    assert written.water_temperature == 93.0
    assert written.sheet.id == 1
    assert written.beans.id == 2


@pytest.mark.asyncio
async def test_create_shot_returns_joined_aggregate():
    repo = SpyRepository(results={"create": 5, "get_by_id": _shot_record()})

    shot = await ShotService(repo).create_shot(
        ShotDTO(sheet=SheetDTO(id=1), beans=BeansDTO(id=2), rating=7.0, water_temperature=93.0)
    )

    assert shot.id == 5
    assert shot.sheet.name == "Morning"
    assert shot.beans.roaster.name == "BlueBottle"
    assert repo.calls[1] == ("get_by_id", 5)


@pytest.mark.asyncio
async def test_update_shot_rereads_aggregate():
    repo = SpyRepository(results={"get_by_id": _shot_record(8)})

    shot = await ShotService(repo).update_shot_by_id(
        8, ShotDTO(sheet=SheetDTO(id=1), beans=BeansDTO(id=2), rating=6.0)
    )

    assert repo.names() == ["update_by_id", "get_by_id"]
    assert repo.calls[0][1] == 8
    assert shot.sheet.name == "Morning"


@pytest.mark.asyncio
async def test_update_shot_with_bad_rating_makes_no_repository_calls():
    repo = SpyRepository()

    with pytest.raises(ValidationFailedError):
        await ShotService(repo).update_shot_by_id(8, ShotDTO(rating=11.0))
    assert repo.calls == []


@pytest.mark.asyncio
async def test_readback_failure_after_create_is_noted():
    repo = SpyRepository(results={"create": 5}, errors={"get_by_id": DoesNotExistError(Entity.SHOT)})

    with pytest.raises(DoesNotExistError) as excinfo:
        await ShotService(repo).create_shot(ShotDTO(sheet=SheetDTO(id=1), beans=BeansDTO(id=2)))
    assert "could not get newly created shot" in excinfo.value.__notes__
