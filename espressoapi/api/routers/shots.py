from __future__ import annotations

from fastapi import APIRouter, Depends

from espressoapi.api.deps import get_shot_service
from espressoapi.dto import ShotDTO
from espressoapi.schemas import ErrorResponse, ItemDeletedResponse, ShotRequest
from espressoapi.services import ShotService

router = APIRouter(prefix="/rest/v1/shots", tags=["shots"])


@router.post(
    "",
    status_code=201,
    response_model=ShotDTO,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Record a shot",
    description="Responds 404 when the sheet or the beans do not exist.",
)
async def create_shot(body: ShotRequest, svc: ShotService = Depends(get_shot_service)):
    return await svc.create_shot(body.to_dto())


@router.get("", response_model=list[ShotDTO], summary="List shots")
async def list_shots(svc: ShotService = Depends(get_shot_service)):
    return await svc.get_all_shots()


@router.get(
    "/{shot_id}",
    response_model=ShotDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Get a shot",
)
async def get_shot(shot_id: int, svc: ShotService = Depends(get_shot_service)):
    return await svc.get_shot_by_id(shot_id)


@router.put(
    "/{shot_id}",
    response_model=ShotDTO,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a shot",
)
async def update_shot(
    shot_id: int, body: ShotRequest, svc: ShotService = Depends(get_shot_service)
):
    dto = body.to_dto()
    dto.id = shot_id
    return await svc.update_shot_by_id(shot_id, dto)


@router.delete(
    "/{shot_id}",
    response_model=ItemDeletedResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a shot",
)
async def delete_shot(shot_id: int, svc: ShotService = Depends(get_shot_service)):
    await svc.delete_shot_by_id(shot_id)
    return {"id": shot_id, "msg": "shot deleted successfully"}
