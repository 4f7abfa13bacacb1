from __future__ import annotations

from fastapi import APIRouter, Depends

from espressoapi.api.deps import get_roaster_service
from espressoapi.dto import RoasterDTO
from espressoapi.schemas import ErrorResponse, ItemDeletedResponse, RoasterRequest
from espressoapi.services import RoasterService

router = APIRouter(prefix="/rest/v1/roasters", tags=["roasters"])


@router.post(
    "",
    status_code=201,
    response_model=RoasterDTO,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a roaster",
)
async def create_roaster(body: RoasterRequest, svc: RoasterService = Depends(get_roaster_service)):
    return await svc.create_roaster_by_name(body.name)


@router.get("", response_model=list[RoasterDTO], summary="List roasters")
async def list_roasters(svc: RoasterService = Depends(get_roaster_service)):
    return await svc.get_all_roasters()


@router.get(
    "/{roaster_id}",
    response_model=RoasterDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Get a roaster",
)
async def get_roaster(roaster_id: int, svc: RoasterService = Depends(get_roaster_service)):
    return await svc.get_roaster_by_id(roaster_id)


@router.put(
    "/{roaster_id}",
    response_model=RoasterDTO,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Rename a roaster",
)
async def update_roaster(
    roaster_id: int, body: RoasterRequest, svc: RoasterService = Depends(get_roaster_service)
):
    return await svc.update_roaster_by_id(roaster_id, RoasterDTO(id=roaster_id, name=body.name))


@router.delete(
    "/{roaster_id}",
    response_model=ItemDeletedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a roaster",
    description="Fails with 400 while beans still reference the roaster.",
)
async def delete_roaster(roaster_id: int, svc: RoasterService = Depends(get_roaster_service)):
    await svc.delete_roaster_by_id(roaster_id)
    return {"id": roaster_id, "msg": "roaster deleted successfully"}
