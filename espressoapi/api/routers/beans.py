from __future__ import annotations

from fastapi import APIRouter, Depends

from espressoapi.api.deps import get_beans_service
from espressoapi.dto import BeansDTO
from espressoapi.schemas import BeansRequest, ErrorResponse, ItemDeletedResponse
from espressoapi.services import BeansService

router = APIRouter(prefix="/rest/v1/beans", tags=["beans"])


@router.post(
    "",
    status_code=201,
    response_model=BeansDTO,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Create beans",
    description="Responds 404 when the roaster does not exist.",
)
async def create_beans(body: BeansRequest, svc: BeansService = Depends(get_beans_service)):
    return await svc.create_beans(body.to_dto())


@router.get("", response_model=list[BeansDTO], summary="List beans")
async def list_beans(svc: BeansService = Depends(get_beans_service)):
    return await svc.get_all_beans()


@router.get(
    "/{beans_id}",
    response_model=BeansDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Get beans",
)
async def get_beans(beans_id: int, svc: BeansService = Depends(get_beans_service)):
    return await svc.get_beans_by_id(beans_id)


@router.put(
    "/{beans_id}",
    response_model=BeansDTO,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update beans",
)
async def update_beans(
    beans_id: int, body: BeansRequest, svc: BeansService = Depends(get_beans_service)
):
    dto = body.to_dto()
    dto.id = beans_id
    return await svc.update_beans_by_id(beans_id, dto)


@router.delete(
    "/{beans_id}",
    response_model=ItemDeletedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete beans",
    description="Fails with 400 while shots still reference the beans.",
)
async def delete_beans(beans_id: int, svc: BeansService = Depends(get_beans_service)):
    await svc.delete_beans_by_id(beans_id)
    return {"id": beans_id, "msg": "beans deleted successfully"}
