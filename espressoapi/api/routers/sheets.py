from __future__ import annotations

from fastapi import APIRouter, Depends

from espressoapi.api.deps import get_sheet_service
from espressoapi.dto import SheetDTO
from espressoapi.schemas import ErrorResponse, ItemDeletedResponse, SheetRequest
from espressoapi.services import SheetService

router = APIRouter(prefix="/rest/v1/sheets", tags=["sheets"])


@router.post(
    "",
    status_code=201,
    response_model=SheetDTO,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a sheet",
)
async def create_sheet(body: SheetRequest, svc: SheetService = Depends(get_sheet_service)):
    return await svc.create_sheet_by_name(body.name)


@router.get("", response_model=list[SheetDTO], summary="List sheets")
async def list_sheets(svc: SheetService = Depends(get_sheet_service)):
    return await svc.get_all_sheets()


@router.get(
    "/{sheet_id}",
    response_model=SheetDTO,
    responses={404: {"model": ErrorResponse}},
    summary="Get a sheet",
)
async def get_sheet(sheet_id: int, svc: SheetService = Depends(get_sheet_service)):
    return await svc.get_sheet_by_id(sheet_id)


@router.put(
    "/{sheet_id}",
    response_model=SheetDTO,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Rename a sheet",
)
async def update_sheet(
    sheet_id: int, body: SheetRequest, svc: SheetService = Depends(get_sheet_service)
):
    return await svc.update_sheet_by_id(sheet_id, SheetDTO(id=sheet_id, name=body.name))


@router.delete(
    "/{sheet_id}",
    response_model=ItemDeletedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a sheet",
    description="Fails with 400 while shots still reference the sheet.",
)
async def delete_sheet(sheet_id: int, svc: SheetService = Depends(get_sheet_service)):
    await svc.delete_sheet_by_id(sheet_id)
    return {"id": sheet_id, "msg": "sheet deleted successfully"}
