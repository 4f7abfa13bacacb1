# espressoapi/api/routers/ping.py
from fastapi import APIRouter, Depends

from espressoapi.api.deps import get_sheet_service
from espressoapi.schemas.common import ErrorResponse, PingResponse
from espressoapi.services import SheetService

router = APIRouter(tags=["health"])


@router.get(
    "/ping",
    response_model=PingResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Readiness probe",
    description="Checks that the database answers before replying pong.",
)
async def ping(svc: SheetService = Depends(get_sheet_service)):
    await svc.ping()
    return {"ping": "pong"}
