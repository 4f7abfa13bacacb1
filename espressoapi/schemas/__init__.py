from .beans import BeansRequest
from .common import ErrorResponse, ItemDeletedResponse, PingResponse
from .sheet import RoasterRequest, SheetRequest
from .shot import ShotRequest

__all__ = [
    "ErrorResponse",
    "ItemDeletedResponse",
    "PingResponse",
    "SheetRequest",
    "RoasterRequest",
    "BeansRequest",
    "ShotRequest",
]
