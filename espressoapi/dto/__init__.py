"""Public DTO exports for FastAPI response models."""

from .beans import BeansDTO
from .roaster import RoasterDTO
from .sheet import SheetDTO
from .shot import ShotDTO

__all__ = [
    "SheetDTO",
    "RoasterDTO",
    "BeansDTO",
    "ShotDTO",
]
