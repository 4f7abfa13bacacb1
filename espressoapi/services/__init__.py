from .beans import BeansService
from .roasters import RoasterService
from .sheets import SheetService
from .shots import ShotService

__all__ = ["SheetService", "RoasterService", "BeansService", "ShotService"]
