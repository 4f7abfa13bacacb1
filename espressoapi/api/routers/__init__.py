from .beans import router as beans_router
from .ping import router as ping_router
from .roasters import router as roasters_router
from .sheets import router as sheets_router
from .shots import router as shots_router

__all__ = ["beans_router", "ping_router", "roasters_router", "sheets_router", "shots_router"]
