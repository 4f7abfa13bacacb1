# Import every model so Base.metadata knows all tables
# espressoapi/models/__init__.py
from .base import Base
from .beans import Beans
from .enums import ComparisonWithPrevious, RoastLevel
from .roaster import Roaster
from .sheet import Sheet
from .shot import Shot

__all__ = [
    "Base",
    "Sheet",
    "Roaster",
    "Beans",
    "Shot",
    "RoastLevel",
    "ComparisonWithPrevious",
]
