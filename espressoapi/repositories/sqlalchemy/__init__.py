"""SQLAlchemy implementations of repository interfaces."""

from .beans import SqlAlchemyBeansRepository
from .errors import ErrorTranslator, translator_for_dialect
from .roaster import SqlAlchemyRoasterRepository
from .sheet import SqlAlchemySheetRepository
from .shot import SqlAlchemyShotRepository, assemble_shot

__all__ = [
    "ErrorTranslator",
    "translator_for_dialect",
    "assemble_shot",
    "SqlAlchemySheetRepository",
    "SqlAlchemyRoasterRepository",
    "SqlAlchemyBeansRepository",
    "SqlAlchemyShotRepository",
]
