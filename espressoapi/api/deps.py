"""API dependency helpers and service providers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from espressoapi.repositories.sqlalchemy import (
    ErrorTranslator,
    SqlAlchemyBeansRepository,
    SqlAlchemyRoasterRepository,
    SqlAlchemySheetRepository,
    SqlAlchemyShotRepository,
)
from espressoapi.services import BeansService, RoasterService, SheetService, ShotService

__all__ = [
    "get_session_factory",
    "get_error_translator",
    "get_sheet_service",
    "get_roaster_service",
    "get_beans_service",
    "get_shot_service",
]


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


def get_error_translator(request: Request) -> ErrorTranslator:
    return request.app.state.error_translator


# --- Service providers for DI ---


def get_sheet_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    translator: ErrorTranslator = Depends(get_error_translator),
) -> SheetService:
    return SheetService(SqlAlchemySheetRepository(session_factory, translator))


def get_roaster_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    translator: ErrorTranslator = Depends(get_error_translator),
) -> RoasterService:
    return RoasterService(SqlAlchemyRoasterRepository(session_factory, translator))


def get_beans_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    translator: ErrorTranslator = Depends(get_error_translator),
) -> BeansService:
    return BeansService(SqlAlchemyBeansRepository(session_factory, translator))


def get_shot_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    translator: ErrorTranslator = Depends(get_error_translator),
) -> ShotService:
    return ShotService(SqlAlchemyShotRepository(session_factory, translator))
