# espressoapi/db.py
from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from espressoapi.models import Base

_ASYNC_SCHEMES = {
    "mysql": (
        ("mysql+pymysql://", "mysql+aiomysql://"),
        ("mysql+mysqldb://", "mysql+aiomysql://"),
        ("mysql://", "mysql+aiomysql://"),
        ("mariadb://", "mariadb+aiomysql://"),
    ),
    "postgres": (
        ("postgresql+psycopg://", "postgresql+asyncpg://"),
        ("postgresql+psycopg2://", "postgresql+asyncpg://"),
        ("postgresql://", "postgresql+asyncpg://"),
        ("postgres://", "postgresql+asyncpg://"),
    ),
}


def apply_async_scheme(database_url: str, database_type: str = "mysql") -> str:
    """Rewrite a bare or sync-driver URL to the async driver for ``database_type``."""
    for prefix, replacement in _ASYNC_SCHEMES.get(database_type, ()):
        if database_url.startswith(prefix):
            return database_url.replace(prefix, replacement, 1)
    return database_url


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str, database_type: str = "mysql") -> AsyncEngine:
    url = make_url(apply_async_scheme(database_url, database_type))
    connect_args = {}

    # Handle sslmode for asyncpg
    if url.get_backend_name() == "postgresql" and url.get_driver_name() == "asyncpg":
        query = dict(url.query)
        if "sslmode" in query:
            connect_args["ssl"] = query.pop("sslmode")
        # asyncpg does not support channel_binding
        query.pop("channel_binding", None)
        url = url.set(query=query)

    kwargs = {"pool_pre_ping": True, "connect_args": connect_args}
    if url.get_backend_name() == "sqlite":
        engine = create_async_engine(url, **kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_async_engine(url, pool_recycle=3600, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = [
    "apply_async_scheme",
    "create_engine",
    "create_session_factory",
    "create_schema",
]
