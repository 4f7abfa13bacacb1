"""Custom SQLAlchemy types used by the persistence layer."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

from sqlalchemy.types import BigInteger, SmallInteger, TypeDecorator

_ONE_MS = timedelta(milliseconds=1)


class DurationMillis(TypeDecorator[timedelta]):
    """Store a ``timedelta`` as whole milliseconds in a BIGINT column."""

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        return round(value / _ONE_MS)

    def process_result_value(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        return timedelta(milliseconds=int(value))


class OrdinalEnum(TypeDecorator[Enum]):
    """Store an Enum member as its declaration index (TINYINT/SMALLINT).

    Keeps the on-disk integers stable as long as members are only appended.
    """

    impl = SmallInteger
    cache_ok = True

    def __init__(self, enum_cls: type[Enum]) -> None:
        super().__init__()
        self.enum_cls = enum_cls

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        members = list(self.enum_cls)
        return members.index(self.enum_cls(value))

    def process_result_value(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        return list(self.enum_cls)[int(value)]
