"""Translate raw store errors into the domain error taxonomy.

Each store engine reports constraint violations differently, so every engine
gets its own translator behind the same ``translate(raw, entity, fallback)``
contract:

* ``entity`` is the entity tag the caller already knows, or ``None`` when the
  call site is generic and the table must be read from the error text.
* ``fallback`` is returned unchanged whenever the error cannot be classified.

The message parsing below is tied to each engine's wording and must not leak
out of this module.
"""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import asyncpg
import pymysql
from sqlalchemy.exc import DBAPIError

from espressoapi.core.exceptions import (
    AlreadyExistsError,
    DoesNotExistError,
    Entity,
    ForeignKeyConstraintError,
)

# MySQL server error numbers
ER_DUP_ENTRY = 1062
ER_ROW_IS_REFERENCED_2 = 1451
ER_NO_REFERENCED_ROW_2 = 1452

# PostgreSQL SQLSTATE codes
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"


class StoreErrorKind(Enum):
    DUPLICATE = "duplicate"
    # delete/update of a parent row blocked by a child row
    ROW_REFERENCED = "row_referenced"
    # insert/update of a child row pointing at a missing parent
    REFERENCE_MISSING = "reference_missing"
    OTHER = "other"


@dataclass(frozen=True)
class StoreError:
    kind: StoreErrorKind
    message: str
    detail: str = ""


class TableNameNotFound(ValueError):
    """The error text did not contain a table name where one was expected."""


class ErrorTranslator(Protocol):
    def translate(
        self,
        raw: BaseException | None,
        entity: Entity | None,
        fallback: BaseException,
    ) -> BaseException | None: ...


def _driver_error(raw: BaseException) -> BaseException:
    # SQLAlchemy wraps the DBAPI exception; the driver's own error sits on .orig
    if isinstance(raw, DBAPIError) and raw.orig is not None:
        return raw.orig
    return raw


class _BaseTranslator:
    """Shared decision table; subclasses only classify and parse."""

    def classify(self, raw: BaseException) -> StoreError | None:
        raise NotImplementedError

    def referencing_table(self, error: StoreError) -> str:
        raise TableNameNotFound("no table name in error")

    def referenced_table(self, error: StoreError) -> str:
        raise TableNameNotFound("no table name in error")

    def translate(
        self,
        raw: BaseException | None,
        entity: Entity | None,
        fallback: BaseException,
    ) -> BaseException | None:
        if raw is None:
            return None

        error = self.classify(raw)
        if error is None:
            return fallback

        if error.kind is StoreErrorKind.DUPLICATE:
            # Which unique key fired cannot be told reliably from the text
            if entity is None:
                return fallback
            return AlreadyExistsError(entity)

        if error.kind is StoreErrorKind.ROW_REFERENCED:
            child = self._entity_from(self.referencing_table, error)
            if entity is not None:
                return ForeignKeyConstraintError(entity, referenced_by=child)
            if child is None:
                return fallback
            return ForeignKeyConstraintError(child)

        if error.kind is StoreErrorKind.REFERENCE_MISSING:
            if entity is not None:
                return DoesNotExistError(entity)
            parent = self._entity_from(self.referenced_table, error)
            if parent is None:
                return fallback
            return DoesNotExistError(parent)

        return fallback

    @staticmethod
    def _entity_from(extract, error: StoreError) -> Entity | None:  # type: ignore[no-untyped-def]
        try:
            return Entity.from_table(extract(error))
        except TableNameNotFound:
            return None


# `schema`.`table` as printed at the head of a 1451 message (the child table)
_MYSQL_1451_TABLE = re.compile(r"`([^`]+)`\.`([^`]+)`")
# FOREIGN KEY (`col`) REFERENCES `table` (`id` in a 1452 message (the parent table)
_MYSQL_1452_TABLE = re.compile(r"FOREIGN KEY \(`(.+?)`\) REFERENCES `(.+?)` \(`id`")


def extract_table_from_row_referenced(message: str) -> str:
    """Return the referencing (child) table named in a MySQL 1451 message.

    Example::

        Cannot delete or update a parent row: a foreign key constraint fails
        (`espresso-api`.`beans`, CONSTRAINT `beans_ibfk_1` FOREIGN KEY
        (`roaster_id`) REFERENCES `roasters` (`id`))

    yields ``"beans"``.
    """
    match = _MYSQL_1451_TABLE.search(message)
    if match is None:
        raise TableNameNotFound("failed to extract table name from error message")
    return match.group(2)


def extract_table_from_missing_reference(message: str) -> str:
    """Return the referenced (parent) table named in a MySQL 1452 message.

    Example::

        Cannot add or update a child row: a foreign key constraint fails
        (`espresso-api`.`shots`, CONSTRAINT `shots_ibfk_1` FOREIGN KEY
        (`sheet_id`) REFERENCES `sheets` (`id`))

    yields ``"sheets"``.
    """
    match = _MYSQL_1452_TABLE.search(message)
    if match is None:
        raise TableNameNotFound("failed to extract table name from error message")
    return match.group(2)


class MySQLErrorTranslator(_BaseTranslator):
    """Errors raised through aiomysql/PyMySQL carry ``args == (errno, message)``."""

    _KINDS = {
        ER_DUP_ENTRY: StoreErrorKind.DUPLICATE,
        ER_ROW_IS_REFERENCED_2: StoreErrorKind.ROW_REFERENCED,
        ER_NO_REFERENCED_ROW_2: StoreErrorKind.REFERENCE_MISSING,
    }

    def classify(self, raw: BaseException) -> StoreError | None:
        err = _driver_error(raw)
        if not isinstance(err, pymysql.err.MySQLError):
            return None
        if not err.args or not isinstance(err.args[0], int):
            return None
        code = err.args[0]
        message = str(err.args[1]) if len(err.args) > 1 else ""
        return StoreError(kind=self._KINDS.get(code, StoreErrorKind.OTHER), message=message)

    def referencing_table(self, error: StoreError) -> str:
        return extract_table_from_row_referenced(error.message)

    def referenced_table(self, error: StoreError) -> str:
        return extract_table_from_missing_reference(error.message)


_PG_CHILD_TABLE = re.compile(r'violates foreign key constraint "[^"]+" on table "([^"]+)"')
_PG_PARENT_TABLE = re.compile(r'is not present in table "([^"]+)"')


class PostgresErrorTranslator(_BaseTranslator):
    """asyncpg errors expose SQLSTATE; both FK directions share 23503."""

    def classify(self, raw: BaseException) -> StoreError | None:
        err = _driver_error(raw)
        # SQLAlchemy's asyncpg adapter chains the native asyncpg exception
        if not isinstance(err, asyncpg.PostgresError) and isinstance(
            err.__cause__, asyncpg.PostgresError
        ):
            err = err.__cause__
        if not isinstance(err, asyncpg.PostgresError):
            return None

        message = str(getattr(err, "message", "") or err)
        detail = str(getattr(err, "detail", "") or "")
        if err.sqlstate == PG_UNIQUE_VIOLATION:
            kind = StoreErrorKind.DUPLICATE
        elif err.sqlstate == PG_FOREIGN_KEY_VIOLATION:
            if message.startswith("update or delete on table"):
                kind = StoreErrorKind.ROW_REFERENCED
            else:
                kind = StoreErrorKind.REFERENCE_MISSING
        else:
            kind = StoreErrorKind.OTHER
        return StoreError(kind=kind, message=message, detail=detail)

    def referencing_table(self, error: StoreError) -> str:
        match = _PG_CHILD_TABLE.search(error.message)
        if match is None:
            raise TableNameNotFound("failed to extract table name from error message")
        return match.group(1)

    def referenced_table(self, error: StoreError) -> str:
        match = _PG_PARENT_TABLE.search(error.detail)
        if match is None:
            raise TableNameNotFound("failed to extract table name from error detail")
        return match.group(1)


class SQLiteErrorTranslator(_BaseTranslator):
    """SQLite names neither table nor direction of a foreign-key failure.

    The direction is taken from the failing statement; table extraction is
    never possible, so untagged foreign-key errors always fall back.
    """

    def classify(self, raw: BaseException) -> StoreError | None:
        err = _driver_error(raw)
        if not isinstance(err, sqlite3.Error):
            return None
        message = str(err)
        if "UNIQUE constraint failed" in message:
            return StoreError(kind=StoreErrorKind.DUPLICATE, message=message)
        if "FOREIGN KEY constraint failed" in message:
            statement = (getattr(raw, "statement", None) or "").lstrip().upper()
            if statement.startswith("DELETE"):
                return StoreError(kind=StoreErrorKind.ROW_REFERENCED, message=message)
            return StoreError(kind=StoreErrorKind.REFERENCE_MISSING, message=message)
        return StoreError(kind=StoreErrorKind.OTHER, message=message)


def translator_for_dialect(dialect_name: str) -> ErrorTranslator:
    if dialect_name in {"mysql", "mariadb"}:
        return MySQLErrorTranslator()
    if dialect_name == "postgresql":
        return PostgresErrorTranslator()
    if dialect_name == "sqlite":
        return SQLiteErrorTranslator()
    raise ValueError(f"unsupported database dialect: {dialect_name}")


__all__ = [
    "ErrorTranslator",
    "MySQLErrorTranslator",
    "PostgresErrorTranslator",
    "SQLiteErrorTranslator",
    "StoreError",
    "StoreErrorKind",
    "TableNameNotFound",
    "extract_table_from_missing_reference",
    "extract_table_from_row_referenced",
    "translator_for_dialect",
]
