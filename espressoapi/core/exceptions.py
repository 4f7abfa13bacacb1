"""Domain-level exception hierarchy for service and repository layers.

Repositories classify store failures into these kinds once; everything above
the repository boundary decides on the kind (and its entity), never on the
text of the underlying driver error.
"""

from __future__ import annotations

from enum import Enum


class Entity(str, Enum):
    """Entity tag; the value is the table backing the entity."""

    SHEET = "sheets"
    ROASTER = "roasters"
    BEANS = "beans"
    SHOT = "shots"

    @property
    def table(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_table(cls, table: str) -> Entity | None:
        try:
            return cls(table)
        except ValueError:
            return None


_LABELS = {
    Entity.SHEET: "sheet",
    Entity.ROASTER: "roaster",
    Entity.BEANS: "beans",
    Entity.SHOT: "shot",
}


class DomainError(Exception):
    """Base class for domain-specific failures."""

    def _key(self) -> tuple:
        return (type(self),)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class ConflictError(DomainError):
    """Raised when a state conflict occurs (e.g. duplicate entries)."""


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""


class InfrastructureError(DomainError):
    """Raised when infrastructure (DB or external service) is unavailable."""


class AlreadyExistsError(ConflictError):
    """A row with the same natural key is already stored."""

    def __init__(self, entity: Entity) -> None:
        self.entity = entity
        super().__init__(f"{entity.label} already exists")

    def _key(self) -> tuple:
        return (type(self), self.entity)


class DoesNotExistError(NotFoundError):
    """No row matched, or a foreign key points at a missing row of ``entity``."""

    def __init__(self, entity: Entity) -> None:
        self.entity = entity
        super().__init__(f"{entity.label} does not exist")

    def _key(self) -> tuple:
        return (type(self), self.entity)


class ForeignKeyConstraintError(ConflictError):
    """Deleting a row of ``entity`` is blocked by rows still referencing it.

    ``referenced_by`` names the dependent entity when the store reported it.
    """

    def __init__(self, entity: Entity, referenced_by: Entity | None = None) -> None:
        self.entity = entity
        self.referenced_by = referenced_by
        super().__init__(f"{entity.label} foreign key constraint failed")

    def _key(self) -> tuple:
        return (type(self), self.entity)


class ValidationFailedError(ValidationError):
    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def _key(self) -> tuple:
        return (type(self), self.field)


class UnavailableError(InfrastructureError):
    """The store did not answer a liveness check."""

    def __init__(self, message: str = "database unavailable") -> None:
        super().__init__(message)


class UnknownStoreError(DomainError):
    """Unclassified store failure; the driver error is kept as ``cause``."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        detail = f"{message}: {cause}" if cause is not None else message
        super().__init__(detail)
        self.__cause__ = cause


__all__ = [
    "Entity",
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "InfrastructureError",
    "AlreadyExistsError",
    "DoesNotExistError",
    "ForeignKeyConstraintError",
    "ValidationFailedError",
    "UnavailableError",
    "UnknownStoreError",
]
