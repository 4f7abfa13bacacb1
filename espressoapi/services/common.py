from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from espressoapi.core.exceptions import DomainError


@contextmanager
def operation(logger: structlog.stdlib.BoundLogger, message: str) -> Iterator[None]:
    """Log a failing domain operation once and re-raise it with ``message`` noted.

    The exception object is re-raised as is, so callers still match on its
    class and entity.
    """
    try:
        yield
    except DomainError as exc:
        logger.error(message, error=str(exc), error_type=type(exc).__name__)
        exc.add_note(message)
        raise
