from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from espressoapi.core import exceptions as domain_exceptions

INTERNAL_SERVER_ERROR = "internal server error"
UNHEALTHY_DATABASE = "unhealthy database"


def _msg(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


def _http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    return _msg(exc.status_code, str(exc.detail))


def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return _msg(400, "invalid request")
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return _msg(400, f"invalid request: {loc}: {first.get('msg', 'invalid value')}")


def _already_exists_handler(_: Request, exc: domain_exceptions.AlreadyExistsError) -> JSONResponse:
    return _msg(409, f"a {exc.entity.label} with the given name already exists")


def _does_not_exist_handler(_: Request, exc: domain_exceptions.DoesNotExistError) -> JSONResponse:
    return _msg(404, f"no {exc.entity.label} found for given id")


def _foreign_key_handler(
    _: Request, exc: domain_exceptions.ForeignKeyConstraintError
) -> JSONResponse:
    return _msg(400, f"cannot delete due to existing references: {exc}")


def _validation_failed_handler(
    _: Request, exc: domain_exceptions.ValidationFailedError
) -> JSONResponse:
    return _msg(400, exc.reason)


def _fixed_message_handler(status_code: int, msg: str):
    # Store error text is never echoed to clients
    def _handler(_: Request, exc: Exception) -> JSONResponse:
        return _msg(status_code, msg)

    return _handler


def install(app) -> None:
    # Register centralized exception handlers
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(domain_exceptions.AlreadyExistsError, _already_exists_handler)
    app.add_exception_handler(domain_exceptions.DoesNotExistError, _does_not_exist_handler)
    app.add_exception_handler(domain_exceptions.ForeignKeyConstraintError, _foreign_key_handler)
    app.add_exception_handler(
        domain_exceptions.ValidationFailedError, _validation_failed_handler
    )
    app.add_exception_handler(
        domain_exceptions.UnavailableError, _fixed_message_handler(500, UNHEALTHY_DATABASE)
    )
    app.add_exception_handler(
        domain_exceptions.DomainError, _fixed_message_handler(500, INTERNAL_SERVER_ERROR)
    )
    app.add_exception_handler(Exception, _fixed_message_handler(500, INTERNAL_SERVER_ERROR))
