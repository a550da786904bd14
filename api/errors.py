"""Exception handlers mapping domain and framework errors onto responses.

| error                  | status | body                                  |
|------------------------|--------|---------------------------------------|
| malformed request body | 400    | error + decode violations             |
| TaskValidationError    | 400    | error + rule violations               |
| TaskNotFoundError      | 404    | empty                                 |
| SQLAlchemyError        | 500    | generic message, logged here          |
| anything else          | 500    | generic message, logged by middleware |
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from verticals.todo.errors import TaskNotFoundError, TaskValidationError
from verticals.todo.models.schemas import ErrorResponse, Violation

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, violations: list[Violation] | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, violations=violations or [])
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = []
    for err in exc.errors():
        # loc is ("body", field, ...); a bare ("body",) means the whole document
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        violations.append(Violation(
            field=".".join(loc) or "body",
            rule=err.get("type", "invalid"),
            message=err.get("msg", "invalid value"),
        ))
    logger.info("Rejected malformed body on %s %s", request.method, request.url.path)
    return _error(400, "malformed request body", violations)


async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, exc)
    return _error(400, "validation failed", exc.violations)


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> Response:
    logger.debug("%s", exc)
    return Response(status_code=404)


def internal_error_response() -> JSONResponse:
    return _error(500, "internal server error")


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return internal_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TaskValidationError, task_validation_handler)
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(SQLAlchemyError, internal_error_handler)
