"""Mapping of core failures and framework errors to JSON error responses."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.taskboard import ErrorKind, Failure, FieldError, Result

from .schemas import ErrorResponse, FieldErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.CONFLICT: 409,
}

ROUTE_SUGGESTIONS = [
    "GET / - Información de la API",
    "POST /auth/login - Autenticación",
    "GET /api/tareas - Listar tareas (requiere auth)",
]


class TaskboardHTTPError(Exception):
    """A core failure on its way to the client."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.failure.kind]


def unwrap(result: Result[T]) -> T:
    """Value of a successful result; failures are raised as ``TaskboardHTTPError``."""
    if isinstance(result, Failure):
        raise TaskboardHTTPError(result)
    return result.value


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_body(message: str, errors: Optional[Iterable[FieldError]] = None) -> dict:
    details: Optional[List[FieldErrorResponse]] = None
    if errors:
        details = [FieldErrorResponse(campo=e.field, mensaje=e.message) for e in errors]
    return ErrorResponse(error=message, detalles=details, timestamp=_now()).model_dump(
        exclude_none=True
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""

    @app.exception_handler(TaskboardHTTPError)
    async def handle_core_failure(request: Request, exc: TaskboardHTTPError) -> JSONResponse:
        failure = exc.failure
        logger.info(
            "%s %s -> %s %s", request.method, request.url.path, exc.status_code, failure.message
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(failure.message, failure.errors),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            FieldError(".".join(str(part) for part in error["loc"]), error["msg"])
            for error in exc.errors()
        ]
        return JSONResponse(status_code=400, content=error_body("Datos inválidos", errors))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            content = {
                "error": "Ruta no encontrada",
                "metodo": request.method,
                "ruta": request.url.path,
                "sugerencias": ROUTE_SUGGESTIONS,
                "timestamp": _now(),
            }
            return JSONResponse(status_code=404, content=content)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=error_body("Error interno del servidor"))
