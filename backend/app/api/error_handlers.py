"""Error Handlers: global exception handlers and the route-level failure guard.

Invariants:
    - IceBreakunError → status from HTTP_STATUS_BY_KIND, body {"error": message}
    - RequestValidationError (malformed JSON, wrong field types) → 400
    - HTTPException (unknown route, wrong method) → its status, body {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details
    - internal_failure_guard turns anything that is not an IceBreakunError into
      InternalFailure(verb, entity), after logging the original exception

Design Decisions:
    - Four-layer handler: domain, validation, HTTP, catch-all
    - Registration extracted from main.py to keep the app factory small
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import IceBreakunError, InternalFailure

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


@contextmanager
def internal_failure_guard(verb: str, entity: str) -> Iterator[None]:
    """Wrap a data-access call; unexpected failures become InternalFailure."""
    try:
        yield
    except IceBreakunError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to {verb} {entity}: {e}",
            exc_info=True, extra={"entity": entity},
        )
        raise InternalFailure(verb, entity) from e


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(IceBreakunError)
    async def domain_error_handler(request: Request, exc: IceBreakunError):
        """Handle all semantic errors raised by validation and data access."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 body; field details help the frontend highlight inputs."""
    return {
        "error": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
            }
            for e in exc.errors()
        ],
    }
