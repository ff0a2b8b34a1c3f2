"""
REST exception handlers.

Every failing REST call is rendered as an ``ErrorResponse`` body
(``timestamp``, ``status``, ``error``, ``message``, ``path``).  Handlers
map the typed service errors onto HTTP status codes:

- ``NotFoundError`` -> 404
- ``InvalidArgumentError`` and request binding failures -> 400
- Starlette ``HTTPException`` (unknown route, wrong method) -> its own code
- anything else -> 500, with the exception text as ``message``

GraphQL errors never reach these handlers; strawberry renders them
itself (see ``api.graphql.resolvers``).
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import InvalidArgumentError, NotFoundError
from ..schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body for ``status_code``."""
    body = ErrorResponse(
        status=int(status_code),
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=int(status_code), content=jsonable_encoder(body))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return error_response(request, HTTPStatus.NOT_FOUND, exc.message)


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
    return error_response(request, HTTPStatus.BAD_REQUEST, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report parameter and body binding failures as 400."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg')}")
    message = "; ".join(problems) or "Invalid request"
    logger.warning("%s %s: %s", request.method, request.url.path, message)
    return error_response(request, HTTPStatus.BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
