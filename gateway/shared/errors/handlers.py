"""
Centralized error handlers for FastAPI.

Every collaborator error type is registered here and goes through the
same pipeline: wrap (into_http_error), classify (error_code), render
(build_response_error). No stack traces or internal details are exposed
to clients. All error responses use the ResponseError schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gateway.core.config import settings
from gateway.domain.codes import Code
from gateway.domain.errors import (
    SOURCE_ERRORS,
    ApiError,
    HttpError,
    into_http_error,
    render_message,
)
from gateway.domain.mapping import Attribution, attribution, error_code
from gateway.domain.sources.query import QueryDeserializeError
from gateway.shared.errors.response import (
    GENERIC_INTERNAL_MESSAGE,
    ErrorType,
    ResponseError,
    build_response_error,
    describe,
)

logger = logging.getLogger(__name__)


def _error_response(error: HttpError) -> JSONResponse:
    """Classify, log and render a wrapped error."""
    code = error_code(error)
    description = describe(code)
    blame = attribution(error)
    if blame is Attribution.SERVER or (
        blame is Attribution.DELEGATED
        and description.error_type is not ErrorType.INVALID_REQUEST
    ):
        logger.error("Request failed: code=%s %s", code.value, render_message(error))
    else:
        logger.warning("Request rejected: code=%s", code.value)
    body = build_response_error(error, code, settings.error_docs_url)
    return JSONResponse(status_code=description.http_status, content=body.model_dump())


def _describe_validation(exc: RequestValidationError) -> str:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    async def handle_source_error(_request: Request, exc: Exception) -> JSONResponse:
        """Handle any collaborator error or pre-classified ApiError."""
        return _error_response(into_http_error(exc))

    for error_type in (ApiError, *SOURCE_ERRORS):
        app.add_exception_handler(error_type, handle_source_error)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle path and parameter validation done by FastAPI itself."""
        error = QueryDeserializeError(_describe_validation(exc))
        return _error_response(into_http_error(error))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        body = ResponseError(
            message=GENERIC_INTERNAL_MESSAGE,
            code=Code.INTERNAL.value,
            type=ErrorType.INTERNAL.value,
            link=f"{settings.error_docs_url}#{Code.INTERNAL.value}",
        )
        return JSONResponse(status_code=500, content=body.model_dump())
