"""
Protocol rendering of error codes.

Owns the Code -> (HTTP status, error type) table and the JSON error body.
Caller-fault errors surface their rendered message; internal and system
errors surface a generic message so that no internal detail leaks.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from gateway.domain.codes import Code
from gateway.domain.errors import HttpError, render_message

GENERIC_INTERNAL_MESSAGE = "An internal error has occurred."


class ErrorType(str, Enum):
    """Coarse category shown to API clients."""

    INVALID_REQUEST = "invalid_request"
    INTERNAL = "internal"
    SYSTEM = "system"


@dataclass(frozen=True)
class CodeDescription:
    """HTTP status and error type of a code."""

    http_status: int
    error_type: ErrorType


_DESCRIPTIONS: dict[Code, CodeDescription] = {
    Code.BAD_REQUEST: CodeDescription(400, ErrorType.INVALID_REQUEST),
    Code.MISSING_CONTENT_TYPE: CodeDescription(415, ErrorType.INVALID_REQUEST),
    Code.INVALID_CONTENT_TYPE: CodeDescription(415, ErrorType.INVALID_REQUEST),
    Code.UNSUPPORTED_MEDIA_TYPE: CodeDescription(415, ErrorType.INVALID_REQUEST),
    Code.MISSING_PAYLOAD: CodeDescription(400, ErrorType.INVALID_REQUEST),
    Code.MALFORMED_PAYLOAD: CodeDescription(400, ErrorType.INVALID_REQUEST),
    Code.PAYLOAD_TOO_LARGE: CodeDescription(413, ErrorType.INVALID_REQUEST),
    Code.INTERNAL: CodeDescription(500, ErrorType.INTERNAL),
    Code.INDEX_NOT_FOUND: CodeDescription(404, ErrorType.INVALID_REQUEST),
    Code.INDEX_ALREADY_EXISTS: CodeDescription(409, ErrorType.INVALID_REQUEST),
    Code.INVALID_INDEX_UID: CodeDescription(400, ErrorType.INVALID_REQUEST),
    Code.TASK_NOT_FOUND: CodeDescription(404, ErrorType.INVALID_REQUEST),
    Code.NO_SPACE_LEFT_ON_DEVICE: CodeDescription(500, ErrorType.SYSTEM),
}


def describe(code: Code) -> CodeDescription:
    """Return the HTTP status and error type of a code."""
    return _DESCRIPTIONS[code]


class ResponseError(BaseModel):
    """Standard error body returned by all error handlers."""

    message: str
    code: str
    type: str
    link: str


def build_response_error(error: HttpError, code: Code, docs_url: str) -> ResponseError:
    """Render a classified error into the JSON error body.

    Args:
        error: The classified failure.
        code: Its code, as computed by gateway.domain.mapping.error_code.
        docs_url: Base URL of the error documentation.

    Returns:
        The response body.
    """
    description = describe(code)
    if description.error_type is ErrorType.INVALID_REQUEST:
        message = render_message(error)
    else:
        message = GENERIC_INTERNAL_MESSAGE
    return ResponseError(
        message=message,
        code=code.value,
        type=description.error_type.value,
        link=f"{docs_url}#{code.value}",
    )
