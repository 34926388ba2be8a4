"""
Code mapping for classified errors.

error_code() is pure and total over HttpError and PayloadError.
Leaf tables are looked up along the error's MRO, so the base class of a
source stands for any failure that source could not name.

The scheduler and the document readers own their codes; the mapping
forwards error.error_code() and never re-derives it.
"""

from enum import Enum
from typing import Callable

from gateway.domain.codes import Code
from gateway.domain.errors import (
    DocumentFormatFailure,
    FileStoreFailure,
    HttpError,
    InvalidContentType,
    JoinFailure,
    MalformedPayload,
    MissingContentType,
    MissingPayload,
    Payload,
    PayloadError,
    QueryStringError,
    SchedulerFailure,
    StructuredBodyError,
    TransportPayload,
)
from gateway.domain.sources.json_body import (
    JsonContentType,
    JsonDeserializeError,
    JsonOverflow,
    JsonPayloadError,
    JsonSerializeError,
    JsonTransportError,
)
from gateway.domain.sources.query import QueryDeserializeError, QueryPayloadError
from gateway.domain.sources.transport import (
    BodyIoError,
    EncodingCorrupted,
    FramingError,
    IncompleteBody,
    PayloadOverflow,
    TransportError,
    UnknownLength,
)


class Attribution(Enum):
    """Who is responsible for a failure."""

    CALLER = "caller"
    SERVER = "server"
    DELEGATED = "delegated"


_TRANSPORT_CODES: dict[type, Code] = {
    IncompleteBody: Code.BAD_REQUEST,
    EncodingCorrupted: Code.INTERNAL,
    PayloadOverflow: Code.PAYLOAD_TOO_LARGE,
    UnknownLength: Code.BAD_REQUEST,
    FramingError: Code.BAD_REQUEST,
    BodyIoError: Code.INTERNAL,
    TransportError: Code.INTERNAL,
}

_JSON_CODES: dict[type, Code] = {
    JsonOverflow: Code.PAYLOAD_TOO_LARGE,
    JsonContentType: Code.UNSUPPORTED_MEDIA_TYPE,
    JsonDeserializeError: Code.BAD_REQUEST,
    JsonSerializeError: Code.INTERNAL,
    JsonPayloadError: Code.INTERNAL,
}

_QUERY_CODES: dict[type, Code] = {
    QueryDeserializeError: Code.BAD_REQUEST,
    QueryPayloadError: Code.INTERNAL,
}


def _lookup(table: dict[type, Code], error: Exception) -> Code:
    for cls in type(error).__mro__:
        if cls in table:
            return table[cls]
    raise TypeError(f"no code registered for {type(error).__name__}")


def _json_code(error: JsonPayloadError) -> Code:
    if isinstance(error, JsonTransportError):
        if isinstance(error.error, PayloadOverflow):
            return Code.PAYLOAD_TOO_LARGE
        return Code.BAD_REQUEST
    return _lookup(_JSON_CODES, error)


_PAYLOAD_CODES: dict[type, Callable[..., Code]] = {
    TransportPayload: lambda e: _lookup(_TRANSPORT_CODES, e.error),
    StructuredBodyError: lambda e: _json_code(e.error),
    QueryStringError: lambda e: _lookup(_QUERY_CODES, e.error),
    MalformedPayload: lambda _: Code.MALFORMED_PAYLOAD,
    MissingPayload: lambda _: Code.MISSING_PAYLOAD,
}

_HTTP_ERROR_CODES: dict[type, Callable[..., Code]] = {
    MissingContentType: lambda _: Code.MISSING_CONTENT_TYPE,
    InvalidContentType: lambda _: Code.INVALID_CONTENT_TYPE,
    SchedulerFailure: lambda e: e.error.error_code(),
    Payload: lambda e: error_code(e.error),
    FileStoreFailure: lambda _: Code.INTERNAL,
    DocumentFormatFailure: lambda e: e.error.error_code(),
    JoinFailure: lambda _: Code.INTERNAL,
}

_DELEGATED = (SchedulerFailure, DocumentFormatFailure)


def error_code(error: HttpError | PayloadError) -> Code:
    """Map a classified error to its protocol code.

    Args:
        error: An HttpError or PayloadError variant.

    Returns:
        The symbolic code for the error.

    Raises:
        TypeError: If the value is not a classified error variant.
    """
    handler = _HTTP_ERROR_CODES.get(type(error)) or _PAYLOAD_CODES.get(type(error))
    if handler is None:
        raise TypeError(f"{type(error).__name__} is not a classified error")
    return handler(error)


def attribution(error: HttpError | PayloadError) -> Attribution:
    """Tell whether the caller, the server or a delegated service is at fault."""
    if isinstance(error, _DELEGATED):
        return Attribution.DELEGATED
    if error_code(error) is Code.INTERNAL:
        return Attribution.SERVER
    return Attribution.CALLER
