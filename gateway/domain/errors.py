"""
Unifying error taxonomy of the gateway.

Every failure met while accepting a request, or reported by a service
the gateway fronts, is wrapped into exactly one HttpError variant.
Wrapping keeps the original leaf error object untouched so that the
rendering step can still explain it.

Two closed unions, one per layer:
    - HttpError: one variant per collaborator plus the two content-type
      variants owned by the gateway.
    - PayloadError: failures while reading the body or query string.
      MissingPayload and MalformedPayload are derived from a JSON
      deserialization failure, never reported directly.

Nothing here performs IO. Classification codes live in gateway.domain.mapping.
"""

from dataclasses import dataclass
from functools import singledispatch
from typing import Iterable, Union

from gateway.domain.sources.documents import DocumentFormatError
from gateway.domain.sources.file_store import FileStoreError
from gateway.domain.sources.json_body import (
    JsonCategory,
    JsonDeserializeError,
    JsonPayloadError,
)
from gateway.domain.sources.query import QueryPayloadError
from gateway.domain.sources.scheduler import SchedulerError
from gateway.domain.sources.tasks import TaskJoinError
from gateway.domain.sources.transport import TransportError

# ------------------------------------------------------------------
# PayloadError
# ------------------------------------------------------------------


@dataclass(frozen=True)
class TransportPayload:
    """The body could not be received."""

    error: TransportError


@dataclass(frozen=True)
class StructuredBodyError:
    """The JSON extractor failed for a reason other than a broken document."""

    error: JsonPayloadError


@dataclass(frozen=True)
class QueryStringError:
    """The query string could not be extracted."""

    error: QueryPayloadError


@dataclass(frozen=True)
class MalformedPayload:
    """A body was sent but it is not syntactically valid JSON."""

    error: JsonDeserializeError


@dataclass(frozen=True)
class MissingPayload:
    """No body was sent where one is required."""


PayloadError = Union[
    TransportPayload,
    StructuredBodyError,
    QueryStringError,
    MalformedPayload,
    MissingPayload,
]

# ------------------------------------------------------------------
# HttpError
# ------------------------------------------------------------------


@dataclass(frozen=True)
class MissingContentType:
    """The request has no Content-Type header."""

    accepted: tuple[str, ...]


@dataclass(frozen=True)
class InvalidContentType:
    """The Content-Type header names a media type the route does not accept."""

    content_type: str
    accepted: tuple[str, ...]


@dataclass(frozen=True)
class SchedulerFailure:
    error: SchedulerError


@dataclass(frozen=True)
class Payload:
    error: PayloadError


@dataclass(frozen=True)
class FileStoreFailure:
    error: FileStoreError


@dataclass(frozen=True)
class DocumentFormatFailure:
    error: DocumentFormatError


@dataclass(frozen=True)
class JoinFailure:
    error: TaskJoinError


HttpError = Union[
    MissingContentType,
    InvalidContentType,
    SchedulerFailure,
    Payload,
    FileStoreFailure,
    DocumentFormatFailure,
    JoinFailure,
]

HTTP_ERROR_TYPES = (
    MissingContentType,
    InvalidContentType,
    SchedulerFailure,
    Payload,
    FileStoreFailure,
    DocumentFormatFailure,
    JoinFailure,
)

# Every exception type into_http_error knows how to wrap.
SOURCE_ERRORS = (
    SchedulerError,
    FileStoreError,
    DocumentFormatError,
    TaskJoinError,
    TransportError,
    JsonPayloadError,
    QueryPayloadError,
)


class ApiError(Exception):
    """Carries an already classified HttpError through exception handling.

    Args:
        error: The classified failure. Ownership moves into the exception.
    """

    def __init__(self, error: HttpError) -> None:
        self.error = error
        super().__init__(render_message(error))


# ------------------------------------------------------------------
# Construction
# ------------------------------------------------------------------


def content_type_error(header: str | None, accepted: Iterable[str]) -> HttpError:
    """Build the content-type variant for a failed negotiation.

    A missing header always wins, even when nothing is accepted.

    Args:
        header: Literal Content-Type header value, or None when absent.
        accepted: Media types the route accepts.

    Returns:
        MissingContentType or InvalidContentType with a sorted accepted list.
    """
    sorted_accepted = tuple(sorted(accepted))
    if header is None:
        return MissingContentType(sorted_accepted)
    return InvalidContentType(header, sorted_accepted)


def _classify_json(error: JsonPayloadError) -> PayloadError:
    if isinstance(error, JsonDeserializeError):
        diagnostic = error.diagnostic
        # Nothing consumed before the input ended: the body was empty.
        if (
            diagnostic.category is JsonCategory.EOF
            and diagnostic.line == 1
            and diagnostic.column == 0
        ):
            return MissingPayload()
        if diagnostic.category is not JsonCategory.DATA:
            return MalformedPayload(error)
    return StructuredBodyError(error)


def payload_error_from(
    error: TransportError | JsonPayloadError | QueryPayloadError,
) -> PayloadError:
    """Wrap a body or query-string extraction failure.

    JSON extractor failures are disambiguated, first match wins:
        1. end of input at line 1, column 0 -> MissingPayload
        2. any non-data deserialization category -> MalformedPayload
        3. anything else -> StructuredBodyError

    Raises:
        TypeError: If the error is not a payload extraction failure.
    """
    if isinstance(error, JsonPayloadError):
        return _classify_json(error)
    if isinstance(error, TransportError):
        return TransportPayload(error)
    if isinstance(error, QueryPayloadError):
        return QueryStringError(error)
    raise TypeError(f"{type(error).__name__} is not a payload error")


@singledispatch
def into_http_error(error: object) -> HttpError:
    """Wrap a collaborator failure into its HttpError variant.

    Raises:
        TypeError: If the value is not a known error source.
    """
    if isinstance(error, HTTP_ERROR_TYPES):
        return error
    raise TypeError(f"{type(error).__name__} is not a gateway error source")


@into_http_error.register
def _(error: ApiError) -> HttpError:
    return error.error


@into_http_error.register
def _(error: SchedulerError) -> HttpError:
    return SchedulerFailure(error)


@into_http_error.register
def _(error: FileStoreError) -> HttpError:
    return FileStoreFailure(error)


@into_http_error.register
def _(error: DocumentFormatError) -> HttpError:
    return DocumentFormatFailure(error)


@into_http_error.register
def _(error: TaskJoinError) -> HttpError:
    return JoinFailure(error)


@into_http_error.register(TransportError)
@into_http_error.register(JsonPayloadError)
@into_http_error.register(QueryPayloadError)
def _(error) -> HttpError:
    return Payload(payload_error_from(error))


# ------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------


def _accepted_values(accepted: tuple[str, ...]) -> str:
    return ", ".join(f"`{media_type}`" for media_type in accepted)


def render_message(error: HttpError | PayloadError) -> str:
    """Return the human-readable message for an error.

    Wrapped collaborator errors render as their own message, unchanged.
    """
    if isinstance(error, MissingContentType):
        return (
            "A Content-Type header is missing. Accepted values for the "
            f"Content-Type header are: {_accepted_values(error.accepted)}"
        )
    if isinstance(error, InvalidContentType):
        return (
            f"The Content-Type `{error.content_type}` is invalid. Accepted values "
            f"for the Content-Type header are: {_accepted_values(error.accepted)}"
        )
    if isinstance(error, Payload):
        return render_message(error.error)
    if isinstance(error, MalformedPayload):
        return f"The json payload provided is malformed. `{error.error.diagnostic}`."
    if isinstance(error, MissingPayload):
        return "A json payload is missing."
    return str(error.error)
