"""
Request extractors.

Content-type negotiation, size-limited body reading, JSON body and
query-string deserialization. Each extractor reports its failures with
the matching leaf error so that the centralized handlers classify them;
none of them builds a response itself.
"""

import json
from typing import Awaitable, Callable, Iterable, TypeVar

from pydantic import BaseModel, ValidationError
from starlette.requests import ClientDisconnect, Request

from gateway.core.config import settings
from gateway.domain.errors import ApiError, content_type_error
from gateway.domain.sources.json_body import (
    JsonContentType,
    JsonDeserializeError,
    JsonDiagnostic,
    JsonOverflow,
    JsonTransportError,
)
from gateway.domain.sources.query import QueryDeserializeError
from gateway.domain.sources.transport import (
    IncompleteBody,
    PayloadOverflow,
    TransportError,
    UnknownLength,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_MEDIA_TYPE = "application/json"
JSON_CHARSETS = ("utf-8", "utf8")


def _media_type(header: str) -> str:
    return header.split(";", 1)[0].strip().lower()


def _charset(header: str) -> str | None:
    for parameter in header.split(";")[1:]:
        name, _, value = parameter.partition("=")
        if name.strip().lower() == "charset":
            return value.strip().strip('"').lower()
    return None


def negotiate_content_type(request: Request, accepted: Iterable[str]) -> str:
    """Return the request's media type if the route accepts it.

    Parameters such as charset are ignored; comparison is case-insensitive.

    Raises:
        ApiError: MissingContentType when the header is absent,
            InvalidContentType when its media type is not accepted.
    """
    accepted = tuple(accepted)
    header = request.headers.get("content-type")
    if header is None:
        raise ApiError(content_type_error(None, accepted))
    media_type = _media_type(header)
    if media_type not in {value.lower() for value in accepted}:
        raise ApiError(content_type_error(header, accepted))
    return media_type


async def read_body(request: Request, limit: int) -> bytes:
    """Read the whole request body, refusing more than limit bytes.

    Raises:
        PayloadOverflow: If the declared or actual size exceeds limit.
        UnknownLength: If Content-Length is not a number.
        IncompleteBody: If the client went away mid-body.
    """
    declared = request.headers.get("content-length")
    length = None
    if declared is not None:
        try:
            length = int(declared)
        except ValueError:
            raise UnknownLength() from None
        if length > limit:
            raise PayloadOverflow(limit, length)

    body = bytearray()
    try:
        async for chunk in request.stream():
            body.extend(chunk)
            if len(body) > limit:
                raise PayloadOverflow(limit, length)
    except ClientDisconnect as exc:
        raise IncompleteBody("client disconnected") from exc
    return bytes(body)


def decode_json(raw: bytes, model: type[ModelT]) -> ModelT:
    """Deserialize a UTF-8 JSON document into model.

    Raises:
        JsonDeserializeError: With an EOF or SYNTAX diagnostic when the
            document is not valid JSON, DATA when it has the wrong shape.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise JsonDeserializeError(JsonDiagnostic.from_unicode_error(exc)) from exc
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonDeserializeError(JsonDiagnostic.from_decode_error(exc)) from exc
    except RecursionError as exc:
        raise JsonDeserializeError(JsonDiagnostic.from_recursion_error(exc)) from exc
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise JsonDeserializeError(JsonDiagnostic.from_validation_error(exc)) from exc


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that extracts a JSON body as model.

    The route accepts application/json only. A JSON body declared with a
    charset other than UTF-8 is refused by the extractor itself.
    """

    async def extract(request: Request) -> ModelT:
        negotiate_content_type(request, (JSON_MEDIA_TYPE,))
        charset = _charset(request.headers["content-type"])
        if charset is not None and charset not in JSON_CHARSETS:
            raise JsonContentType()

        limit = settings.http_payload_size_limit
        try:
            raw = await read_body(request, limit)
        except PayloadOverflow as exc:
            raise JsonOverflow(limit, exc.length) from exc
        except TransportError as exc:
            raise JsonTransportError(exc) from exc
        return decode_json(raw, model)

    return extract


def query_params(model: type[ModelT]) -> Callable[[Request], ModelT]:
    """Build a dependency that extracts the query string as model."""

    def extract(request: Request) -> ModelT:
        try:
            return model.model_validate(dict(request.query_params))
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            detail = f"{location}: {first['msg']}" if location else first["msg"]
            raise QueryDeserializeError(detail) from exc

    return extract
