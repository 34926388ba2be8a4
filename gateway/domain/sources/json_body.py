"""
Errors reported by the structured (JSON) body extractor.

JsonDiagnostic normalizes the position and category of a deserialization
failure so that callers can tell an empty body from a broken one.
Columns count the characters consumed on the failing line, so a parser
that fails before reading anything reports line 1, column 0.
"""

import json
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError

from gateway.domain.sources.transport import TransportError

_UNTERMINATED_PREFIX = "Unterminated string"
RECURSION_LIMIT_MESSAGE = "recursion limit exceeded"


class JsonCategory(Enum):
    """Category of a JSON deserialization failure."""

    IO = "io"
    SYNTAX = "syntax"
    DATA = "data"
    EOF = "eof"


@dataclass(frozen=True)
class JsonDiagnostic:
    """Where and why a JSON document failed to deserialize.

    Attributes:
        category: Failure category.
        line: 1-based line of the failure, 0 when the position is unknown.
        column: Characters consumed on the failing line.
        message: Parser message without position information.
    """

    category: JsonCategory
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        if self.line == 0:
            return self.message
        return f"{self.message} at line {self.line} column {self.column}"

    @classmethod
    def from_decode_error(cls, exc: json.JSONDecodeError) -> "JsonDiagnostic":
        """Build a diagnostic from a stdlib decoder error.

        The decoder points at the offending character; when nothing but
        whitespace is left after it, the input ended too early. Unterminated
        strings are reported at their start, so end-of-input failures are
        positioned at the end of the document instead.
        """
        at_end = not exc.doc[exc.pos :].strip()
        if at_end or exc.msg.startswith(_UNTERMINATED_PREFIX):
            line = exc.doc.count("\n") + 1
            column = len(exc.doc) - (exc.doc.rfind("\n") + 1)
            return cls(JsonCategory.EOF, line, column, exc.msg)
        return cls(JsonCategory.SYNTAX, exc.lineno, exc.colno, exc.msg)

    @classmethod
    def from_unicode_error(cls, exc: UnicodeDecodeError) -> "JsonDiagnostic":
        """Build a diagnostic for a body that is not valid UTF-8."""
        consumed = exc.object[: exc.start].decode("utf-8")
        line = consumed.count("\n") + 1
        # The offending byte counts as one consumed character.
        column = len(consumed) - (consumed.rfind("\n") + 1) + 1
        return cls(JsonCategory.SYNTAX, line, column, "invalid unicode code point")

    @classmethod
    def from_recursion_error(cls, exc: RecursionError) -> "JsonDiagnostic":
        """Build a diagnostic for a document nested deeper than the parser allows."""
        return cls(JsonCategory.SYNTAX, 0, 0, RECURSION_LIMIT_MESSAGE)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "JsonDiagnostic":
        """Build a diagnostic for a valid JSON document of the wrong shape."""
        first = exc.errors()[0] if exc.error_count() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", "invalid data")
        if location:
            message = f"{location}: {message}"
        return cls(JsonCategory.DATA, 0, 0, message)


class JsonPayloadError(Exception):
    """Base error for JSON body extraction failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class JsonOverflow(JsonPayloadError):
    """Raised when the JSON body is larger than the configured limit."""

    def __init__(self, limit: int, length: int | None = None) -> None:
        if length is None:
            message = f"JSON payload is larger than allowed (limit: {limit} bytes)."
        else:
            message = (
                f"JSON payload ({length} bytes) is larger than allowed "
                f"(limit: {limit} bytes)."
            )
        super().__init__(message)
        self.limit = limit
        self.length = length


class JsonContentType(JsonPayloadError):
    """Raised when the request is not declared as JSON."""

    def __init__(self) -> None:
        super().__init__("Content type error")


class JsonDeserializeError(JsonPayloadError):
    """Raised when the body could not be deserialized."""

    def __init__(self, diagnostic: JsonDiagnostic) -> None:
        super().__init__(f"Json deserialize error: {diagnostic}")
        self.diagnostic = diagnostic


class JsonSerializeError(JsonPayloadError):
    """Raised when a response value could not be serialized."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Json serialize error: {detail}")
        self.detail = detail


class JsonTransportError(JsonPayloadError):
    """Raised when reading the JSON body failed at the transport level."""

    def __init__(self, error: TransportError) -> None:
        super().__init__(f"Error that occur during reading payload: {error}")
        self.error = error
