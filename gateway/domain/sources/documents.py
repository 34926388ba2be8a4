"""
Errors reported by the document-format readers (JSON, NDJSON, CSV).

Like the scheduler, the readers own the attribution of their failures
through DocumentFormatError.error_code().
"""

from enum import Enum

from gateway.domain.codes import Code


class PayloadType(Enum):
    """Document formats accepted for document additions."""

    JSON = "json"
    NDJSON = "ndjson"
    CSV = "csv"


class DocumentFormatError(Exception):
    """Base error for document-format failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def error_code(self) -> Code:
        """Return the reader's own code for this failure."""
        return Code.INTERNAL


class DocumentIoError(DocumentFormatError):
    """Raised when the reader could not access the document stream."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"An internal error has occurred. `{cause}`.")
        self.cause = cause


class MalformedDocuments(DocumentFormatError):
    """Raised when the payload is not valid for its declared format."""

    def __init__(
        self, payload_type: PayloadType, detail: str, line: int | None = None
    ) -> None:
        location = f" at line {line}" if line is not None else ""
        super().__init__(
            f"The `{payload_type.value}` payload provided is malformed{location}. "
            f"`{detail}`."
        )
        self.payload_type = payload_type
        self.detail = detail
        self.line = line

    def error_code(self) -> Code:
        return Code.MALFORMED_PAYLOAD


class EmptyDocuments(DocumentFormatError):
    """Raised when a document payload is empty."""

    def __init__(self, payload_type: PayloadType) -> None:
        super().__init__(f"A {payload_type.value} payload is missing.")
        self.payload_type = payload_type

    def error_code(self) -> Code:
        return Code.MISSING_PAYLOAD
