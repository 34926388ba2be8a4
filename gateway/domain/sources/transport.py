"""
Errors reported while receiving a request body from the transport.

The set of variants is closed: the six known sub-cases below.
A bare TransportError stands for a failure the transport could not name.
"""


class TransportError(Exception):
    """Base error for all request-body transport failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class IncompleteBody(TransportError):
    """Raised when the connection ended before the whole body arrived."""

    def __init__(self, detail: str | None = None) -> None:
        message = "A payload reached EOF, but is not complete."
        if detail:
            message = f"{message} With error: {detail}"
        super().__init__(message)
        self.detail = detail


class EncodingCorrupted(TransportError):
    """Raised when the content encoding (gzip, br, ...) cannot be decoded."""

    def __init__(self) -> None:
        super().__init__("Can not decode content-encoding.")


class PayloadOverflow(TransportError):
    """Raised when the body grows past the configured size limit."""

    def __init__(self, limit: int | None = None, length: int | None = None) -> None:
        message = "A payload reached size limit."
        if limit is not None:
            message = f"The payload exceeds the limit of {limit} bytes."
        super().__init__(message)
        self.limit = limit
        self.length = length


class UnknownLength(TransportError):
    """Raised when the body length cannot be determined."""

    def __init__(self) -> None:
        super().__init__("A payload length is unknown.")


class FramingError(TransportError):
    """Raised when the protocol framing of the body stream is broken."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Error parsing payload frame: {detail}")
        self.detail = detail


class BodyIoError(TransportError):
    """Raised when reading the body failed at the I/O level."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"I/O error while reading payload: {cause}")
        self.cause = cause
