"""
Errors reported by the query-string extractor.

A bare QueryPayloadError stands for any failure other than deserialization.
"""


class QueryPayloadError(Exception):
    """Base error for query-string extraction failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class QueryDeserializeError(QueryPayloadError):
    """Raised when the query string does not match the expected parameters."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Query deserialize error: {detail}")
        self.detail = detail
