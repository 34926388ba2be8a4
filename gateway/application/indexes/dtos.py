"""
Data Transfer Objects for the indexes application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from gateway.domain.sources.documents import PayloadType


@dataclass(frozen=True)
class AddDocumentsCommand:
    """Input DTO for a document addition.

    Attributes:
        index_uid: Target index.
        payload_type: Format negotiated from the Content-Type header.
        payload: Raw request body.
        primary_key: Optional primary key for a new index.
    """

    index_uid: str
    payload_type: PayloadType
    payload: bytes
    primary_key: str | None = None


@dataclass(frozen=True)
class CreateIndexCommand:
    """Input DTO for an index creation."""

    uid: str
    primary_key: str | None = None


@dataclass(frozen=True)
class ListTasksQuery:
    """Input DTO for listing tasks.

    Attributes:
        limit: Maximum number of tasks to return.
        from_uid: Highest task uid to include, or None for the latest.
    """

    limit: int
    from_uid: int | None = None
