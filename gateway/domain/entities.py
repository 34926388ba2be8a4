"""
Domain entities for the indexes bounded context.

Entities represent objects owned by the task scheduler.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class TaskStatus(Enum):
    """Lifecycle state of a scheduler task."""

    ENQUEUED = "enqueued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TaskKind(Enum):
    """Operation a scheduler task performs."""

    INDEX_CREATION = "indexCreation"
    DOCUMENT_ADDITION = "documentAdditionOrUpdate"


@dataclass(frozen=True)
class Index:
    """An index known to the scheduler."""

    uid: str
    primary_key: str | None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class Task:
    """A unit of work registered with the scheduler.

    Attributes:
        uid: Monotonic task identifier.
        index_uid: Index the task applies to.
        kind: Operation performed by the task.
        status: Current lifecycle state.
        enqueued_at: Registration timestamp (UTC).
        content_file: Update file holding the documents, for additions.
        documents_count: Number of documents received, for additions.
    """

    uid: int
    index_uid: str
    kind: TaskKind
    status: TaskStatus
    enqueued_at: datetime
    content_file: UUID | None = None
    documents_count: int = 0
