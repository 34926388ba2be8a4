"""
Pydantic schemas for the indexes and tasks API.

Request schemas forbid unknown fields so that typos surface as
bad_request instead of being ignored. Responses use camelCase aliases.
No business logic belongs here.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from gateway.domain.entities import Index, Task


class CreateIndexRequest(BaseModel):
    """Request body for index creation.

    Attributes:
        uid: Index identifier.
        primary_key: Optional primary key attribute.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    uid: str
    primary_key: str | None = Field(default=None, alias="primaryKey")


class AddDocumentsParams(BaseModel):
    """Query parameters for document additions."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    primary_key: str | None = Field(default=None, alias="primaryKey")


class ListTasksParams(BaseModel):
    """Query parameters for listing tasks."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    limit: int = Field(default=20, ge=1, le=1000)
    from_uid: int | None = Field(default=None, ge=0, alias="from")


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TaskSummaryResponse(_CamelModel):
    """Returned when a task is registered."""

    task_uid: int = Field(alias="taskUid")
    index_uid: str = Field(alias="indexUid")
    status: str
    type: str
    enqueued_at: datetime = Field(alias="enqueuedAt")

    @classmethod
    def from_task(cls, task: Task) -> "TaskSummaryResponse":
        return cls(
            task_uid=task.uid,
            index_uid=task.index_uid,
            status=task.status.value,
            type=task.kind.value,
            enqueued_at=task.enqueued_at,
        )


class TaskResponse(_CamelModel):
    """A task with its details."""

    uid: int
    index_uid: str = Field(alias="indexUid")
    status: str
    type: str
    enqueued_at: datetime = Field(alias="enqueuedAt")
    content_file: UUID | None = Field(default=None, alias="contentFile")
    received_documents: int = Field(default=0, alias="receivedDocuments")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            uid=task.uid,
            index_uid=task.index_uid,
            status=task.status.value,
            type=task.kind.value,
            enqueued_at=task.enqueued_at,
            content_file=task.content_file,
            received_documents=task.documents_count,
        )


class TaskListResponse(_CamelModel):
    """A page of tasks."""

    results: list[TaskResponse]
    limit: int
    from_uid: int | None = Field(default=None, alias="from")
    next: int | None = None


class IndexResponse(_CamelModel):
    """An index."""

    uid: str
    primary_key: str | None = Field(default=None, alias="primaryKey")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_index(cls, index: Index) -> "IndexResponse":
        return cls(
            uid=index.uid, primary_key=index.primary_key, created_at=index.created_at
        )


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
