"""
Port interfaces (ABCs) for the services the gateway fronts.

Ports define the contracts that the gateway requires from the outside world.
Each port documents the leaf errors it may raise; the gateway classifies
them but never raises them itself.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from gateway.domain.entities import Index, Task
from gateway.domain.sources.documents import PayloadType


class IndexSchedulerPort(ABC):
    """Port for registering and inspecting scheduler tasks.

    Failures are reported as SchedulerError.
    """

    @abstractmethod
    def create_index(self, uid: str, primary_key: str | None) -> Task:
        """Register an index creation and return its task."""
        raise NotImplementedError

    @abstractmethod
    def get_index(self, uid: str) -> Index:
        """Return an index by uid."""
        raise NotImplementedError

    @abstractmethod
    def register_document_addition(
        self,
        index_uid: str,
        content_file: UUID,
        documents_count: int,
        primary_key: str | None = None,
    ) -> Task:
        """Register a document addition backed by an update file."""
        raise NotImplementedError

    @abstractmethod
    def get_task(self, task_uid: int) -> Task:
        """Return a task by uid."""
        raise NotImplementedError

    @abstractmethod
    def list_tasks(self, limit: int, from_uid: int | None = None) -> list[Task]:
        """Return tasks in descending uid order, starting at from_uid."""
        raise NotImplementedError


class UpdateFileStorePort(ABC):
    """Port for persisting documents until the scheduler processes them.

    Failures are reported as FileStoreError.
    """

    @abstractmethod
    def new_update(self, documents: list[dict]) -> UUID:
        """Persist documents into a new update file and return its id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, update_id: UUID) -> None:
        """Remove an update file."""
        raise NotImplementedError


class DocumentReaderPort(ABC):
    """Port for parsing raw document payloads.

    Failures are reported as DocumentFormatError.
    """

    @abstractmethod
    def read(self, payload_type: PayloadType, raw: bytes) -> list[dict]:
        """Parse a raw payload into a list of documents."""
        raise NotImplementedError
