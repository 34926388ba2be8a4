"""
Dependency injection for the indexes bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Collaborators are process-wide singletons; tests replace them through
app.dependency_overrides.
"""

from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from gateway.application.indexes.add_documents import AddDocumentsUseCase
from gateway.application.indexes.create_index import CreateIndexUseCase
from gateway.application.indexes.get_index import GetIndexUseCase
from gateway.application.indexes.tasks import GetTaskUseCase, ListTasksUseCase
from gateway.core.config import settings
from gateway.domain.ports import (
    DocumentReaderPort,
    IndexSchedulerPort,
    UpdateFileStorePort,
)
from gateway.infrastructure.document_reader import DocumentReader
from gateway.infrastructure.file_store import LocalUpdateFileStore
from gateway.infrastructure.scheduler import InMemoryIndexScheduler


@lru_cache
def get_scheduler() -> IndexSchedulerPort:
    """Return the process-wide scheduler."""
    return InMemoryIndexScheduler()


@lru_cache
def get_file_store() -> UpdateFileStorePort:
    """Return the update-file store rooted at the configured data dir."""
    return LocalUpdateFileStore(Path(settings.data_dir))


def get_document_reader() -> DocumentReaderPort:
    return DocumentReader()


def get_add_documents_use_case(
    scheduler: IndexSchedulerPort = Depends(get_scheduler),
    file_store: UpdateFileStorePort = Depends(get_file_store),
    reader: DocumentReaderPort = Depends(get_document_reader),
) -> AddDocumentsUseCase:
    """Build AddDocumentsUseCase with its infrastructure dependencies."""
    return AddDocumentsUseCase(scheduler=scheduler, file_store=file_store, reader=reader)


def get_create_index_use_case(
    scheduler: IndexSchedulerPort = Depends(get_scheduler),
) -> CreateIndexUseCase:
    return CreateIndexUseCase(scheduler=scheduler)


def get_index_use_case(
    scheduler: IndexSchedulerPort = Depends(get_scheduler),
) -> GetIndexUseCase:
    return GetIndexUseCase(scheduler=scheduler)


def get_task_use_case(
    scheduler: IndexSchedulerPort = Depends(get_scheduler),
) -> GetTaskUseCase:
    return GetTaskUseCase(scheduler=scheduler)


def get_list_tasks_use_case(
    scheduler: IndexSchedulerPort = Depends(get_scheduler),
) -> ListTasksUseCase:
    return ListTasksUseCase(scheduler=scheduler)
