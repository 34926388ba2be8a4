"""
Use case: Add documents to an index.

Input: AddDocumentsCommand (index_uid, payload_type, payload, primary_key)
Output: Task
Side effects: Writes an update file, registers a scheduler task.
Failure cases: DocumentFormatError, TaskJoinError, FileStoreError, SchedulerError.
"""

import logging
from uuid import UUID

from gateway.application.indexes.dtos import AddDocumentsCommand
from gateway.domain.entities import Task
from gateway.domain.ports import (
    DocumentReaderPort,
    IndexSchedulerPort,
    UpdateFileStorePort,
)
from gateway.domain.sources.file_store import FileStoreError
from gateway.domain.sources.scheduler import SchedulerError
from gateway.shared.concurrency import spawn_blocking

logger = logging.getLogger(__name__)


class AddDocumentsUseCase:
    """Parses a document payload, persists it and registers the addition.

    Parsing and update-file I/O run on worker threads. If the scheduler
    refuses the task, the update file is removed before the scheduler
    error propagates; a failed removal is only logged.
    """

    def __init__(
        self,
        scheduler: IndexSchedulerPort,
        file_store: UpdateFileStorePort,
        reader: DocumentReaderPort,
    ) -> None:
        self._scheduler = scheduler
        self._file_store = file_store
        self._reader = reader

    async def execute(self, command: AddDocumentsCommand) -> Task:
        """Run the document addition use case.

        Args:
            command: The addition request.

        Returns:
            The registered scheduler task.
        """
        documents = await spawn_blocking(
            self._reader.read, command.payload_type, command.payload
        )
        logger.info(
            "Adding %d documents to index=%s", len(documents), command.index_uid
        )

        update_id = await spawn_blocking(self._file_store.new_update, documents)
        try:
            return self._scheduler.register_document_addition(
                command.index_uid,
                update_id,
                len(documents),
                primary_key=command.primary_key,
            )
        except SchedulerError:
            await self._discard_update(update_id)
            raise

    async def _discard_update(self, update_id: UUID) -> None:
        # The scheduler error is the one reported to the caller.
        try:
            await spawn_blocking(self._file_store.delete, update_id)
        except FileStoreError:
            logger.exception("Could not remove refused update file %s", update_id)
