"""
Use case: Create an index.

Input: CreateIndexCommand (uid, primary_key)
Output: Task
Failure cases: SchedulerError (invalid uid, index already exists).
"""

import logging

from gateway.application.indexes.dtos import CreateIndexCommand
from gateway.domain.entities import Task
from gateway.domain.ports import IndexSchedulerPort

logger = logging.getLogger(__name__)


class CreateIndexUseCase:
    """Registers an index creation with the scheduler."""

    def __init__(self, scheduler: IndexSchedulerPort) -> None:
        self._scheduler = scheduler

    def execute(self, command: CreateIndexCommand) -> Task:
        logger.info("Creating index uid=%s", command.uid)
        return self._scheduler.create_index(command.uid, command.primary_key)
