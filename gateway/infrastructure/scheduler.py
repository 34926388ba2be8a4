"""
In-process task scheduler.

Implements IndexSchedulerPort with in-memory tables. Tasks are recorded
as succeeded immediately; there is no background processing.
FastAPI runs sync dependencies on a thread pool, so every table access
goes through a lock.
"""

import logging
import re
import threading
from datetime import datetime, timezone
from uuid import UUID

from gateway.domain.entities import Index, Task, TaskKind, TaskStatus
from gateway.domain.ports import IndexSchedulerPort
from gateway.domain.sources.scheduler import SchedulerError

logger = logging.getLogger(__name__)

INDEX_UID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,400}$")


class InMemoryIndexScheduler(IndexSchedulerPort):
    """Scheduler keeping indexes and tasks in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._indexes: dict[str, Index] = {}
        self._tasks: dict[int, Task] = {}
        self._next_uid = 0

    def _validate_uid(self, uid: str) -> None:
        if not INDEX_UID_PATTERN.match(uid):
            raise SchedulerError.invalid_index_uid(uid)

    def _register(self, task_kwargs: dict) -> Task:
        task = Task(
            uid=self._next_uid,
            status=TaskStatus.SUCCEEDED,
            enqueued_at=datetime.now(timezone.utc),
            **task_kwargs,
        )
        self._tasks[task.uid] = task
        self._next_uid += 1
        logger.info("Registered task uid=%d kind=%s", task.uid, task.kind.value)
        return task

    def create_index(self, uid: str, primary_key: str | None) -> Task:
        self._validate_uid(uid)
        with self._lock:
            if uid in self._indexes:
                raise SchedulerError.index_already_exists(uid)
            self._indexes[uid] = Index(uid=uid, primary_key=primary_key)
            return self._register(
                {"index_uid": uid, "kind": TaskKind.INDEX_CREATION}
            )

    def get_index(self, uid: str) -> Index:
        self._validate_uid(uid)
        with self._lock:
            index = self._indexes.get(uid)
        if index is None:
            raise SchedulerError.index_not_found(uid)
        return index

    def register_document_addition(
        self,
        index_uid: str,
        content_file: UUID,
        documents_count: int,
        primary_key: str | None = None,
    ) -> Task:
        self._validate_uid(index_uid)
        with self._lock:
            # Document additions create the index on first use.
            self._indexes.setdefault(
                index_uid, Index(uid=index_uid, primary_key=primary_key)
            )
            return self._register(
                {
                    "index_uid": index_uid,
                    "kind": TaskKind.DOCUMENT_ADDITION,
                    "content_file": content_file,
                    "documents_count": documents_count,
                }
            )

    def get_task(self, task_uid: int) -> Task:
        with self._lock:
            task = self._tasks.get(task_uid)
        if task is None:
            raise SchedulerError.task_not_found(task_uid)
        return task

    def list_tasks(self, limit: int, from_uid: int | None = None) -> list[Task]:
        with self._lock:
            uids = sorted(self._tasks, reverse=True)
            if from_uid is not None:
                uids = [uid for uid in uids if uid <= from_uid]
            return [self._tasks[uid] for uid in uids[:limit]]
