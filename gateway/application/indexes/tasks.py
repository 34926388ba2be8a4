"""
Use cases: Get one task, list tasks.

Failure cases: SchedulerError (task not found).
"""

from gateway.application.indexes.dtos import ListTasksQuery
from gateway.domain.entities import Task
from gateway.domain.ports import IndexSchedulerPort


class GetTaskUseCase:
    """Looks a task up by uid."""

    def __init__(self, scheduler: IndexSchedulerPort) -> None:
        self._scheduler = scheduler

    def execute(self, task_uid: int) -> Task:
        return self._scheduler.get_task(task_uid)


class ListTasksUseCase:
    """Lists the most recent tasks."""

    def __init__(self, scheduler: IndexSchedulerPort) -> None:
        self._scheduler = scheduler

    def execute(self, query: ListTasksQuery) -> list[Task]:
        return self._scheduler.list_tasks(query.limit, query.from_uid)
