"""
Use case: Get an index.

Failure cases: SchedulerError (invalid uid, index not found).
"""

from gateway.domain.entities import Index
from gateway.domain.ports import IndexSchedulerPort


class GetIndexUseCase:
    """Looks an index up by uid."""

    def __init__(self, scheduler: IndexSchedulerPort) -> None:
        self._scheduler = scheduler

    def execute(self, uid: str) -> Index:
        return self._scheduler.get_index(uid)
