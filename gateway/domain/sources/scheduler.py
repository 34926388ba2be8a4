"""
Errors reported by the index task scheduler.

The scheduler owns the attribution of its own failures:
SchedulerError.error_code() is the authoritative mapping and the
gateway forwards it unchanged.
"""

from enum import Enum

from gateway.domain.codes import Code


class SchedulerErrorKind(Enum):
    """Failure kinds the scheduler can report."""

    INDEX_NOT_FOUND = "index_not_found"
    INDEX_ALREADY_EXISTS = "index_already_exists"
    INVALID_INDEX_UID = "invalid_index_uid"
    TASK_NOT_FOUND = "task_not_found"
    NO_SPACE_LEFT_ON_DEVICE = "no_space_left_on_device"
    CORRUPTED_TASK_QUEUE = "corrupted_task_queue"


_KIND_CODES: dict[SchedulerErrorKind, Code] = {
    SchedulerErrorKind.INDEX_NOT_FOUND: Code.INDEX_NOT_FOUND,
    SchedulerErrorKind.INDEX_ALREADY_EXISTS: Code.INDEX_ALREADY_EXISTS,
    SchedulerErrorKind.INVALID_INDEX_UID: Code.INVALID_INDEX_UID,
    SchedulerErrorKind.TASK_NOT_FOUND: Code.TASK_NOT_FOUND,
    SchedulerErrorKind.NO_SPACE_LEFT_ON_DEVICE: Code.NO_SPACE_LEFT_ON_DEVICE,
    SchedulerErrorKind.CORRUPTED_TASK_QUEUE: Code.INTERNAL,
}


class SchedulerError(Exception):
    """Base error for all scheduler failures."""

    def __init__(self, kind: SchedulerErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(self.message)

    def error_code(self) -> Code:
        """Return the scheduler's own code for this failure."""
        return _KIND_CODES[self.kind]

    @classmethod
    def index_not_found(cls, uid: str) -> "SchedulerError":
        return cls(SchedulerErrorKind.INDEX_NOT_FOUND, f"Index `{uid}` not found.")

    @classmethod
    def index_already_exists(cls, uid: str) -> "SchedulerError":
        return cls(
            SchedulerErrorKind.INDEX_ALREADY_EXISTS, f"Index `{uid}` already exists."
        )

    @classmethod
    def invalid_index_uid(cls, uid: str) -> "SchedulerError":
        return cls(
            SchedulerErrorKind.INVALID_INDEX_UID,
            f"`{uid}` is not a valid index uid. Index uid can be an integer or a "
            "string containing only alphanumeric characters, hyphens (-) and "
            "underscores (_).",
        )

    @classmethod
    def task_not_found(cls, task_uid: int) -> "SchedulerError":
        return cls(SchedulerErrorKind.TASK_NOT_FOUND, f"Task `{task_uid}` not found.")
