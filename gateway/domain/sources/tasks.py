"""Errors reported when a unit of work executed on a worker thread crashes."""


class TaskJoinError(Exception):
    """Raised when a worker unit of work ended with an unexpected exception."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"task {name} panicked: {type(cause).__name__}: {cause}")
        self.name = name
        self.cause = cause
