"""Errors reported by the update-file store."""


class FileStoreError(Exception):
    """Raised when an update file cannot be created, written or removed."""

    def __init__(self, operation: str, cause: OSError) -> None:
        super().__init__(f"Update file store failed to {operation}: {cause}")
        self.operation = operation
        self.cause = cause
