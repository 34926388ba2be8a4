"""
Local update-file store.

Persists each document addition as an NDJSON file named after a fresh
UUID under the configured data directory.
"""

import json
import logging
from pathlib import Path
from uuid import UUID, uuid4

from gateway.domain.ports import UpdateFileStorePort
from gateway.domain.sources.file_store import FileStoreError

logger = logging.getLogger(__name__)


class LocalUpdateFileStore(UpdateFileStorePort):
    """Update files stored on the local filesystem."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def _path(self, update_id: UUID) -> Path:
        return self._root / "updates" / f"{update_id}.ndjson"

    def new_update(self, documents: list[dict]) -> UUID:
        update_id = uuid4()
        path = self._path(update_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                for document in documents:
                    handle.write(json.dumps(document, ensure_ascii=False))
                    handle.write("\n")
        except OSError as exc:
            raise FileStoreError("persist update file", exc) from exc
        logger.debug("Persisted %d documents to %s", len(documents), path)
        return update_id

    def delete(self, update_id: UUID) -> None:
        try:
            self._path(update_id).unlink()
        except OSError as exc:
            raise FileStoreError("delete update file", exc) from exc
