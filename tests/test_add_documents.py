"""
Tests for AddDocumentsUseCase.

The update-file store does blocking disk I/O, so every call into it must
happen on a worker thread rather than on the event loop.
"""

import asyncio

import pytest

from gateway.application.indexes.add_documents import AddDocumentsUseCase
from gateway.application.indexes.dtos import AddDocumentsCommand
from gateway.domain.sources.documents import PayloadType
from gateway.domain.sources.scheduler import SchedulerError
from gateway.infrastructure.document_reader import DocumentReader
from gateway.infrastructure.file_store import LocalUpdateFileStore
from gateway.infrastructure.scheduler import InMemoryIndexScheduler


def _on_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class _RecordingStore(LocalUpdateFileStore):
    def __init__(self, root) -> None:
        super().__init__(root)
        self.calls: list[tuple[str, bool]] = []

    def new_update(self, documents):
        self.calls.append(("new_update", _on_event_loop()))
        return super().new_update(documents)

    def delete(self, update_id):
        self.calls.append(("delete", _on_event_loop()))
        super().delete(update_id)


@pytest.fixture
def store(tmp_path) -> _RecordingStore:
    return _RecordingStore(tmp_path)


@pytest.fixture
def use_case(store) -> AddDocumentsUseCase:
    return AddDocumentsUseCase(InMemoryIndexScheduler(), store, DocumentReader())


def _command(index_uid: str) -> AddDocumentsCommand:
    return AddDocumentsCommand(
        index_uid=index_uid,
        payload_type=PayloadType.JSON,
        payload=b'[{"id": 1}, {"id": 2}]',
    )


class TestAddDocumentsUseCase:
    """Tests for the document addition flow."""

    @pytest.mark.asyncio
    async def test_update_file_written_off_the_loop(self, use_case, store) -> None:
        """The update file is persisted from a worker thread."""
        task = await use_case.execute(_command("movies"))
        assert task.documents_count == 2
        assert store.calls == [("new_update", False)]

    @pytest.mark.asyncio
    async def test_refused_task_removes_file_off_the_loop(
        self, use_case, store, tmp_path
    ) -> None:
        """Cleanup after a refused task also runs on a worker thread."""
        with pytest.raises(SchedulerError):
            await use_case.execute(_command("bad uid!"))
        assert store.calls == [("new_update", False), ("delete", False)]
        assert list((tmp_path / "updates").iterdir()) == []
