"""
Tests for spawn_blocking.

Collaborator errors must cross the worker boundary unchanged; anything
else becomes a TaskJoinError.
"""

import asyncio
import threading

import pytest

from gateway.domain.codes import Code
from gateway.domain.errors import JoinFailure, into_http_error
from gateway.domain.mapping import error_code
from gateway.domain.sources.documents import EmptyDocuments, PayloadType
from gateway.domain.sources.tasks import TaskJoinError
from gateway.shared.concurrency import spawn_blocking


def _explode() -> None:
    raise ZeroDivisionError("division by zero")


class TestSpawnBlocking:
    """Tests for the worker helper."""

    @pytest.mark.asyncio
    async def test_returns_result_from_worker_thread(self) -> None:
        """The callable runs off the event loop thread."""
        loop_thread = threading.get_ident()
        worker_thread = await spawn_blocking(threading.get_ident)
        assert worker_thread != loop_thread

    @pytest.mark.asyncio
    async def test_passes_arguments(self) -> None:
        """Positional arguments are forwarded."""
        assert await spawn_blocking(pow, 2, 10) == 1024

    @pytest.mark.asyncio
    async def test_collaborator_error_propagates_unchanged(self) -> None:
        """Known leaf errors are re-raised as the same object."""
        error = EmptyDocuments(PayloadType.JSON)

        def fail() -> None:
            raise error

        with pytest.raises(EmptyDocuments) as info:
            await spawn_blocking(fail)
        assert info.value is error

    @pytest.mark.asyncio
    async def test_crash_becomes_join_error(self) -> None:
        """An unexpected exception is reported as a task-join failure."""
        with pytest.raises(TaskJoinError) as info:
            await spawn_blocking(_explode)
        assert isinstance(info.value.cause, ZeroDivisionError)
        assert info.value.__cause__ is info.value.cause
        assert info.value.name == "_explode"

    @pytest.mark.asyncio
    async def test_join_error_maps_to_internal(self) -> None:
        """A join failure is classified like any other leaf error."""
        with pytest.raises(TaskJoinError) as info:
            await spawn_blocking(_explode)
        wrapped = into_http_error(info.value)
        assert isinstance(wrapped, JoinFailure)
        assert error_code(wrapped) is Code.INTERNAL

    @pytest.mark.asyncio
    async def test_cancellation_is_not_intercepted(self) -> None:
        """Cancelling the awaiting task raises CancelledError, not a join error."""
        started = threading.Event()
        release = threading.Event()

        def wait() -> None:
            started.set()
            release.wait(5)

        task = asyncio.create_task(spawn_blocking(wait))
        await asyncio.to_thread(started.wait, 5)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        release.set()
