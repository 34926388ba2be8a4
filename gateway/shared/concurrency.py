"""
Worker helper for blocking units of work.

Runs CPU- or IO-bound work (document parsing) on a worker thread so the
event loop keeps serving requests. Collaborator errors cross the thread
boundary unchanged; anything else is a crash of the unit of work and is
reported as TaskJoinError.
"""

import asyncio
import logging
from typing import Any, Callable, TypeVar

from gateway.domain.errors import SOURCE_ERRORS
from gateway.domain.sources.tasks import TaskJoinError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def spawn_blocking(func: Callable[..., T], *args: Any) -> T:
    """Run func(*args) on a worker thread and return its result.

    Args:
        func: The blocking callable.
        *args: Positional arguments for func.

    Returns:
        Whatever func returns.

    Raises:
        TaskJoinError: If func raised anything but a known collaborator error.
    """
    try:
        return await asyncio.to_thread(func, *args)
    except SOURCE_ERRORS:
        raise
    except Exception as exc:
        name = getattr(func, "__qualname__", repr(func))
        logger.error("Worker task %s crashed: %s", name, type(exc).__name__)
        raise TaskJoinError(name, exc) from exc
