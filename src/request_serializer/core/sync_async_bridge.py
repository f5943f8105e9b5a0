"""
Bridge between synchronous and asynchronous execution contexts.

Awaits transform results uniformly whether the transform returned a plain
value or an awaitable, and runs serialization coroutines from synchronous
handlers using event loop detection and a ThreadPoolExecutor.
"""

import asyncio
import atexit
import concurrent.futures
import inspect
import logging
import os
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, TypeVar

from .constants import MAX_THREAD_WORKERS, THREAD_POOL_PREFIX

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Global ThreadPoolExecutor for coroutines started from inside a running loop
_thread_pool: concurrent.futures.ThreadPoolExecutor | None = None


def get_thread_pool() -> concurrent.futures.ThreadPoolExecutor:
    """Get or create the global thread pool.

    Creates a ThreadPoolExecutor with configuration based on CPU count
    following Python's default pattern: min(MAX_WORKERS, (os.cpu_count() or 1) + 4).

    Returns:
        Global ThreadPoolExecutor instance
    """
    global _thread_pool

    if _thread_pool is None:
        max_workers = min(MAX_THREAD_WORKERS, (os.cpu_count() or 1) + 4)
        _thread_pool = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=THREAD_POOL_PREFIX
        )
        logger.debug(f"Created ThreadPoolExecutor with {max_workers} workers")

    return _thread_pool


def shutdown_thread_pool() -> None:
    """Shutdown the global thread pool.

    This is primarily used for testing and cleanup.
    In normal operation, the thread pool will be cleaned up
    when the process exits.
    """
    global _thread_pool

    if _thread_pool is not None:
        logger.debug("Shutting down ThreadPoolExecutor")
        _thread_pool.shutdown(wait=True)
        _thread_pool = None


# Register cleanup for process exit
atexit.register(shutdown_thread_pool)


async def resolve_result(value: T | Awaitable[T]) -> T:
    """Await a value if it is awaitable, otherwise return it unchanged.

    Args:
        value: Plain value, coroutine, Future or other awaitable

    Returns:
        The resolved value
    """
    if inspect.isawaitable(value):
        return await value
    return value


async def invoke_transform(transform: Callable[..., Any], *args: Any) -> Any:
    """Call a transform and await its result uniformly.

    Synchronous transforms run inline on the current loop; their exceptions
    propagate unchanged, as do rejections of returned awaitables.

    Args:
        transform: Resolved transform callable
        *args: Positional arguments for the transform

    Returns:
        The transform's resolved result
    """
    return await resolve_result(transform(*args))


def is_async_context() -> bool:
    """Check if currently running in async context.

    Returns:
        True if in async context (event loop running), False otherwise
    """
    try:
        asyncio.get_running_loop()
        return True
    except RuntimeError:
        return False


def run_coroutine_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion from synchronous code.

    Uses different strategies based on whether an event loop is running:
    1. If no loop is running: Use asyncio.run()
    2. If loop is running: Execute in thread pool with new event loop

    Args:
        coro: Coroutine to execute

    Returns:
        Result of the coroutine
    """
    if is_async_context():
        logger.debug("Event loop detected, using thread pool for coroutine")
        return _run_in_thread(coro)

    logger.debug("No event loop detected, using asyncio.run()")
    return asyncio.run(coro)


def _run_in_thread(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine in the thread pool with a new event loop.

    This is used when a synchronous caller sits on a thread that already
    runs an event loop, where asyncio.run() is not allowed.

    Args:
        coro: Coroutine to execute

    Returns:
        Result of the coroutine
    """

    def run_in_new_loop() -> T:
        # Create new event loop for this thread
        new_loop = asyncio.new_event_loop()
        asyncio.set_event_loop(new_loop)

        try:
            return new_loop.run_until_complete(coro)
        finally:
            new_loop.close()
            asyncio.set_event_loop(None)

    # Submit to thread pool and wait for result
    future = get_thread_pool().submit(run_in_new_loop)
    return future.result()
