"""Bounded worker pools over anyio memory object streams.

``run_workers`` starts a fixed number of tasks that consume items off a
stream until it is closed. ``map_workers`` builds on it to fan a list
out over at most *n* concurrent actions and collect the results.

Usage::

    send, receive = anyio.create_memory_object_stream[Job](100)
    async with anyio.create_task_group() as tg:
        tg.start_soon(run_workers, 16, process, receive)
        async with send:
            for job in jobs:
                await send.send(job)

    sizes = await map_workers(4, fetch_size, urls)
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream

from burrow._internal.invoke import invoke

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger("burrow.workers")


def _check_pool_size(n: int) -> None:
    if n < 1:
        msg = f"Worker pool size must be at least 1, got {n}"
        raise ValueError(msg)


async def run_workers(
    n: int,
    action: Callable[[T], Any],
    receive_stream: MemoryObjectReceiveStream[T],
) -> None:
    """Run *n* workers that pass each item from *receive_stream* to *action*.

    Returns once the sending side has been closed and every item has been
    processed. *action* may be sync or async; its results are discarded,
    so it must hand them onwards itself. If an action raises, the other
    workers are cancelled and the error propagates (wrapped in an
    ``ExceptionGroup`` by the task group).
    """
    _check_pool_size(n)

    async def worker() -> None:
        async for item in receive_stream:
            await invoke(action, item)

    logger.debug("Starting %d workers", n)
    async with receive_stream, anyio.create_task_group() as tg:
        for _ in range(n):
            tg.start_soon(worker)


async def map_workers(n: int, action: Callable[[T], R], items: Iterable[T]) -> list[R]:
    """Apply *action* to every item with at most *n* running at once.

    Results come back in completion order, not input order; with
    ``n == 1`` the two coincide.
    """
    _check_pool_size(n)
    pending = list(items)
    results: list[R] = []

    async def collect(item: T) -> None:
        results.append(await invoke(action, item))

    send_stream, receive_stream = anyio.create_memory_object_stream[T](len(pending))
    async with send_stream:
        for item in pending:
            send_stream.send_nowait(item)

    await run_workers(n, collect, receive_stream)
    return results
