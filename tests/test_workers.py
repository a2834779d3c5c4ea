"""Tests for burrow.workers — bounded anyio worker pools."""

import anyio
import pytest

from burrow.workers import map_workers, run_workers


class TestMapWorkers:
    async def test_single_worker_keeps_input_order(self) -> None:
        assert await map_workers(1, lambda x: x * 2, [1, 2, 3]) == [2, 4, 6]

    async def test_async_action(self) -> None:
        async def square(x: int) -> int:
            await anyio.sleep(0)
            return x * x

        results = await map_workers(3, square, range(10))
        assert sorted(results) == [x * x for x in range(10)]

    async def test_empty_input(self) -> None:
        assert await map_workers(4, lambda x: x, []) == []

    async def test_concurrency_is_bounded(self) -> None:
        running = 0
        peak = 0
        pool_full = anyio.Event()
        release = anyio.Event()

        async def track(_: int) -> None:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            if running == 3:
                pool_full.set()
            await release.wait()
            running -= 1

        async def release_when_full() -> None:
            await pool_full.wait()
            release.set()

        async with anyio.create_task_group() as tg:
            tg.start_soon(release_when_full)
            await map_workers(3, track, range(12))
        assert peak == 3

    async def test_results_in_completion_order(self) -> None:
        second_done = anyio.Event()

        async def ordered(x: int) -> int:
            if x == 0:
                await second_done.wait()
            else:
                second_done.set()
            return x

        assert await map_workers(2, ordered, [0, 1]) == [1, 0]

    async def test_failure_propagates(self) -> None:
        def explode(x: int) -> int:
            if x == 2:
                raise ValueError("bad item")
            return x

        with pytest.raises(ExceptionGroup) as exc_info:
            await map_workers(2, explode, [1, 2, 3])
        assert any(isinstance(e, ValueError) for e in exc_info.value.exceptions)

    async def test_pool_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            await map_workers(0, lambda x: x, [1])


class TestRunWorkers:
    async def test_consumes_until_stream_closed(self) -> None:
        seen: list[int] = []
        send, receive = anyio.create_memory_object_stream[int](10)

        async with anyio.create_task_group() as tg:
            tg.start_soon(run_workers, 4, seen.append, receive)
            async with send:
                for i in range(20):
                    await send.send(i)

        assert sorted(seen) == list(range(20))

    async def test_pool_size_must_be_positive(self) -> None:
        _, receive = anyio.create_memory_object_stream[int](1)
        with pytest.raises(ValueError, match="at least 1"):
            await run_workers(0, print, receive)
