import asyncio

import pytest

from repo_similarity.services.concurrency import gather_or_cancel


def test_returns_results_in_order():
    async def value(v, delay):
        await asyncio.sleep(delay)
        return v

    result = asyncio.run(gather_or_cancel(value("a", 0.02), value("b", 0), value("c", 0.01)))
    assert result == ["a", "b", "c"]


def test_failure_cancels_and_awaits_siblings():
    finished: list[str] = []
    cancelled: list[str] = []

    async def slow(name):
        try:
            await asyncio.sleep(0.05)
        except asyncio.CancelledError:
            cancelled.append(name)
            raise
        finished.append(name)

    async def boom():
        raise ValueError("boom")

    async def _go():
        with pytest.raises(ValueError, match="boom"):
            await gather_or_cancel(slow("x"), boom(), slow("y"))
        # siblings were already cancelled before the error surfaced
        assert sorted(cancelled) == ["x", "y"]
        await asyncio.sleep(0.1)

    asyncio.run(_go())
    assert finished == []


def test_no_awaitables():
    assert asyncio.run(gather_or_cancel()) == []
