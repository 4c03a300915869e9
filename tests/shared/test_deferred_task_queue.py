"""Tests for deferred task scheduling."""

from __future__ import annotations

import asyncio

import pytest

from packages.explorer_shared.errors import PreconditionViolation, codes
from packages.explorer_shared.notifications import DeferredTaskQueue, EventLoopTaskQueue


def test_run_round_runs_only_tasks_queued_at_round_start() -> None:
    """Tasks scheduled by a running task wait for the next round."""
    queue = DeferredTaskQueue()
    calls: list[str] = []

    def _first() -> None:
        calls.append("first")
        queue.schedule_deferred(lambda: calls.append("chained"))

    queue.schedule_deferred(_first)
    queue.schedule_deferred(lambda: calls.append("second"))

    assert queue.run_round() == 2
    assert calls == ["first", "second"]
    assert queue.pending == 1

    assert queue.run_round() == 1
    assert calls == ["first", "second", "chained"]
    assert queue.rounds_run == 2


def test_run_round_on_empty_queue_does_not_count_a_round() -> None:
    """An idle queue reports zero work."""
    queue = DeferredTaskQueue()

    assert queue.run_round() == 0
    assert queue.rounds_run == 0


def test_flush_runs_until_quiet_and_reports_rounds() -> None:
    """Chained work drains across rounds."""
    queue = DeferredTaskQueue()
    calls: list[int] = []

    def _chain(depth: int) -> None:
        calls.append(depth)
        if depth < 3:
            queue.schedule_deferred(lambda: _chain(depth + 1))

    queue.schedule_deferred(lambda: _chain(1))

    assert queue.flush() == 3
    assert calls == [1, 2, 3]
    assert queue.pending == 0


def test_flush_surfaces_runaway_cascades() -> None:
    """A task that always reschedules itself trips the round limit."""
    queue = DeferredTaskQueue(max_rounds=5)

    def _forever() -> None:
        queue.schedule_deferred(_forever)

    queue.schedule_deferred(_forever)

    with pytest.raises(PreconditionViolation) as exc_info:
        queue.flush()

    assert exc_info.value.code == codes.RUNAWAY_CASCADE
    assert queue.rounds_run == 5


def test_failing_task_leaves_the_rest_of_the_round_queued() -> None:
    """Errors propagate; nothing is dropped silently."""
    queue = DeferredTaskQueue()
    calls: list[str] = []

    def _boom() -> None:
        raise RuntimeError("task failed")

    queue.schedule_deferred(_boom)
    queue.schedule_deferred(lambda: calls.append("after"))

    with pytest.raises(RuntimeError):
        queue.run_round()

    assert calls == []
    assert queue.pending == 1
    queue.run_round()
    assert calls == ["after"]


def test_event_loop_queue_runs_tasks_after_the_current_callback() -> None:
    """call_soon ordering gives the same FIFO round semantics."""
    calls: list[str] = []

    async def _scenario() -> None:
        queue = EventLoopTaskQueue()

        def _first() -> None:
            calls.append("first")
            queue.schedule_deferred(lambda: calls.append("chained"))

        queue.schedule_deferred(_first)
        queue.schedule_deferred(lambda: calls.append("second"))
        calls.append("sync")
        for _ in range(3):
            await asyncio.sleep(0)

    asyncio.run(_scenario())

    assert calls == ["sync", "first", "second", "chained"]
