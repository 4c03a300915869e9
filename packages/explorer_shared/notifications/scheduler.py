"""Deferred task queues used to chain notifications outside a dispatch.

A coordinator reacting to a notification never publishes synchronously. It
schedules a task instead; the task runs after the current call chain unwinds,
as a standalone publish round on a quiet channel.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable
from typing import Protocol

from packages.explorer_shared.errors import codes, precondition_violation
from packages.explorer_shared.logging import fields, get_logger, log_context

Task = Callable[[], None]

_LOGGER = get_logger(__name__)


class Scheduler(Protocol):
    """Contract for enqueueing work to run after the current call stack."""

    def schedule_deferred(self, task: Task) -> None:
        """Enqueue ``task`` to run in a later round, in enqueue order."""


class DeferredTaskQueue:
    """Manually driven FIFO queue of deferred tasks.

    The host (or a test) drives execution with ``run_round``/``flush`` once the
    externally triggered event has been fully dispatched.
    """

    def __init__(self, *, max_rounds: int = 64) -> None:
        self._tasks: deque[Task] = deque()
        self._max_rounds = max_rounds
        self._rounds = 0

    @property
    def pending(self) -> int:
        return len(self._tasks)

    @property
    def rounds_run(self) -> int:
        return self._rounds

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    def schedule_deferred(self, task: Task) -> None:
        self._tasks.append(task)

    def run_round(self) -> int:
        """Run the tasks queued at round start; return how many ran.

        Tasks scheduled while the round runs wait for the next round. A failing
        task propagates and leaves the rest of the round queued.
        """
        count = len(self._tasks)
        if count == 0:
            return 0
        self._rounds += 1
        if _LOGGER.isEnabledFor(logging.DEBUG):
            with log_context(
                {fields.DEFERRED_ROUND: self._rounds, fields.PENDING_TASKS: count}
            ):
                _LOGGER.debug("deferred round")
        for _ in range(count):
            task = self._tasks.popleft()
            task()
        return count

    def flush(self) -> int:
        """Run rounds until the queue is empty; return the number of rounds."""
        rounds = 0
        while self._tasks:
            if rounds >= self._max_rounds:
                raise precondition_violation(
                    f"deferred queue still busy after {rounds} rounds",
                    code=codes.RUNAWAY_CASCADE,
                    metadata={"pending": str(len(self._tasks))},
                )
            self.run_round()
            rounds += 1
        return rounds


class EventLoopTaskQueue:
    """Deferred queue backed by an ``asyncio`` event loop.

    ``call_soon`` callbacks run in FIFO order once the current callback
    returns; callbacks scheduled by a running callback run on a later loop
    iteration, which gives the same round semantics as ``DeferredTaskQueue``.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop if loop is not None else asyncio.get_running_loop()

    def schedule_deferred(self, task: Task) -> None:
        self._loop.call_soon(task)
