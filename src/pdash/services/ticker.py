"""Countdown ticker — recomputes the client countdown on a fixed cadence."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from datetime import datetime
from types import TracebackType

from pdash.models.urgency import Countdown, Urgency
from pdash.services.deadlines import classify_deadline, compute_countdown, utc_now

logger = logging.getLogger(__name__)

TickCallback = Callable[[Countdown, Urgency], None]


class CountdownTicker:
    """Calls ``on_tick`` now and then every ``interval`` seconds until stopped.

    Tie the ticker to the lifetime of the view that shows it: ``stop()`` (or
    leaving the ``async with`` block) cancels the recurring task.
    """

    def __init__(
        self,
        deadline: datetime,
        on_tick: TickCallback,
        interval: float = 1.0,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._deadline = deadline
        self._on_tick = on_tick
        self._interval = interval
        self._clock = clock
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def tick(self) -> None:
        """Compute and deliver one countdown frame."""
        now = self._clock()
        countdown = compute_countdown(self._deadline, now)
        urgency = classify_deadline(self._deadline, now)
        try:
            self._on_tick(countdown, urgency)
        except Exception:
            logger.exception("Unhandled exception in countdown callback")

    async def _run(self) -> None:
        while True:
            self.tick()
            await asyncio.sleep(self._interval)

    async def __aenter__(self) -> CountdownTicker:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()
