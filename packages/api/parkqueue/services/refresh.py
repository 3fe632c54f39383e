# This project was developed with assistance from AI tools.
"""Periodic re-ranking of pending exits.

The evaluator holds no time state: ``CountdownRefresher`` owns the
repeating timer, samples the clock once per tick and replaces the
previously published ranking. Refreshes are single-flight -- a tick that
fires while the previous refresh is still running cancels that refresh
instead of queueing behind it.
"""

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import UTC, datetime
from typing import Any

from ..core.config import settings
from ..schemas.urgency import PaymentRecord, RankedPayment
from .pending import rank_pending_payments

logger = logging.getLogger(__name__)

RecordSource = Callable[[], Iterable[PaymentRecord] | Awaitable[Iterable[PaymentRecord]]]
RefreshCallback = Callable[[list[RankedPayment]], Any]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CountdownRefresher:
    """Re-evaluates pending exits on a fixed interval."""

    def __init__(
        self,
        source: RecordSource,
        on_refresh: RefreshCallback | None = None,
        *,
        interval_seconds: float | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._source = source
        self._on_refresh = on_refresh
        self._interval = interval_seconds or settings.COUNTDOWN_REFRESH_SECONDS
        self._clock = clock
        self._timer: asyncio.Task | None = None
        self._pending: asyncio.Task | None = None
        self.latest: list[RankedPayment] = []
        self.refreshed_at: datetime | None = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        """Whether the timer loop is active."""
        return self._timer is not None and not self._timer.done()

    async def refresh_now(self) -> list[RankedPayment]:
        """Load, rank and publish the pending exits once, at a single time sample."""
        now = self._clock()
        records = self._source()
        if inspect.isawaitable(records):
            records = await records

        ranked = rank_pending_payments(records, now=now)
        self.latest = ranked
        self.refreshed_at = now

        if self._on_refresh is not None:
            outcome = self._on_refresh(ranked)
            if inspect.isawaitable(outcome):
                await outcome
        return ranked

    def tick(self) -> asyncio.Task:
        """Start a refresh, superseding one that has not settled yet."""
        if self._pending is not None and not self._pending.done():
            logger.debug("Superseding unfinished countdown refresh")
            self._pending.cancel()
        self._pending = asyncio.create_task(self._guarded_refresh())
        return self._pending

    async def _guarded_refresh(self) -> None:
        try:
            await self.refresh_now()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Countdown refresh failed; keeping previous ranking")

    async def _run(self) -> None:
        while True:
            self.tick()
            await asyncio.sleep(self._interval)

    def start(self) -> None:
        """Start the timer loop. Must be called from a running event loop."""
        if self.running:
            return
        logger.info("Countdown refresher started (interval=%ss)", self._interval)
        self._timer = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop the timer and any in-flight refresh. Safe to call repeatedly."""
        for task in (self._timer, self._pending):
            if task is not None and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
        if self._timer is not None:
            logger.info("Countdown refresher stopped")
        self._timer = None
        self._pending = None
