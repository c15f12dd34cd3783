"""Periodic series polling with change detection."""

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any

from src.infrastructure.http.fetcher import SeriesFetcher
from src.infrastructure.logging.logger import StructuredLogger
from src.services.series.errors import FetchError
from src.services.series.models import DataPoint, PreparedSeries
from src.services.series.normalizer import normalize_points, points_changed

logger = logging.getLogger(__name__)

OnChange = Callable[[PreparedSeries], None]


class SeriesPoller:
    """
    Polls an endpoint on a fixed interval and forwards changed series.

    Lifecycle:
        poller = SeriesPoller(source_width=800, endpoint=url, interval_ms=5000)
        poller.start_polling(on_change)
        ...
        poller.stop_polling()
        await poller.close()

    The last accepted series is kept as the comparison baseline. The first
    successful tick always seeds it and notifies; later ticks notify only
    when labels or values differ positionally.
    """

    def __init__(
        self,
        source_width: float,
        endpoint: str,
        interval_ms: int = 5000,
        fetcher: SeriesFetcher | None = None,
        fetch_timeout: float = 10.0,
    ):
        """Initialize poller.

        Args:
            source_width: Current rendering width in pixels
            endpoint: URL serving ``{"data": [...]}``
            interval_ms: Delay between ticks, must be positive
            fetcher: Optional fetch collaborator; one is created (and owned) if omitted
            fetch_timeout: Request timeout for the fetcher created here
        """
        _check_interval(interval_ms)
        self.source_width = source_width
        self.endpoint = endpoint
        self.interval_ms = interval_ms
        self._fetcher = fetcher or SeriesFetcher(timeout=fetch_timeout)
        self._owns_fetcher = fetcher is None
        self._raw_points: list[Any] = []
        self._baseline: tuple[DataPoint, ...] | None = None
        self._on_change: OnChange | None = None
        self._timer: asyncio.Task[None] | None = None
        self._events = StructuredLogger(__name__)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_endpoint(self, endpoint: str) -> None:
        """Retarget subsequent fetches; an in-flight fetch keeps its URL."""
        self.endpoint = endpoint

    def set_interval(self, interval_ms: int) -> None:
        """Change the delay used from the next scheduled tick on."""
        _check_interval(interval_ms)
        self.interval_ms = interval_ms

    def set_source_width(self, source_width: float) -> None:
        self.source_width = source_width

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def raw_points(self) -> list[Any]:
        return list(self._raw_points)

    @property
    def baseline(self) -> tuple[DataPoint, ...] | None:
        return self._baseline

    @property
    def is_polling(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def reset_baseline(self) -> None:
        """Forget the accepted series so the next tick notifies unconditionally."""
        self._baseline = None

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def normalize(self) -> PreparedSeries:
        """Prepare the currently held raw points for the current width."""
        return normalize_points(self._raw_points, self.source_width)

    async def _fetch(self) -> PreparedSeries | None:
        url = self.endpoint
        try:
            entries = await self._fetcher.fetch(url)
        except FetchError as e:
            self._events.log_error("fetch", e, {"url": url, "status_code": e.status_code})
            return None
        self._raw_points = list(entries)
        return self.normalize()

    async def fetch_once(self) -> PreparedSeries:
        """Fetch, replace the held raw points and normalize them.

        A failed fetch keeps the previous raw points and yields the empty
        series for this call.
        """
        series = await self._fetch()
        if series is None:
            return PreparedSeries.empty()
        return series

    async def poll_once(self) -> bool:
        """Run a single tick. Returns True when the consumer was notified."""
        started = time.perf_counter()
        # Shielded so that stop_polling() drops the result without aborting the request.
        series = await asyncio.shield(self._fetch())
        if series is None:
            return False
        return self._accept(series, (time.perf_counter() - started) * 1000)

    def _accept(self, series: PreparedSeries, duration_ms: float) -> bool:
        first_run = self._baseline is None
        changed = first_run or points_changed(self._baseline, series.points)

        self._events.log_step(
            "poll",
            {
                "url": self.endpoint,
                "points": len(series.points),
                "first_run": first_run,
                "changed": changed,
            },
            duration_ms=duration_ms,
        )

        if not changed:
            logger.debug("Data has not changed, skipping redraw")
            return False

        if first_run:
            logger.info("First run, initializing baseline with %d points", len(series.points))
        else:
            logger.info("Data has changed (%d points)", len(series.points))

        self._baseline = series.points
        if self._on_change is not None:
            self._on_change(series)
        return True

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def start_polling(self, on_change: OnChange) -> None:
        """Register *on_change* and start the timer if it is not running.

        A second call while polling only replaces the callback.
        """
        self._on_change = on_change
        if self.is_polling:
            logger.debug("Polling already active for %s, callback replaced", self.endpoint)
            return
        self._timer = asyncio.create_task(self._run(), name=f"series-poller:{self.endpoint}")
        logger.info("Polling %s every %d ms", self.endpoint, self.interval_ms)

    def stop_polling(self) -> None:
        """Cancel the timer. Safe to call when already stopped."""
        self._on_change = None
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        logger.info("Polling stopped for %s", self.endpoint)

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while True:
            next_tick += self.interval_ms / 1000
            now = loop.time()
            if next_tick < now:
                # A slow tick overran its slot; skip the missed deadlines.
                skipped = int((now - next_tick) * 1000 // self.interval_ms) + 1
                logger.debug("Poll tick overran, skipping %d missed tick(s)", skipped)
                next_tick += skipped * self.interval_ms / 1000
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            try:
                await self.poll_once()
            except Exception as e:
                logger.error("Poll tick failed: %s", e, exc_info=True)

    async def close(self) -> None:
        """Stop polling and release the fetcher if this poller created it."""
        self.stop_polling()
        if self._owns_fetcher:
            await self._fetcher.close()


def _check_interval(interval_ms: int) -> None:
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {interval_ms}")
