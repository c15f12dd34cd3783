"""Chart session: owns one poller, one renderer and one surface."""

import logging

from src.config.constants import DataSource
from src.config.settings import Settings
from src.infrastructure.http.fetcher import SeriesFetcher
from src.services.chart.models import DrawInstructions
from src.services.chart.renderer import ChartRenderer
from src.services.chart.surface import RenderSurface, SvgSurface
from src.services.series.models import PreparedSeries
from src.services.series.poller import SeriesPoller

logger = logging.getLogger(__name__)


def resolve_source_url(settings: Settings, source: DataSource | None, url: str | None) -> str:
    """Pick the endpoint for a source selection; an explicit URL wins."""
    if url:
        return url
    if source == DataSource.ANYCHART:
        return settings.anychart_data_url
    if source == DataSource.LOCAL:
        return settings.local_data_url
    return settings.data_url


class ChartSession:
    """
    Application context for one live chart.

    Lifecycle is owned by the caller: create -> start -> stop -> close.
    Poll-detected changes and resizes both end in ``draw``, which redraws
    the whole chart from the series it is given.
    """

    def __init__(
        self,
        poller: SeriesPoller,
        renderer: ChartRenderer,
        surface: RenderSurface,
    ) -> None:
        self.poller = poller
        self.renderer = renderer
        self.surface = surface
        self._series = PreparedSeries.empty()
        self._instructions: DrawInstructions | None = None

    @property
    def series(self) -> PreparedSeries:
        """Series behind the current drawing."""
        return self._series

    @property
    def instructions(self) -> DrawInstructions:
        if self._instructions is None:
            return self.draw(self._series)
        return self._instructions

    @property
    def is_running(self) -> bool:
        return self.poller.is_polling

    def draw(self, series: PreparedSeries) -> DrawInstructions:
        """Redraw the surface from scratch."""
        instructions = self.renderer.render(
            series,
            self.surface.current_width,
            self.surface.current_height,
        )
        self.surface.draw(instructions)
        self._series = series
        self._instructions = instructions
        return instructions

    async def refresh(self) -> DrawInstructions:
        """Fetch now and redraw with whatever came back."""
        series = await self.poller.fetch_once()
        return self.draw(series)

    async def start(self, fetch_now: bool = True) -> None:
        """Optionally draw immediately, then poll for changes."""
        if fetch_now:
            await self.refresh()
        self.poller.start_polling(self.draw)

    def stop(self) -> None:
        self.poller.stop_polling()

    def resize(self, width: float, height: float) -> DrawInstructions:
        """Recompute layout from the cached raw points; no fetch."""
        self.surface.resize(width, height)
        self.poller.set_source_width(width)
        logger.info("Surface resized to %sx%s, redrawing", width, height)
        return self.draw(self.poller.normalize())

    async def update_source(self, endpoint: str, interval_seconds: int) -> DrawInstructions:
        """Retarget the poller and restart with a fresh baseline."""
        self.poller.stop_polling()
        self.poller.set_endpoint(endpoint)
        self.poller.set_interval(interval_seconds * 1000)
        self.poller.reset_baseline()
        logger.info("Source changed to %s (every %ss)", endpoint, interval_seconds)
        try:
            await self.refresh()
        finally:
            self.poller.start_polling(self.draw)
        return self.instructions

    async def close(self) -> None:
        await self.poller.close()


def create_chart_session(
    settings: Settings,
    fetcher: SeriesFetcher | None = None,
) -> ChartSession:
    """Build a session from settings. Nothing runs until ``start``."""
    surface = SvgSurface(settings.canvas_width, settings.canvas_height)
    poller = SeriesPoller(
        source_width=surface.current_width,
        endpoint=settings.data_url,
        interval_ms=settings.poll_interval_ms,
        fetcher=fetcher,
        fetch_timeout=settings.fetch_timeout,
    )
    return ChartSession(poller=poller, renderer=ChartRenderer(), surface=surface)
