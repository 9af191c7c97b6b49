"""Refresh orchestration.

Runs all section loaders concurrently on the event loop and owns the shared
status region. The loading message is set before the loaders start and
cleared only after every loader has settled.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from market_board.app.logic.loaders import (
    ActiveStocksLoader,
    LoadResult,
    MarketInfoLoader,
    MarketSummaryLoader,
    SectionLoader,
)
from market_board.config.settings import Settings
from market_board.core.logo_directory import LogoDirectory
from market_board.core.sinks import InfoPanel, StatusIndicator, TableBody
from market_board.etl.extract import StockApiClient


class RefreshState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    # idle, but the last refresh had at least one failed section
    ERROR = "error"


@dataclass
class DashboardSinks:
    """All presentation targets of the dashboard."""

    status: StatusIndicator = field(default_factory=StatusIndicator)
    info_panel: InfoPanel = field(default_factory=InfoPanel)
    summary_body: TableBody = field(default_factory=lambda: TableBody("market_summary"))
    gainers_body: TableBody = field(default_factory=lambda: TableBody("gainers"))
    losers_body: TableBody = field(default_factory=lambda: TableBody("losers"))


@dataclass(frozen=True)
class RefreshReport:
    """Per-section results of one refresh."""

    results: list[LoadResult]
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failed_sections(self) -> list[str]:
        return [result.section for result in self.results if not result.ok]


class RefreshOrchestrator:
    """Runs one refresh cycle across all sections."""

    def __init__(
        self,
        loaders: Sequence[SectionLoader],
        status: StatusIndicator,
        loading_message: str = "Loading...",
        keep_error_status: bool = False,
    ) -> None:
        self.loaders = list(loaders)
        self.status = status
        self.loading_message = loading_message
        self.keep_error_status = keep_error_status
        self.state = RefreshState.IDLE

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: StockApiClient,
        sinks: DashboardSinks,
        logos: LogoDirectory,
    ) -> "RefreshOrchestrator":
        """Wire the three standard section loaders to ``sinks``."""
        loaders: list[SectionLoader] = [
            MarketInfoLoader(
                client,
                sinks.info_panel,
                status=sinks.status,
                surface_errors=settings.surface_info_errors,
                error_message=settings.info_error_message,
            ),
            MarketSummaryLoader(
                client,
                sinks.summary_body,
                logos,
                status=sinks.status,
                surface_errors=settings.surface_summary_errors,
                error_message=settings.summary_error_message,
            ),
            ActiveStocksLoader(
                client,
                sinks.gainers_body,
                sinks.losers_body,
                logos,
                status=sinks.status,
                surface_errors=settings.surface_active_errors,
                error_message=settings.active_error_message,
            ),
        ]
        return cls(
            loaders,
            sinks.status,
            loading_message=settings.loading_message,
            keep_error_status=settings.keep_error_status,
        )

    async def refresh(self) -> RefreshReport:
        """Load all sections concurrently and wait for every one to settle.

        A trigger while a refresh is in flight is ignored and reported as
        skipped.
        """
        if self.state is RefreshState.LOADING:
            logger.warning("Refresh already in progress, ignoring trigger")
            return RefreshReport(results=[], skipped=True)

        self.state = RefreshState.LOADING
        self.status.set(self.loading_message)
        logger.info(f"Refreshing {len(self.loaders)} sections")

        outcomes = await asyncio.gather(
            *(loader.load() for loader in self.loaders), return_exceptions=True
        )

        results = [outcome for outcome in outcomes if isinstance(outcome, LoadResult)]
        report = RefreshReport(results=results)
        surfaced = any(result.surfaced for result in results)
        if not (self.keep_error_status and surfaced):
            self.status.clear()

        unexpected = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
        self.state = RefreshState.IDLE if report.ok and not unexpected else RefreshState.ERROR
        if unexpected:
            logger.error(f"Refresh aborted by unexpected error: {unexpected[0]!r}")
            raise unexpected[0]

        if report.ok:
            logger.success("Refresh completed")
        else:
            logger.warning(f"Refresh completed with failures: {report.failed_sections}")
        return report
