"""Section loaders: one per stock API endpoint.

Each loader fetches its endpoint, validates the payload, renders the rows
and replaces the content of its own sink. The sink is only touched after
the whole payload has been validated and rendered, so a failed load keeps
the previous content in place.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from market_board.app.logic.renderer import (
    render_active_row,
    render_market_info,
    render_summary_row,
)
from market_board.core.domain_models import (
    ActiveStocks,
    DisplayRow,
    MarketInfo,
    MarketSummaryRow,
)
from market_board.core.errors import FailureKind, MissingDataFailure, SectionLoadError
from market_board.core.logo_directory import LogoDirectory
from market_board.core.sinks import InfoPanelSink, StatusSink, TableSink
from market_board.etl.extract import Endpoint, StockApiClient

_SUMMARY_ROWS = TypeAdapter(list[MarketSummaryRow])


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one section load."""

    section: str
    endpoint: str
    rows: int = 0
    error: SectionLoadError | None = None
    surfaced: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> FailureKind | None:
        return self.error.kind if self.error is not None else None


def replace_rows(sink: TableSink, rows: list[DisplayRow]) -> None:
    """Clear the sink and append ``rows`` in order."""
    sink.clear()
    for row in rows:
        sink.append(row)


class SectionLoader(ABC):
    """Base class handling fetch, failure reporting and result building."""

    section: str
    endpoint: Endpoint

    def __init__(
        self,
        client: StockApiClient,
        status: StatusSink | None = None,
        surface_errors: bool = False,
        error_message: str = "",
    ) -> None:
        """
        Args:
            client: API client used for the GET
            status: Shared status region, only written on surfaced errors
            surface_errors: Show ``error_message`` in the status on failure
            error_message: One-line message for the status region
        """
        self.client = client
        self.status = status
        self.surface_errors = surface_errors
        self.error_message = error_message or f"Failed to load {self.section}"

    async def load(self) -> LoadResult:
        """Fetch and populate this section. Section errors never propagate."""
        try:
            payload = await self.client.get_json(self.endpoint)
            rows = self.populate(payload)
        except SectionLoadError as e:
            logger.error(f"[{self.section}] {e}")
            surfaced = self.surface_errors and self.status is not None
            if surfaced:
                self.status.set(self.error_message, is_error=True)  # type: ignore[union-attr]
            return LoadResult(self.section, self.endpoint.value, error=e, surfaced=surfaced)

        logger.info(f"[{self.section}] Loaded {rows} rows")
        return LoadResult(self.section, self.endpoint.value, rows=rows)

    def missing(self, cause: BaseException | str) -> MissingDataFailure:
        return MissingDataFailure(self.endpoint.value, cause)

    @abstractmethod
    def populate(self, payload: Any) -> int:
        """Validate ``payload``, write the sink and return the row count.

        Raises:
            MissingDataFailure: Payload lacks the data this section needs
        """


class MarketInfoLoader(SectionLoader):
    """Fills the market-today panel from the info endpoint."""

    section = "Markets Today"
    endpoint = Endpoint.INFO

    def __init__(self, client: StockApiClient, panel: InfoPanelSink, **kwargs: Any) -> None:
        super().__init__(client, **kwargs)
        self.panel = panel

    def populate(self, payload: Any) -> int:
        if not isinstance(payload, dict):
            raise self.missing(f"expected an object, got {type(payload).__name__}")
        try:
            info = MarketInfo.model_validate(payload)
        except ValidationError as e:
            raise self.missing(e) from e

        self.panel.show(render_market_info(info))
        return 1


class MarketSummaryLoader(SectionLoader):
    """Fills the market summary table."""

    section = "Market Summary"
    endpoint = Endpoint.MARKET_SUMMARY

    def __init__(
        self,
        client: StockApiClient,
        body: TableSink,
        logos: LogoDirectory,
        **kwargs: Any,
    ) -> None:
        super().__init__(client, **kwargs)
        self.body = body
        self.logos = logos

    def populate(self, payload: Any) -> int:
        if not isinstance(payload, list):
            raise self.missing(f"expected an array, got {type(payload).__name__}")
        try:
            records = _SUMMARY_ROWS.validate_python(payload)
        except ValidationError as e:
            raise self.missing(e) from e

        rows = [render_summary_row(record, self.logos) for record in records]
        replace_rows(self.body, rows)
        return len(rows)


class ActiveStocksLoader(SectionLoader):
    """Fills the biggest gainers and biggest losers tables."""

    section = "Active Stocks"
    endpoint = Endpoint.ACTIVE_STOCKS

    def __init__(
        self,
        client: StockApiClient,
        gainers: TableSink,
        losers: TableSink,
        logos: LogoDirectory,
        **kwargs: Any,
    ) -> None:
        super().__init__(client, **kwargs)
        self.gainers = gainers
        self.losers = losers
        self.logos = logos

    def populate(self, payload: Any) -> int:
        if not isinstance(payload, dict):
            raise self.missing(f"expected an object, got {type(payload).__name__}")
        try:
            active = ActiveStocks.model_validate(payload)
        except ValidationError as e:
            raise self.missing(e) from e

        gainer_rows = [render_active_row(record, self.logos) for record in active.biggest_gainers]
        loser_rows = [render_active_row(record, self.logos) for record in active.biggest_losers]
        replace_rows(self.gainers, gainer_rows)
        replace_rows(self.losers, loser_rows)
        return len(gainer_rows) + len(loser_rows)
