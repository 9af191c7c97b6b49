from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# --- Constants ---

# Shown for every missing, null or non-numeric value
PLACEHOLDER = "-"

UP_ARROW = "↑"
DOWN_ARROW = "↓"

# Raw scalar as delivered by the stock API. Numbers can arrive as JSON
# numbers or as pre-formatted strings ("$150.00", "-0.80%", "12.00M").
RawValue = int | float | str | None


# --- Enums ---


class Sentiment(str, Enum):
    """Direction of a percent move."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def pill_class(self) -> str:
        """CSS class of the change pill in the tables."""
        return "change-green" if self is Sentiment.POSITIVE else "change-red"

    @property
    def arrow_class(self) -> str:
        """CSS class of the percent field in the market-today panel."""
        return "green" if self is Sentiment.POSITIVE else "red"


# --- API payloads ---


class ApiModel(BaseModel):
    """Base for API payloads: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class MarketInfo(ApiModel):
    """Overall market status from the info endpoint."""

    market: RawValue = None
    leader: RawValue = None
    top_stock: RawValue = Field(default=None, alias="topStock")
    top_stock_percentage: RawValue = Field(default=None, alias="topStockPercentage")
    worst_stock: RawValue = Field(default=None, alias="worstStock")
    worst_stock_percentage: RawValue = Field(default=None, alias="worstStockPercentage")


class MarketSummaryRow(ApiModel):
    """One row of the market summary table, in server display order."""

    company_name: RawValue = Field(default=None, alias="companyName")
    today_price: RawValue = Field(default=None, alias="todayPrice")
    price_change: RawValue = Field(default=None, alias="priceChange")
    change: RawValue = None


class ActiveStockRow(ApiModel):
    """One gainer or loser."""

    company_name: RawValue = Field(default=None, alias="companyName")
    price: RawValue = None
    change: RawValue = None
    change_percent: RawValue = Field(default=None, alias="changePercent")
    volume: RawValue = None
    rvol: Any = None
    float_shares: Any = Field(default=None, alias="float")
    market_cap: Any = Field(default=None, alias="marketCap")


class ActiveStocks(ApiModel):
    """Payload of the active-stocks endpoint. Both lists are required."""

    biggest_gainers: list[ActiveStockRow] = Field(alias="biggestGainers")
    biggest_losers: list[ActiveStockRow] = Field(alias="biggestLosers")


# --- Display artifacts ---


class PercentBadge(BaseModel):
    """Sentiment-tagged pill shown in the change column."""

    model_config = ConfigDict(frozen=True)

    text: str
    sentiment: Sentiment

    @property
    def css_class(self) -> str:
        return self.sentiment.pill_class


class PercentArrow(BaseModel):
    """Arrow-annotated percent for the market-today panel.

    ``sentiment`` is None when the value is absent (blank classification).
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sentiment: Sentiment | None = None

    @property
    def css_class(self) -> str:
        base = "mt-percent"
        if self.sentiment is None:
            return base
        return f"{base} {self.sentiment.arrow_class}"


class DisplayRow(BaseModel):
    """Rendered table row.

    ``percent_badge`` is the PLACEHOLDER string when there is no badge.
    The active-stock columns stay None for market summary rows.
    """

    model_config = ConfigDict(frozen=True)

    logo_url: str | None = None
    symbol_text: str
    price_text: str
    change_text: str
    percent_badge: PercentBadge | str

    volume_text: str | None = None
    rvol_text: str | None = None
    float_text: str | None = None
    market_cap_text: str | None = None

    @property
    def has_logo(self) -> bool:
        return self.logo_url is not None

    @property
    def badge_text(self) -> str:
        if isinstance(self.percent_badge, PercentBadge):
            return self.percent_badge.text
        return self.percent_badge

    @property
    def sentiment(self) -> Sentiment | None:
        if isinstance(self.percent_badge, PercentBadge):
            return self.percent_badge.sentiment
        return None


class MarketInfoView(BaseModel):
    """The six labeled fields of the market-today panel."""

    model_config = ConfigDict(frozen=True)

    market: str
    leader: str
    top_name: str
    top_percent: PercentArrow
    worst_name: str
    worst_percent: PercentArrow
