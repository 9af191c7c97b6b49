"""Row rendering for market summary, active stocks and the info panel."""

from market_board.app.logic.renderer import (
    render_active_row,
    render_market_info,
    render_summary_row,
)
from market_board.core.domain_models import (
    PLACEHOLDER,
    ActiveStockRow,
    MarketInfo,
    MarketSummaryRow,
    PercentBadge,
    Sentiment,
)
from market_board.core.logo_directory import LogoDirectory


def test_summary_row_keeps_server_values(logos: LogoDirectory) -> None:
    record = MarketSummaryRow.model_validate(
        {"companyName": "AAPL", "todayPrice": 150, "priceChange": -1.2, "change": "-0.8%"}
    )
    row = render_summary_row(record, logos)

    assert row.logo_url == "https://logo.clearbit.com/apple.com"
    assert row.symbol_text == "AAPL"
    assert row.price_text == "150"
    assert row.change_text == "-1.2"
    assert row.percent_badge == PercentBadge(text="-0.8%", sentiment=Sentiment.NEGATIVE)
    assert row.volume_text is None


def test_summary_row_pre_formatted_strings(logos: LogoDirectory) -> None:
    record = MarketSummaryRow.model_validate(
        {
            "companyName": "MSFT",
            "todayPrice": "$410.20",
            "priceChange": "$2.10",
            "change": "0.00%",
        }
    )
    row = render_summary_row(record, logos)
    assert row.price_text == "$410.20"
    assert row.sentiment is Sentiment.POSITIVE


def test_summary_row_without_logo(logos: LogoDirectory) -> None:
    record = MarketSummaryRow.model_validate({"companyName": "ZZZZ", "change": None})
    row = render_summary_row(record, logos)
    assert row.logo_url is None
    assert not row.has_logo
    assert row.price_text == PLACEHOLDER
    assert row.percent_badge == PLACEHOLDER


def test_active_row(logos: LogoDirectory) -> None:
    record = ActiveStockRow.model_validate(
        {
            "companyName": "NVDA",
            "price": 900.456,
            "change": 12.3,
            "changePercent": "5.5",
            "volume": 12000000,
        }
    )
    row = render_active_row(record, logos)

    assert row.logo_url == "https://logo.clearbit.com/nvidia.com"
    assert row.price_text == "900.46"
    assert row.change_text == "12.30"
    assert row.badge_text == "5.50%"
    assert row.sentiment is Sentiment.POSITIVE
    assert row.volume_text == "12.00M"
    assert row.rvol_text == PLACEHOLDER
    assert row.float_text == PLACEHOLDER
    assert row.market_cap_text == PLACEHOLDER


def test_active_row_all_missing(logos: LogoDirectory) -> None:
    row = render_active_row(ActiveStockRow.model_validate({}), logos)
    assert row.symbol_text == PLACEHOLDER
    assert row.logo_url is None
    for text in [row.price_text, row.change_text, row.badge_text, row.volume_text]:
        assert text == PLACEHOLDER


def test_render_does_not_mutate_and_is_deterministic(logos: LogoDirectory) -> None:
    record = ActiveStockRow.model_validate({"companyName": "AAPL", "price": "null"})
    before = record.model_dump()
    assert render_active_row(record, logos) == render_active_row(record, logos)
    assert record.model_dump() == before


def test_market_info_view() -> None:
    info = MarketInfo.model_validate(
        {
            "market": "United States",
            "leader": "NVDA",
            "topStock": "TSLA",
            "topStockPercentage": "4.20%",
            "worstStock": "INTC",
            "worstStockPercentage": "-3.10%",
        }
    )
    view = render_market_info(info)
    assert view.market == "United States"
    assert view.leader == "NVDA"
    assert view.top_percent.text == "4.20% ↑"
    assert view.worst_percent.text == "-3.10% ↓"
    assert view.worst_percent.sentiment is Sentiment.NEGATIVE


def test_market_info_view_empty_payload() -> None:
    view = render_market_info(MarketInfo.model_validate({}))
    assert view.market == PLACEHOLDER
    assert view.top_name == PLACEHOLDER
    assert view.top_percent.text == PLACEHOLDER
    assert view.top_percent.sentiment is None


def test_summary_row_non_numeric_price_is_placeholder(logos: LogoDirectory) -> None:
    record = MarketSummaryRow.model_validate(
        {
            "companyName": "AAPL",
            "todayPrice": float("nan"),
            "priceChange": "N/A",
            "change": "-0.8%",
        }
    )
    row = render_summary_row(record, logos)
    assert row.price_text == PLACEHOLDER
    assert row.change_text == PLACEHOLDER
    assert row.symbol_text == "AAPL"


def test_active_row_non_finite_extras_are_placeholders(logos: LogoDirectory) -> None:
    record = ActiveStockRow.model_validate(
        {"companyName": "NVDA", "rvol": float("nan"), "float": "inf", "marketCap": "NaN"}
    )
    row = render_active_row(record, logos)
    assert row.rvol_text == PLACEHOLDER
    assert row.float_text == PLACEHOLDER
    assert row.market_cap_text == PLACEHOLDER
