"""Row rendering for the dashboard tables and the market-today panel.

Maps one API record onto its display form. Input records are frozen
models and are never modified.
"""

from market_board.core.domain_models import (
    ActiveStockRow,
    DisplayRow,
    MarketInfo,
    MarketInfoView,
    MarketSummaryRow,
)
from market_board.core.formatters import (
    format_change,
    format_numeric_text,
    format_percent_arrow,
    format_percent_badge,
    format_price,
    format_raw_badge,
    format_text,
    format_volume,
)
from market_board.core.logo_directory import LogoDirectory, resolve_logo


def _symbol(company_name: object) -> str | None:
    if company_name is None or company_name == "null":
        return None
    return str(company_name).strip() or None


def render_summary_row(row: MarketSummaryRow, logos: LogoDirectory) -> DisplayRow:
    """Render a market summary row.

    Price and change arrive pre-formatted by the server and are shown
    verbatim unless they are not numbers; the pill keeps the server's
    percent text.
    """
    symbol = _symbol(row.company_name)
    return DisplayRow(
        logo_url=resolve_logo(symbol, logos),
        symbol_text=format_text(symbol),
        price_text=format_numeric_text(row.today_price),
        change_text=format_numeric_text(row.price_change),
        percent_badge=format_raw_badge(row.change),
    )


def render_active_row(row: ActiveStockRow, logos: LogoDirectory) -> DisplayRow:
    """Render a gainer/loser row with two-decimal numbers and volume suffixes."""
    symbol = _symbol(row.company_name)
    return DisplayRow(
        logo_url=resolve_logo(symbol, logos),
        symbol_text=format_text(symbol),
        price_text=format_price(row.price),
        change_text=format_change(row.change),
        percent_badge=format_percent_badge(row.change_percent),
        volume_text=format_volume(row.volume),
        rvol_text=format_text(row.rvol),
        float_text=format_text(row.float_shares),
        market_cap_text=format_text(row.market_cap),
    )


def render_market_info(info: MarketInfo) -> MarketInfoView:
    return MarketInfoView(
        market=format_text(info.market),
        leader=format_text(info.leader),
        top_name=format_text(info.top_stock),
        top_percent=format_percent_arrow(info.top_stock_percentage),
        worst_name=format_text(info.worst_stock),
        worst_percent=format_percent_arrow(info.worst_stock_percentage),
    )
