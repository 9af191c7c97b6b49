"""View components for the market dashboard page.

Renders the status line, the market-today panel and the three tables from
the in-memory sinks.
"""

import pandas as pd
import streamlit as st

from market_board.app.logic.tables import display_rows_to_frame
from market_board.app.views.colors import SENTIMENT_COLORS, SENTIMENT_MARKDOWN
from market_board.core.domain_models import PercentArrow, Sentiment
from market_board.core.sinks import InfoPanel, StatusIndicator, TableBody

TABLE_COLUMN_CONFIG = {
    "logo": st.column_config.ImageColumn("", width="small"),
    "symbol": st.column_config.TextColumn("Symbol", width="small"),
    "price": st.column_config.TextColumn("Price", width="small"),
    "change": st.column_config.TextColumn("Change", width="small"),
    "change_pct": st.column_config.TextColumn("% Change", width="small"),
    "volume": st.column_config.TextColumn("Volume", width="small"),
    "rvol": st.column_config.TextColumn("RVOL", width="small"),
    "float": st.column_config.TextColumn("Float", width="small"),
    "market_cap": st.column_config.TextColumn("Market Cap", width="small"),
}


def color_change_pill(sentiment: str | None) -> str:
    if sentiment is None or pd.isna(sentiment):
        return ""
    color = SENTIMENT_COLORS[Sentiment(sentiment)]
    return f"background-color: {color}; color: white"


def render_status(status: StatusIndicator) -> None:
    if not status.visible:
        return
    if status.is_error:
        st.error(status.message)
    else:
        st.info(status.message)


def _arrow_markdown(percent: PercentArrow) -> str:
    if percent.sentiment is None:
        return percent.text
    return f":{SENTIMENT_MARKDOWN[percent.sentiment]}[{percent.text}]"


def render_market_today(panel: InfoPanel) -> None:
    """Render the six labeled market-today fields."""
    view = panel.view
    if view is None:
        st.caption("Market data not loaded yet.")
        return

    cols = st.columns(3)
    with cols[0]:
        st.markdown(f"**Market**  \n{view.market}")
        st.markdown(f"**Leader**  \n{view.leader}")
    with cols[1]:
        st.markdown(f"**Top Stock**  \n{view.top_name}")
        st.markdown(_arrow_markdown(view.top_percent))
    with cols[2]:
        st.markdown(f"**Worst Stock**  \n{view.worst_name}")
        st.markdown(_arrow_markdown(view.worst_percent))


def render_table(body: TableBody, active: bool = False) -> None:
    """Render one table body with colored change pills."""
    if not body.rows:
        st.info("No rows to display.")
        return

    df_rows = display_rows_to_frame(body.rows, active=active).to_pandas()
    styler = df_rows.style.apply(
        lambda _: df_rows["sentiment"].apply(color_change_pill),
        subset=["change_pct"],
    )
    column_order = [column for column in df_rows.columns if column != "sentiment"]

    st.dataframe(
        styler,
        hide_index=True,
        column_order=column_order,
        column_config=TABLE_COLUMN_CONFIG,
    )
