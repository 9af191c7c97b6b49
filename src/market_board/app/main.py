"""Market Board Dashboard - Streamlit entry point.

Wiring layer connecting the refresh logic and the views. Sinks live in the
session state so a failed refresh leaves the previous content on screen.
"""

import asyncio
from pathlib import Path

import streamlit as st
from loguru import logger

from market_board.app.logic.refresh import DashboardSinks, RefreshOrchestrator, RefreshReport
from market_board.app.views.dashboard import render_market_today, render_status, render_table
from market_board.config.settings import Settings, get_settings
from market_board.core.logo_directory import LogoDirectory
from market_board.etl.extract import StockApiClient


@st.cache_resource  # type: ignore[misc]
def _load_logos(path: str) -> LogoDirectory:
    return LogoDirectory.from_yaml(Path(path))


async def _run_refresh(
    settings: Settings, sinks: DashboardSinks, logos: LogoDirectory
) -> RefreshReport:
    async with StockApiClient.from_settings(settings) as client:
        orchestrator = RefreshOrchestrator.from_settings(settings, client, sinks, logos)
        return await orchestrator.refresh()


settings = get_settings()

st.set_page_config(
    page_title=settings.app_name,
    page_icon="📈",
    layout="wide",
)

if "sinks" not in st.session_state:
    st.session_state["sinks"] = DashboardSinks()
sinks: DashboardSinks = st.session_state["sinks"]

try:
    logos = _load_logos(str(settings.logo_directory_path))
except Exception as e:
    st.error(f"Failed to load logo directory: {e}")
    logger.error(f"Logo directory error: {e}")
    raise e

header, button = st.columns([5, 1])
with header:
    st.title(f"📈 {settings.app_name}")
with button:
    refresh_clicked = st.button("Refresh", type="primary")

# Initial page load triggers one refresh, the button triggers the others
if refresh_clicked or not st.session_state.get("loaded", False):
    with st.spinner(settings.loading_message):
        report = asyncio.run(_run_refresh(settings, sinks, logos))
    st.session_state["loaded"] = True
    st.session_state["last_report"] = report

render_status(sinks.status)

st.header("🌎 Markets Today")
render_market_today(sinks.info_panel)
st.divider()

st.header("📋 Market Summary")
render_table(sinks.summary_body)
st.divider()

col1, col2 = st.columns(2)
with col1:
    st.header("🚀 Biggest Gainers")
    render_table(sinks.gainers_body, active=True)
with col2:
    st.header("📉 Biggest Losers")
    render_table(sinks.losers_body, active=True)
