"""Market Board - Command Line Entry Point.

Supports:
- refresh: Run one refresh against the stock API and log every section
- logo: Resolve the logo URL of a ticker symbol
"""

import argparse
import asyncio
import sys

from loguru import logger

from market_board.app.logic.refresh import DashboardSinks, RefreshOrchestrator, RefreshReport
from market_board.config.settings import Settings, get_settings
from market_board.core.domain_models import DisplayRow
from market_board.core.logo_directory import LogoDirectory
from market_board.core.sinks import TableBody
from market_board.etl.extract import StockApiClient


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def _format_row(row: DisplayRow) -> str:
    parts = [row.symbol_text, row.price_text, row.change_text, row.badge_text]
    if row.volume_text is not None:
        parts.append(row.volume_text)
    return " | ".join(parts)


def _log_table(title: str, body: TableBody) -> None:
    logger.info(f"--- {title} ({len(body)} rows) ---")
    for row in body.rows:
        logger.info(_format_row(row))


async def _refresh_once(settings: Settings, sinks: DashboardSinks) -> RefreshReport:
    logos = LogoDirectory.from_yaml(settings.logo_directory_path)
    async with StockApiClient.from_settings(settings) as client:
        orchestrator = RefreshOrchestrator.from_settings(settings, client, sinks, logos)
        return await orchestrator.refresh()


def cmd_refresh(args: argparse.Namespace) -> None:
    """Run one refresh and log the rendered sections."""
    settings = get_settings()
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url.rstrip("/")})

    logger.info(f"=== Refreshing from {settings.base_url} ===")
    sinks = DashboardSinks()
    report = asyncio.run(_refresh_once(settings, sinks))

    view = sinks.info_panel.view
    if view is not None:
        logger.info(
            f"Market: {view.market} | Leader: {view.leader} | "
            f"Top: {view.top_name} {view.top_percent.text} | "
            f"Worst: {view.worst_name} {view.worst_percent.text}"
        )
    _log_table("Market Summary", sinks.summary_body)
    _log_table("Biggest Gainers", sinks.gainers_body)
    _log_table("Biggest Losers", sinks.losers_body)

    if sinks.status.visible:
        logger.warning(sinks.status.message)
    if not report.ok:
        logger.error(f"Failed sections: {', '.join(report.failed_sections)}")
        sys.exit(1)
    logger.success("✅ Refresh completed successfully")


def cmd_logo(args: argparse.Namespace) -> None:
    """Resolve the logo of one symbol."""
    settings = get_settings()
    logos = LogoDirectory.from_yaml(settings.logo_directory_path)
    url = logos.resolve(args.symbol)
    if url is None:
        logger.warning(f"No logo for {args.symbol}")
        sys.exit(1)
    print(url)


def main() -> None:
    """Main CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(
        description=f"{settings.app_name} - market dashboard client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Refresh command
    parser_refresh = subparsers.add_parser("refresh", help="Fetch and render all sections once")
    parser_refresh.add_argument(
        "--base-url",
        type=str,
        help="Stock API base URL (default: MARKET_BOARD_BASE_URL or localhost)",
    )
    parser_refresh.set_defaults(func=cmd_refresh)

    # Logo command
    parser_logo = subparsers.add_parser("logo", help="Resolve the logo URL of a symbol")
    parser_logo.add_argument("symbol", type=str, help="Ticker symbol, exact case")
    parser_logo.set_defaults(func=cmd_logo)

    # Parse arguments and execute
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
