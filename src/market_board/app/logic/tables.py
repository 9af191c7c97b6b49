"""Conversion of rendered rows into Polars frames for the table views."""

import polars as pl

from market_board.core.domain_models import DisplayRow

SUMMARY_COLUMNS = ["logo", "symbol", "price", "change", "change_pct", "sentiment"]
ACTIVE_COLUMNS = [*SUMMARY_COLUMNS, "volume", "rvol", "float", "market_cap"]

TABLE_SCHEMA = {column: pl.Utf8 for column in ACTIVE_COLUMNS}


def display_rows_to_frame(rows: list[DisplayRow], active: bool = False) -> pl.DataFrame:
    """Build a string-typed frame, one row per DisplayRow, order preserved.

    ``sentiment`` is null for rows without a badge; ``logo`` is null for
    symbols without a logo so no image cell is drawn.
    """
    columns = ACTIVE_COLUMNS if active else SUMMARY_COLUMNS
    records = [
        {
            "logo": row.logo_url,
            "symbol": row.symbol_text,
            "price": row.price_text,
            "change": row.change_text,
            "change_pct": row.badge_text,
            "sentiment": row.sentiment.value if row.sentiment is not None else None,
            "volume": row.volume_text,
            "rvol": row.rvol_text,
            "float": row.float_text,
            "market_cap": row.market_cap_text,
        }
        for row in rows
    ]
    schema = {column: TABLE_SCHEMA[column] for column in columns}
    if not records:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(records, schema=TABLE_SCHEMA).select(columns)
