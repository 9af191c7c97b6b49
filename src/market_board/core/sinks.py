"""Presentation sinks filled by the section loaders.

The protocols describe what a loader may do with its target. The in-memory
implementations hold the rendered content for the Streamlit views and for
tests; each one is written by exactly one owner.
"""

from typing import Protocol

from market_board.core.domain_models import DisplayRow, MarketInfoView


class TableSink(Protocol):
    def clear(self) -> None: ...

    def append(self, row: DisplayRow) -> None: ...


class InfoPanelSink(Protocol):
    def show(self, view: MarketInfoView) -> None: ...


class StatusSink(Protocol):
    def set(self, message: str, is_error: bool = False) -> None: ...

    def clear(self) -> None: ...


class TableBody:
    """Ordered rows of one table body."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.rows: list[DisplayRow] = []
        self.version = 0

    def __len__(self) -> int:
        return len(self.rows)

    def clear(self) -> None:
        self.rows = []
        self.version += 1

    def append(self, row: DisplayRow) -> None:
        self.rows.append(row)


class InfoPanel:
    """Market-today panel. Stays unset until the first successful load."""

    def __init__(self) -> None:
        self.view: MarketInfoView | None = None

    def show(self, view: MarketInfoView) -> None:
        self.view = view


class StatusIndicator:
    """Shared one-line status region."""

    def __init__(self) -> None:
        self.message = ""
        self.is_error = False

    @property
    def visible(self) -> bool:
        return bool(self.message)

    def set(self, message: str, is_error: bool = False) -> None:
        self.message = message
        self.is_error = is_error

    def clear(self) -> None:
        self.message = ""
        self.is_error = False
