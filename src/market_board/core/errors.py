"""Error taxonomy for section loading.

All section failures are recoverable and local to the section that raised
them. Loaders turn them into failed ``LoadResult`` values.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Why a section could not be loaded."""

    FETCH = "fetch"
    PARSE = "parse"
    MISSING_DATA = "missing_data"


class MarketBoardError(Exception):
    """Base class for all Market Board errors."""


class LogoDirectoryError(MarketBoardError):
    """The logo asset could not be read or has the wrong shape."""


class SectionLoadError(MarketBoardError):
    """A section endpoint could not deliver usable data."""

    kind: FailureKind

    def __init__(self, endpoint: str, cause: BaseException | str) -> None:
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"{self.kind.value} failure on {endpoint}: {cause}")


class FetchFailure(SectionLoadError):
    """Transport error or non-success HTTP status."""

    kind = FailureKind.FETCH


class ParseFailure(SectionLoadError):
    """Response body is not valid JSON."""

    kind = FailureKind.PARSE


class MissingDataFailure(SectionLoadError):
    """Well-formed JSON that lacks the data the section needs."""

    kind = FailureKind.MISSING_DATA
