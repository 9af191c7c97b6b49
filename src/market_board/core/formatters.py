"""Display formatting for raw stock API values.

Pure functions only. Every formatter treats ``None`` and the literal string
``"null"`` (the API emits both) as absent and renders the placeholder, so a
cell never shows "nan", "None" or nothing at all.

Two percent formatters exist on purpose and keep different zero handling:

- ``format_percent_badge`` (table pills): ``value >= 0`` is positive.
- ``format_percent_arrow`` (market-today panel): ``value > 0`` is positive,
  so an exact zero gets the red down arrow.
"""

import math
import re

from market_board.core.domain_models import (
    DOWN_ARROW,
    PLACEHOLDER,
    UP_ARROW,
    PercentArrow,
    PercentBadge,
    RawValue,
    Sentiment,
)

# Volume already abbreviated by the server, e.g. "12.00M"
_ABBREVIATED_VOLUME = re.compile(r"^\d+(\.\d+)?[KMB]$")

_VOLUME_MAGNITUDES = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)

_NON_FINITE_TEXT = {"nan", "inf", "-inf", "infinity", "-infinity", "undefined"}


def is_absent(value: object) -> bool:
    """True for None and the API's literal "null"."""
    return value is None or value == "null"


def parse_number(value: object) -> float | None:
    """Parse a number leniently, returning None if it is not one.

    Accepts JSON numbers and pre-formatted strings such as "$150.00",
    "1,204.5" or "-0.80%".
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace("$", "").replace(",", "").removesuffix("%").strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    # drop negative zero
    return number + 0.0


def _two_decimals(value: RawValue) -> str:
    if is_absent(value):
        return PLACEHOLDER
    number = parse_number(value)
    if number is None:
        return PLACEHOLDER
    return f"{number:.2f}"


def format_price(value: RawValue) -> str:
    """Price with exactly two decimals."""
    return _two_decimals(value)


def format_change(value: RawValue) -> str:
    """Absolute price change with two decimals; no sign prefix is added."""
    return _two_decimals(value)


def format_text(value: object) -> str:
    """Plain text cell, placeholder when missing, empty or NaN/infinite."""
    if is_absent(value):
        return PLACEHOLDER
    if isinstance(value, float) and not math.isfinite(value):
        return PLACEHOLDER
    text = str(value).strip()
    if text.lower() in _NON_FINITE_TEXT:
        return PLACEHOLDER
    return text or PLACEHOLDER


def format_numeric_text(value: RawValue) -> str:
    """Server-formatted number shown verbatim, placeholder if it is not a number."""
    if is_absent(value) or parse_number(value) is None:
        return PLACEHOLDER
    return str(value).strip()


def classify_badge(number: float) -> Sentiment:
    return Sentiment.POSITIVE if number >= 0 else Sentiment.NEGATIVE


def classify_arrow(number: float) -> Sentiment:
    return Sentiment.POSITIVE if number > 0 else Sentiment.NEGATIVE


def format_percent_badge(value: RawValue) -> PercentBadge | str:
    """Percent pill for the tables, e.g. ``5.50%`` tagged positive.

    Returns the placeholder string instead of a badge when the value is
    absent or not numeric.
    """
    if is_absent(value):
        return PLACEHOLDER
    number = parse_number(value)
    if number is None:
        return PLACEHOLDER
    return PercentBadge(text=f"{number:.2f}%", sentiment=classify_badge(number))


def format_raw_badge(value: RawValue) -> PercentBadge | str:
    """Percent pill that keeps the server's pre-formatted text verbatim.

    Classification follows ``format_percent_badge``.
    """
    if is_absent(value):
        return PLACEHOLDER
    number = parse_number(value)
    if number is None:
        return PLACEHOLDER
    return PercentBadge(text=str(value).strip(), sentiment=classify_badge(number))


def format_percent_arrow(value: RawValue) -> PercentArrow:
    """Arrow-annotated percent for values that already carry a '%' suffix.

    No percent sign is appended. Absent values, the literal "-" and
    non-numeric text get a blank classification and the placeholder.
    """
    if is_absent(value) or value == PLACEHOLDER or value == "":
        return PercentArrow(text=PLACEHOLDER)
    number = parse_number(value)
    if number is None:
        return PercentArrow(text=PLACEHOLDER)
    sentiment = classify_arrow(number)
    arrow = UP_ARROW if sentiment is Sentiment.POSITIVE else DOWN_ARROW
    return PercentArrow(text=f"{str(value).strip()} {arrow}", sentiment=sentiment)


def format_volume(value: RawValue) -> str:
    """Abbreviate a share volume with decimal magnitudes (K, M, B).

    Zero counts as missing. Values below one thousand are shown as they
    came in, and strings the server already abbreviated pass through.
    """
    if is_absent(value) or not value:
        return PLACEHOLDER
    number = parse_number(value)
    if number is None:
        if isinstance(value, str) and _ABBREVIATED_VOLUME.match(value.strip()):
            return value.strip()
        return PLACEHOLDER
    if number == 0:
        return PLACEHOLDER
    for threshold, suffix in _VOLUME_MAGNITUDES:
        if number >= threshold:
            return f"{number / threshold:.2f}{suffix}"
    return str(value).strip()
