"""
Utility functions for invoice form parsing and formatting.

Provides helpers for:
- Price parsing with browser ``parseFloat`` prefix rules
- Total derivation and decimal text formatting
- Placeholder address validation
- Due date conversion to epoch milliseconds
- The address query path used after a wallet connects
"""

import math
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable
from urllib.parse import urlencode

if TYPE_CHECKING:
    from invoice_dapp.models.invoice import LineItem

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_ADDRESS = re.compile(r"[a-z0-9]+")
_DATE_ONLY = re.compile(r"(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_decimal(text: str | None) -> float:
    """
    Parse the leading numeric portion of a price string.

    Follows the browser ``parseFloat`` rule: leading whitespace is skipped
    and the longest numeric prefix is read, so ``"12abc"`` is 12. Text with
    no numeric prefix (including the empty string) counts as 0.

    Args:
        text: Price text as typed into the form.

    Returns:
        The parsed value, or 0.0 when nothing numeric is present.
    """
    if not text:
        return 0.0
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if not match:
        return 0.0
    return float(match.group(0))


def compute_total(items: Iterable["LineItem"]) -> float:
    """Sum the parsed prices of the given line items."""
    return sum((parse_decimal(item.item_price) for item in items), 0.0)


def format_amount(value: float) -> str:
    """
    Format a number as decimal text the way a browser prints it.

    Integral values have no fractional part (``100``), other values use the
    shortest representation that round-trips (``350.5``). Exponent notation
    is only used below 1e-6 and from 1e21 up.

    Args:
        value: Amount to format.

    Returns:
        Decimal text suitable for the ``amount`` field of the message.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    k = len(text)
    # Position of the decimal point relative to the first digit.
    n = k + exponent

    if k <= n <= 21:
        return sign + text + "0" * (n - k)
    if 0 < n <= 21:
        return sign + text[:n] + "." + text[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + text
    e = n - 1
    mantissa = text if k == 1 else f"{text[0]}.{text[1:]}"
    return f"{sign}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def is_valid_address(address: str) -> bool:
    """
    Return True if address is non-empty lowercase letters and digits only.

    This is a placeholder check; it does not verify bech32 checksums,
    prefixes or length.
    """
    return bool(address) and _ADDRESS.fullmatch(address) is not None


def due_date_to_epoch_millis(text: str | None) -> int | float:
    """
    Convert a due date string to epoch milliseconds.

    Date-only forms (``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``) are read as UTC
    midnight. Date-time forms without an offset are read in local time;
    forms with an offset use it.

    Years before 0001 are outside what datetime supports, so ``0000-01-01``
    gives NaN even though a browser would accept it. A date input never
    produces such a value.

    Args:
        text: Date text from the date input.

    Returns:
        Integer milliseconds since the epoch, or NaN when the text is empty
        or cannot be parsed.
    """
    if not text:
        return math.nan

    date_only = _DATE_ONLY.fullmatch(text)
    try:
        if date_only:
            year, month, day = date_only.groups()
            parsed = datetime(int(year), int(month or 1), int(day or 1), tzinfo=timezone.utc)
        else:
            parsed = datetime.fromisoformat(text)
            if parsed.tzinfo is None:
                parsed = parsed.astimezone()
    except (ValueError, OverflowError, OSError):
        return math.nan

    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def address_query_path(address: str) -> str:
    """Return the root path with the connected address as a query parameter."""
    return f"/?{urlencode({'address': address})}"
