import math
from datetime import datetime, timezone

import pytest

from invoice_dapp.models.invoice import LineItem
from invoice_dapp.utils import (
    address_query_path,
    compute_total,
    due_date_to_epoch_millis,
    format_amount,
    is_valid_address,
    parse_decimal,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("100", 100.0),
        ("250.5", 250.5),
        ("  3.25", 3.25),
        ("12abc", 12.0),
        (".5", 0.5),
        ("-2", -2.0),
        ("1e3", 1000.0),
        ("1e", 1.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("-", 0.0),
    ],
)
def test_parse_decimal(text, expected) -> None:
    assert parse_decimal(text) == expected


def test_compute_total_ignores_non_numeric_prices() -> None:
    items = [
        LineItem("design", "100"),
        LineItem("build", "250.5"),
        LineItem("misc", "n/a"),
        LineItem("blank", ""),
    ]
    assert compute_total(items) == 350.5


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (350.5, "350.5"),
        (100.0, "100"),
        (0.0, "0"),
        (-0.0, "0"),
        (-12.75, "-12.75"),
        (0.1 + 0.2, "0.30000000000000004"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1e21, "1e+21"),
        (123456789012345680000.0, "123456789012345680000"),
        (math.inf, "Infinity"),
    ],
)
def test_format_amount(value, expected) -> None:
    assert format_amount(value) == expected


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("abc123", True),
        ("xyz2", True),
        ("ABC123", False),
        ("abc 123", False),
        ("", False),
        ("Invalid!", False),
        ("abc123\n", False),
    ],
)
def test_is_valid_address(address, expected) -> None:
    assert is_valid_address(address) is expected


def test_due_date_only_is_utc_midnight() -> None:
    expected = int(datetime(2025, 1, 1, tzinfo=timezone.utc).timestamp()) * 1000
    assert due_date_to_epoch_millis("2025-01-01") == expected
    assert expected == 1735689600000


def test_due_date_with_offset() -> None:
    assert due_date_to_epoch_millis("2025-01-01T01:00:00+01:00") == 1735689600000


def test_due_date_without_offset_uses_local_time() -> None:
    local = datetime(2025, 1, 1, 12, 30).astimezone()
    assert due_date_to_epoch_millis("2025-01-01T12:30:00") == int(local.timestamp()) * 1000


@pytest.mark.parametrize("text", ["", None, "not a date", "2025-13-01", "2025-02-30"])
def test_due_date_unparsable_is_nan(text) -> None:
    assert math.isnan(due_date_to_epoch_millis(text))


def test_address_query_path() -> None:
    assert address_query_path("xion1abc") == "/?address=xion1abc"


def test_due_date_before_year_one_is_nan() -> None:
    assert math.isnan(due_date_to_epoch_millis("0000-01-01"))
