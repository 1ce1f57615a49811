import math
from datetime import date, datetime
from decimal import Decimal

import pytest

from transaction_ledger.coercion import parse_amount, parse_date


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("100", 100.0),
        ("100.25", 100.25),
        ("  -3.5", -3.5),
        ("+7", 7.0),
        (".5", 0.5),
        ("12.50 USD", 12.5),
        ("1e3", 1000.0),
        ("1e", 1.0),
        ("42abc", 42.0),
        (50, 50.0),
        (12.75, 12.75),
        (Decimal("9.99"), 9.99),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_amount_reads_numeric_prefix(raw, expected):
    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "", "   ", ".", "-", "$12", None, True, False, [1]])
def test_parse_amount_unreadable_is_nan(raw):
    assert math.isnan(parse_amount(raw))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2019-01-14", date(2019, 1, 14)),
        ("2019-1-2", date(2019, 1, 2)),
        ("2019/01/02", date(2019, 1, 2)),
        ("2019-02-30", date(2019, 3, 2)),
        ("2019-04-31", date(2019, 5, 1)),
        ("2020-02-30", date(2020, 3, 1)),
        (" 2019-03-05 ", date(2019, 3, 5)),
        ("2019-01-14T10:30:00", date(2019, 1, 14)),
        ("01/14/2019", date(2019, 1, 14)),
        ("January 14, 2019", date(2019, 1, 14)),
        ("14 Jan 2019", date(2019, 1, 14)),
        (date(2020, 2, 29), date(2020, 2, 29)),
        (datetime(2020, 2, 29, 23, 59), date(2020, 2, 29)),
    ],
)
def test_parse_date_layouts(raw, expected):
    assert parse_date(raw) == expected


@pytest.mark.parametrize(
    "raw", ["", "not a date", "2019-13-01", "2019-02-32", "2019-00-10", None, 20190114]
)
def test_parse_date_unreadable_is_none(raw):
    assert parse_date(raw) is None
