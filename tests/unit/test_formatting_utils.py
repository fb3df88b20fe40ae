"""Unit tests for number and date helpers"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from rooms_payments.utils.date_utils import format_display_datetime, get_timezone, parse_timestamp
from rooms_payments.utils.number_utils import format_grouped, group_indian_digits


@pytest.mark.parametrize(
    "digits, expected",
    [
        ("0", "0"),
        ("999", "999"),
        ("1000", "1,000"),
        ("99999", "99,999"),
        ("100000", "1,00,000"),
        ("12345678", "1,23,45,678"),
    ],
)
def test_group_indian_digits(digits, expected):
    assert group_indian_digits(digits) == expected


def test_format_grouped_rounds_to_three_decimals():
    assert format_grouped(Decimal("0.0005")) == "0.001"
    assert format_grouped(Decimal("10.100")) == "10.1"
    assert format_grouped(Decimal("-0.0001")) == "0"


def test_parse_timestamp_applies_default_timezone_to_naive_values():
    ist = timezone(timedelta(hours=5, minutes=30))
    parsed = parse_timestamp("2024-01-15T10:30:00", ist)
    assert parsed == datetime(2024, 1, 15, 5, 0, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_unknown_types():
    assert parse_timestamp(True) is None
    assert parse_timestamp(object()) is None
    assert parse_timestamp("   ") is None
    assert parse_timestamp(float("nan")) is None


def test_format_display_datetime_converts_timezone():
    moment = datetime(2024, 1, 15, 5, 0, tzinfo=timezone.utc)
    ist = timezone(timedelta(hours=5, minutes=30))
    assert format_display_datetime(moment, ist) == "15 Jan 2024, 10:30 am"


def test_get_timezone_utc():
    assert get_timezone("UTC") is timezone.utc
    assert get_timezone("utc") is timezone.utc
